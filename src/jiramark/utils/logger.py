"""Minimal logging utilities for jiramark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from jiramark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing paragraph")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "jiramark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'jiramark.mymodule'
    """
    if not (name == "jiramark" or name.startswith("jiramark.")):
        name = f"jiramark.{name}"
    return logging.getLogger(name)
