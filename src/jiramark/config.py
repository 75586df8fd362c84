"""ContextVar-based parse configuration for jiramark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The block-level driver sets the configuration once, and every inline
parser created in that context reads it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from jiramark.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(block_terminators=("quote",))):
        inlines = parse_inlines(text)

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from jiramark.blocks import DEFAULT_BLOCK_TERMINATORS, is_paragraph_end


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Holds the hooks supplied by the block-level driver.

    Attributes:
        block_terminators: Keywords that, wrapped in ``{}``, stop inline parsing
        paragraph_end: Predicate ``(text, pos) -> bool`` telling whether the
            newline just before ``pos`` ends the paragraph
        max_nesting: Deepest allowed nesting of spans and links; deeper
            openers are read as literal characters

    """

    block_terminators: tuple[str, ...] = DEFAULT_BLOCK_TERMINATORS
    paragraph_end: Callable[[str, int], bool] = is_paragraph_end
    max_nesting: int = 32

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. Lists of terminators are converted to tuples.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "block_terminators": ["quote"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.block_terminators
            ('quote',)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "block_terminators" in filtered:
            filtered["block_terminators"] = tuple(filtered["block_terminators"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(block_terminators=())):
        ...     parse_inlines("{quote}")
        (SpecialChar(char='{'), PlainText(text='quote'), SpecialChar(char='}'))

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
