"""Exception classes for jiramark.

Provides standardized exceptions for error handling throughout jiramark.
"""

from __future__ import annotations

from collections.abc import Iterable


class JiramarkError(Exception):
    """Base exception for all jiramark errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(JiramarkError):
    """Error during markup parsing.

    Raised when the parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class InlineParseError(ParseError):
    """No inline alternative matched at some position.

    Carries the absolute offset of the failure and the labels of the
    alternatives that were tried there, for use by a block-level driver.
    """

    def __init__(
        self,
        offset: int,
        found: str,
        expected: Iterable[str],
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize inline parse error.

        Args:
            offset: Absolute offset of the failure in the source buffer
            found: Text found at the failing position (empty at end of input)
            expected: Labels of the alternatives tried at ``offset``
            lineno: Line number of the failure (1-indexed)
            col_offset: Column of the failure (1-indexed)
            source_file: Path to source file (optional)
        """
        self.offset = offset
        self.found = found
        self.expected = tuple(sorted(set(expected)))

        unexpected = f"unexpected {found!r}" if found else "unexpected end of input"
        message = unexpected
        if self.expected:
            message = f"{unexpected}; expected {', '.join(self.expected)}"
        super().__init__(message, lineno, col_offset, source_file)
