"""Backtracking inline parser producing typed AST.

Turns one paragraph's (or one table cell's) worth of Jira markup into a
tuple of immutable inline nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingCoreMixin`: Dispatcher, whitespace, plain text, line breaks
- `EnclosedSpanMixin`: Styled, colored and monospaced spans
- `LinkParsingMixin`: Links, images, anchors
- `SpecialInlineMixin`: Entities, emoji, symbols

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share AST across threads

"""

from __future__ import annotations

from bisect import bisect_right

from jiramark.config import get_parse_config
from jiramark.errors import InlineParseError
from jiramark.location import SourceLocation
from jiramark.nodes import Inline
from jiramark.parsing import (
    DEFAULT_STATE,
    INLINE_ALTERNATIVES,
    InlineMatch,
    InlineParsingMixin,
    InlineState,
    SequenceMatch,
)
from jiramark.utils.logger import get_logger

logger = get_logger(__name__)


class InlineParser(InlineParsingMixin):
    """Backtracking parser for Jira inline markup.

    Usage:
            >>> parser = InlineParser("*bold* text")
            >>> parser.parse()
        (Styled(style=<InlineStyle.STRONG: '*'>, content=(PlainText(text='bold'),)), ...)

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_length",
        "_line_starts",
        "_config",
        "_alternatives",
        "_memo",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a parser if you need non-default configuration.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages

        """
        self._source = source
        self._source_file = source_file
        self._length = len(source)
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, char in enumerate(source) if char == "\n")
        self._config = get_parse_config()
        self._alternatives = tuple(getattr(self, name) for _, name in INLINE_ALTERNATIVES)
        self._memo: dict[tuple[int, InlineState], InlineMatch | None] = {}

    def parse(self, state: InlineState = DEFAULT_STATE) -> tuple[Inline, ...]:
        """Parse the whole source.

        Args:
            state: Initial context, e.g. ``InlineState(in_table=True)``

        Returns:
            Inline elements in source order

        Raises:
            InlineParseError: If some input cannot be parsed as inline markup

        """
        run = self.parse_run(0, state)
        if run.pos < self._length:
            raise self._error_at(run.pos)
        return run.nodes

    def parse_run(self, pos: int = 0, state: InlineState = DEFAULT_STATE) -> SequenceMatch:
        """Parse inline elements from ``pos`` until nothing more matches.

        Stops at end of input, at a block terminator or at a newline that
        ends the paragraph. The caller decides what to do with the rest.
        """
        return self.parse_many(pos, state)

    def _location(self, start: int, end: int) -> SourceLocation:
        line_index = bisect_right(self._line_starts, start) - 1
        return SourceLocation(
            lineno=line_index + 1,
            col_offset=start - self._line_starts[line_index] + 1,
            offset=start,
            end_offset=end,
            source_file=self._source_file,
        )

    def _error_at(self, pos: int) -> InlineParseError:
        """Build the error for input left over at ``pos``."""
        text = self._source
        location = self._location(pos, pos)

        if self.at_block_terminator(pos):
            found = text[pos : text.index("}", pos) + 1]
            expected: tuple[str, ...] = ()
        else:
            found = text[pos]
            expected = tuple(label for label, _ in INLINE_ALTERNATIVES)

        logger.debug("Inline parse stopped at %s on %r", location, found)
        return InlineParseError(
            offset=pos,
            found=found,
            expected=expected,
            lineno=location.lineno,
            col_offset=location.col_offset,
            source_file=self._source_file,
        )
