"""Delimited span parsing for jiramark.

Styled and monospaced spans share one framing rule, the enclosing
combinator:

1. A span cannot open directly after a word (``snake_case_name`` has no
   emphasis in it).
2. The opening delimiter cannot be followed by whitespace
   (``* not bold*``).
3. Content is parsed one inline element at a time until the closing
   delimiter matches. A closing delimiter only counts when it is followed
   by a non-letter or the end of input.

Colored text (``{color:red}...{color}``) uses explicit open and close
tags and skips those word rules.
"""

from __future__ import annotations

import re

from jiramark.charsets import STYLE_DELIMITERS, is_word_boundary
from jiramark.nodes import ColoredText, Inline, InlineStyle, Monospaced, Styled
from jiramark.parsing.state import InlineMatch, InlineState, SequenceMatch

_COLOR_OPEN_RE = re.compile(r"\{color:(#[0-9a-fA-F]+|[^\W\d_]+)\}")
_COLOR_CLOSE = "{color}"


class EnclosedSpanMixin:
    """Enclosing combinator plus styled, colored and monospaced spans.

    Required Host Attributes:
        - _source: str
        - _length: int
        - _config: ParseConfig

    Required Host Methods:
        - parse_inline(pos, state) -> InlineMatch | None

    """

    def _parse_enclosed(
        self,
        pos: int,
        state: InlineState,
        opening: str,
        closing: str,
    ) -> SequenceMatch | None:
        """Parse ``opening`` content ``closing`` under the word rules.

        Returns the content (possibly empty) and the position after the
        closing delimiter. The returned state is the caller's.
        """
        text = self._source
        if state.after_word(pos) or not text.startswith(opening, pos):
            return None
        if state.depth >= self._config.max_nesting:
            return None

        end = pos + len(opening)
        if end < self._length and text[end].isspace():
            return None

        inner = state.nested()
        nodes: list[Inline] = []
        while True:
            if text.startswith(closing, end) and is_word_boundary(text, end + len(closing)):
                return SequenceMatch(tuple(nodes), end + len(closing), state)
            match = self.parse_inline(end, inner)
            if match is None:
                return None
            nodes.append(match.node)
            end = match.pos
            inner = match.state

    def _try_styled(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse a styled span, or colored text if no delimiter is in play.

        The delimiter is picked by looking at the current character; the
        same character closes the span. Styled spans must not be empty.
        """
        char = self._source[pos]
        if char not in STYLE_DELIMITERS:
            return self._try_colored_text(pos, state)

        span = self._parse_enclosed(pos, state, char, char)
        if span is None or not span.nodes:
            return None
        node = Styled(InlineStyle.from_delimiter(char), span.nodes, location=self._location(pos, span.pos))
        return InlineMatch(node, span.pos, state)

    def _try_colored_text(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse ``{color:name}...{color}``."""
        text = self._source
        opening = _COLOR_OPEN_RE.match(text, pos)
        if opening is None or state.depth >= self._config.max_nesting:
            return None

        end = opening.end()
        inner = state.nested()
        nodes: list[Inline] = []
        while not text.startswith(_COLOR_CLOSE, end):
            match = self.parse_inline(end, inner)
            if match is None:
                return None
            nodes.append(match.node)
            end = match.pos
            inner = match.state

        end += len(_COLOR_CLOSE)
        node = ColoredText(opening.group(1), tuple(nodes), location=self._location(pos, end))
        return InlineMatch(node, end, state)

    def _try_monospaced(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse ``{{code}}``. Empty content is allowed."""
        span = self._parse_enclosed(pos, state, "{{", "}}")
        if span is None:
            return None
        return InlineMatch(Monospaced(span.nodes, location=self._location(pos, span.pos)), span.pos, state)
