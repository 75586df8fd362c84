"""Parse context and match results for the inline parser.

Both types are immutable. A recognizer receives the state as an argument
and hands back the state that follows its match, so a failed alternative
never leaves a modified state behind: the caller still holds the value it
passed in.

Usage:
    from jiramark.parsing.state import InlineMatch, InlineState

    state = InlineState(in_table=True)
    match = parser.parse_inline(0, state)
    if match is not None:
        node, pos, state = match

"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import NamedTuple

from jiramark.charsets import LINK_EXCLUDED, SYMBOL_CHARS, TABLE_EXCLUDED
from jiramark.nodes import Inline

_SYMBOLS_BY_CONTEXT: dict[tuple[bool, bool], frozenset[str]] = {
    (False, False): SYMBOL_CHARS,
    (True, False): SYMBOL_CHARS - TABLE_EXCLUDED,
    (False, True): SYMBOL_CHARS - LINK_EXCLUDED,
    (True, True): SYMBOL_CHARS - TABLE_EXCLUDED - LINK_EXCLUDED,
}


@dataclass(frozen=True, slots=True)
class InlineState:
    """Context flags threaded through one parse.

    Attributes:
        in_table: Parsing a table cell; ``|`` separates cells
        in_link: Parsing a link alias; no nested links, ``]`` and ``|`` end it
        last_word_end: Offset just past the last alphanumeric run, or -1
        depth: Number of enclosing spans or links around the cursor

    """

    in_table: bool = False
    in_link: bool = False
    last_word_end: int = -1
    depth: int = 0

    def after_word(self, pos: int) -> bool:
        """Check if ``pos`` directly follows an alphanumeric run."""
        return pos == self.last_word_end

    def with_word_end(self, pos: int) -> InlineState:
        return dataclasses.replace(self, last_word_end=pos)

    def settled(self, pos: int) -> InlineState:
        """Drop a word marker that no longer affects ``pos``.

        States that differ only in a stale marker behave identically, so
        this gives them a single canonical form.
        """
        if self.last_word_end == -1 or self.last_word_end == pos:
            return self
        return dataclasses.replace(self, last_word_end=-1)

    def nested(self, *, in_link: bool | None = None) -> InlineState:
        """State for the content of a span or link opened at this level."""
        return dataclasses.replace(
            self,
            in_link=self.in_link if in_link is None else in_link,
            last_word_end=-1,
            depth=self.depth + 1,
        )

    def symbol_chars(self) -> frozenset[str]:
        """Symbols that stand for themselves in this context."""
        return _SYMBOLS_BY_CONTEXT[self.in_table, self.in_link]


DEFAULT_STATE: InlineState = InlineState()


class InlineMatch(NamedTuple):
    """Successful recognizer result.

    Attributes:
        node: The parsed inline element
        pos: Offset just past the consumed input
        state: Context state after the match

    """

    node: Inline
    pos: int
    state: InlineState


class SequenceMatch(NamedTuple):
    """Result of parsing several inline elements in a row."""

    nodes: tuple[Inline, ...]
    pos: int
    state: InlineState
