"""Inline parsing subsystem for jiramark.

Provides mixins for parsing inline Jira markup:
- Whitespace, plain text and line breaks
- Styled spans (*, _, +, -, ^, ~), colored text and monospaced text
- Links, images and anchors
- Entities, emoji and literal symbols

Architecture:
Backtracking recursive descent. Each recognizer takes a position and an
immutable InlineState and returns a match or None; the dispatcher tries
them in a fixed order.

"""

from __future__ import annotations

from jiramark.parsing.inline.core import INLINE_ALTERNATIVES, InlineParsingCoreMixin
from jiramark.parsing.inline.enclosed import EnclosedSpanMixin
from jiramark.parsing.inline.links import LinkParsingMixin
from jiramark.parsing.inline.special import SpecialInlineMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EnclosedSpanMixin,
    LinkParsingMixin,
    SpecialInlineMixin,
):
    """Combined inline parsing mixin.

    Combines all inline parsing functionality into a single mixin
    that can be inherited by the parser class.

    Required Host Attributes:
        - _source: str
        - _length: int
        - _config: ParseConfig
        - _alternatives: tuple[Recognizer, ...]
        - _memo: dict[tuple[int, InlineState], InlineMatch | None]

    """

    pass


__all__ = [
    "INLINE_ALTERNATIVES",
    "InlineParsingMixin",
    "InlineParsingCoreMixin",
    "EnclosedSpanMixin",
    "LinkParsingMixin",
    "SpecialInlineMixin",
]
