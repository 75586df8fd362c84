"""Parsing subsystem for jiramark.

Provides the parse state types and the mixin classes that make up the
inline parser:
- `InlineState`: immutable context flags (table cell, link alias, word marker)
- `InlineMatch` / `SequenceMatch`: recognizer results
- `InlineParsingMixin`: all inline recognizers and the dispatcher

"""

from jiramark.parsing.inline import INLINE_ALTERNATIVES, InlineParsingMixin
from jiramark.parsing.state import DEFAULT_STATE, InlineMatch, InlineState, SequenceMatch

__all__ = [
    "DEFAULT_STATE",
    "INLINE_ALTERNATIVES",
    "InlineMatch",
    "InlineParsingMixin",
    "InlineState",
    "SequenceMatch",
]
