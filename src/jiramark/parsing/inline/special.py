"""Special inline parsing for jiramark.

Handles entities, emoji and literal symbols.
"""

from __future__ import annotations

import re

from jiramark.charsets import ICON_NAME_PUNCTUATION, is_punctuation
from jiramark.icons import SMILEY_FACES, Icon, icon_from_name
from jiramark.nodes import Emoji, Entity, SpecialChar
from jiramark.parsing.state import InlineMatch, InlineState
from jiramark.utils.logger import get_logger

logger = get_logger(__name__)

# &name; or &#digits; -- letters are Unicode letters, digits are ASCII
_ENTITY_RE = re.compile(r"&(#[0-9]+|[^\W\d_]+);")


class SpecialInlineMixin:
    """Entity, emoji and symbol recognizers.

    Required Host Attributes:
        - _source: str
        - _length: int

    """

    def _try_entity(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse ``&name;`` or ``&#123;``. Names are not validated."""
        match = _ENTITY_RE.match(self._source, pos)
        if match is None:
            return None
        end = match.end()
        return InlineMatch(Entity(match.group(1), location=self._location(pos, end)), end, state)

    def _try_emoji(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse a smiley or a parenthesized icon.

        Neither form may be directly followed by a letter, so ``:Defer``
        stays text.
        """
        result = self._scan_smiley(pos)
        if result is None:
            result = self._scan_icon(pos)
        if result is None:
            return None

        icon, end = result
        if end < self._length and self._source[end].isalpha():
            return None
        return InlineMatch(Emoji(icon, location=self._location(pos, end)), end, state)

    def _scan_smiley(self, pos: int) -> tuple[Icon, int] | None:
        text = self._source
        if text.startswith(";)", pos):
            return Icon.WINKING, pos + 2
        if text[pos] != ":" or pos + 1 >= self._length:
            return None
        icon = SMILEY_FACES.get(text[pos + 1])
        if icon is None:
            return None
        return icon, pos + 2

    def _scan_icon(self, pos: int) -> tuple[Icon, int] | None:
        """Scan ``(name)`` and look the name up in the icon table."""
        text = self._source
        text_len = self._length
        if text[pos] != "(":
            return None

        end = pos + 1
        while end < text_len and (text[end].isalpha() or text[end] in ICON_NAME_PUNCTUATION):
            end += 1
        if end == pos + 1 or end >= text_len or text[end] != ")":
            return None

        name = text[pos + 1 : end]
        icon = icon_from_name(name)
        if icon is None:
            logger.debug("Unknown icon name %r at offset %d", name, pos)
            return None
        return icon, end + 1

    def _try_symbol(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse one literal punctuation character.

        A backslash escapes any punctuation character regardless of
        context. Unescaped, only symbols admissible in the current context
        qualify: no ``|`` in a table cell, no ``]`` or ``|`` in a
        link alias.
        """
        text = self._source
        char = text[pos]

        if char == "\\" and pos + 1 < self._length and is_punctuation(text[pos + 1]):
            node = SpecialChar(text[pos + 1], location=self._location(pos, pos + 2))
            return InlineMatch(node, pos + 2, state)

        if char in state.symbol_chars():
            return InlineMatch(SpecialChar(char, location=self._location(pos, pos + 1)), pos + 1, state)
        return None
