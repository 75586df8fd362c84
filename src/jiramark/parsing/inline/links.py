"""Link, image and anchor parsing for jiramark.

Markup:
- Link: ``[url]`` or ``[alias|url]``; the alias is inline markup
- Image: ``!image.png!``
- Anchor: ``{anchor:name}``

Links do not nest. While a link alias is parsed the state carries
``in_link``, which refuses inner links and stops bare ``]`` and ``|``
from being read as text.
"""

from __future__ import annotations

from jiramark.charsets import IMAGE_URL_EXCLUDED, LINK_URL_EXCLUDED
from jiramark.nodes import Anchor, Image, Inline, Link
from jiramark.parsing.state import InlineMatch, InlineState, SequenceMatch
from jiramark.utils.logger import get_logger

logger = get_logger(__name__)

_ANCHOR_PREFIX = "{anchor:"


class LinkParsingMixin:
    """Link, image and anchor recognizers.

    Required Host Attributes:
        - _source: str
        - _length: int
        - _config: ParseConfig

    Required Host Methods:
        - parse_many(pos, state) -> SequenceMatch

    """

    def _try_link(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse ``[url]`` or ``[alias|url]``.

        The returned state is the caller's: ``in_link`` only holds inside
        the brackets.
        """
        text = self._source
        if text[pos] != "[":
            return None
        if state.in_link:
            logger.debug("Nested link at offset %d read as text", pos)
            return None
        if state.depth >= self._config.max_nesting:
            return None

        alias: tuple[Inline, ...] = ()
        url_start = pos + 1
        aliased = self._parse_link_alias(url_start, state.nested(in_link=True))
        if aliased is not None:
            alias = aliased.nodes
            url_start = aliased.pos

        url_end = url_start
        while url_end < self._length and text[url_end] not in LINK_URL_EXCLUDED:
            url_end += 1
        if url_end == url_start or url_end >= self._length or text[url_end] != "]":
            return None

        end = url_end + 1
        node = Link(alias, text[url_start:url_end], location=self._location(pos, end))
        return InlineMatch(node, end, state)

    def _parse_link_alias(self, pos: int, state: InlineState) -> SequenceMatch | None:
        """Parse one or more inline elements followed by ``|``."""
        run = self.parse_many(pos, state)
        if not run.nodes or not self._source.startswith("|", run.pos):
            return None
        return SequenceMatch(run.nodes, run.pos + 1, run.state)

    def _try_image(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse ``!url!``. The url may not contain CR, TAB or LF."""
        text = self._source
        if text[pos] != "!":
            return None

        end = pos + 1
        while end < self._length and text[end] != "!":
            if text[end] in IMAGE_URL_EXCLUDED:
                return None
            end += 1
        if end == pos + 1 or end >= self._length:
            return None
        return InlineMatch(Image(text[pos + 1 : end], location=self._location(pos, end + 1)), end + 1, state)

    def _try_anchor(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse ``{anchor:name}``; spaces in the name are dropped."""
        text = self._source
        if not text.startswith(_ANCHOR_PREFIX, pos):
            return None

        start = pos + len(_ANCHOR_PREFIX)
        close = text.find("}", start)
        if close == -1:
            return None
        raw_name = text[start:close]
        if "\n" in raw_name:
            return None

        end = close + 1
        return InlineMatch(Anchor(raw_name.replace(" ", ""), location=self._location(pos, end)), end, state)
