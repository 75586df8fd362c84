"""Core inline parsing for jiramark.

Provides the dispatcher and the primitive recognizers (whitespace, plain
text, line breaks).

Every recognizer has the signature ``(pos, state) -> InlineMatch | None``.
It never mutates the parser: on failure it returns None and the caller
continues from the same position with the same state, which is all the
backtracking this grammar needs.

Thread Safety:
All methods use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from jiramark.blocks import is_block_terminator
from jiramark.charsets import SPECIAL_CHARS
from jiramark.nodes import Inline, LineBreak, PlainText, Space
from jiramark.parsing.state import InlineMatch, InlineState, SequenceMatch

# Dispatch order: (label, method name). Emoji runs before plain text so
# that ":)" is not split; links and images run before styled spans and
# symbols because "[" and "!" are symbols too.
INLINE_ALTERNATIVES: tuple[tuple[str, str], ...] = (
    ("whitespace", "_try_whitespace"),
    ("emoji", "_try_emoji"),
    ("string", "_try_plain_text"),
    ("linebreak", "_try_linebreak"),
    ("link", "_try_link"),
    ("image", "_try_image"),
    ("styled text", "_try_styled"),
    ("monospaced text", "_try_monospaced"),
    ("anchor", "_try_anchor"),
    ("entity", "_try_entity"),
    ("symbol", "_try_symbol"),
)


class InlineParsingCoreMixin:
    """Dispatcher and primitive recognizers.

    Required Host Attributes:
        - _source: str
        - _length: int
        - _config: ParseConfig
        - _alternatives: tuple[Recognizer, ...]
        - _memo: dict[tuple[int, InlineState], InlineMatch | None]

    Required Host Methods:
        - _location(start, end) -> SourceLocation
        - one ``_try_*`` method per entry in INLINE_ALTERNATIVES

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _source: str
    # _length: int
    # _config: ParseConfig
    # _alternatives: tuple[Recognizer, ...]
    # _memo: dict[tuple[int, InlineState], InlineMatch | None]

    def parse_inline(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse one inline element at ``pos``.

        Fails at end of input, at a block terminator, or when no
        alternative matches. Results are memoized per position and state,
        so repeated attempts from different backtracking paths are cheap.
        """
        state = state.settled(pos)
        key = (pos, state)
        try:
            return self._memo[key]
        except KeyError:
            pass

        match = None
        if pos < self._length and not self.at_block_terminator(pos):
            for recognizer in self._alternatives:
                match = recognizer(pos, state)
                if match is not None:
                    break
        self._memo[key] = match
        return match

    def parse_many(self, pos: int, state: InlineState) -> SequenceMatch:
        """Parse inline elements until one fails; never fails itself."""
        nodes: list[Inline] = []
        while (match := self.parse_inline(pos, state)) is not None:
            nodes.append(match.node)
            pos = match.pos
            state = match.state
        return SequenceMatch(tuple(nodes), pos, state)

    def at_block_terminator(self, pos: int) -> bool:
        """Check if a configured ``{keyword}`` terminator starts at ``pos``."""
        return is_block_terminator(self._source, pos, self._config.block_terminators)

    def _try_whitespace(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse one or more spaces. Tabs are not whitespace here."""
        text = self._source
        end = pos
        while end < self._length and text[end] == " ":
            end += 1
        if end == pos:
            return None
        return InlineMatch(Space(location=self._location(pos, end)), end, state)

    def _try_plain_text(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse a run of characters without markup meaning.

        An alphanumeric run stops at the first other character and marks
        the state as being after a word. Any other run extends to the next
        special character and leaves the marker alone.
        """
        text = self._source
        text_len = self._length
        char = text[pos]

        if char.isalnum():
            end = pos + 1
            while end < text_len and text[end].isalnum():
                end += 1
            node = PlainText(text[pos:end], location=self._location(pos, end))
            return InlineMatch(node, end, state.with_word_end(end))

        if char in SPECIAL_CHARS:
            return None
        end = pos + 1
        while end < text_len and text[end] not in SPECIAL_CHARS:
            end += 1
        return InlineMatch(PlainText(text[pos:end], location=self._location(pos, end)), end, state)

    def _try_linebreak(self, pos: int, state: InlineState) -> InlineMatch | None:
        """Parse an in-paragraph newline or an explicit ``\\\\`` break."""
        text = self._source
        if text[pos] == "\n":
            if self._config.paragraph_end(text, pos + 1):
                return None
            return InlineMatch(LineBreak(location=self._location(pos, pos + 1)), pos + 1, state)

        # "\\" but not "\\\", which is an escaped backslash followed by one more
        if text.startswith("\\\\", pos) and not text.startswith("\\", pos + 2):
            return InlineMatch(LineBreak(location=self._location(pos, pos + 2)), pos + 2, state)
        return None
