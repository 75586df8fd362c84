"""Tests for AST node types and the inline parse state."""

import dataclasses

import pytest

from jiramark import (
    InlineState,
    InlineStyle,
    Link,
    PlainText,
    SourceLocation,
    Styled,
)
from jiramark.charsets import SYMBOL_CHARS, is_punctuation, is_word_boundary


class TestNodes:
    """Frozen dataclass nodes."""

    def test_frozen(self) -> None:
        node = PlainText("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.text = "b"  # type: ignore[misc]

    def test_location_is_keyword_only(self) -> None:
        location = SourceLocation(lineno=1, col_offset=1)
        node = PlainText("a", location=location)
        assert node.location is location

    def test_equality_ignores_location(self) -> None:
        first = PlainText("a", location=SourceLocation(lineno=1, col_offset=1))
        second = PlainText("a", location=SourceLocation(lineno=9, col_offset=4, offset=40))
        assert first == second
        assert hash(first) == hash(second)

    def test_repr_omits_location(self) -> None:
        node = PlainText("a", location=SourceLocation(lineno=1, col_offset=1))
        assert repr(node) == "PlainText(text='a')"

    def test_pattern_matching(self) -> None:
        node = Link((PlainText("Home"),), "/home")
        match node:
            case Link(alias=(PlainText(text=label),), url=url):
                assert (label, url) == ("Home", "/home")
            case _:
                pytest.fail("Link did not match")

    @pytest.mark.parametrize("style", list(InlineStyle))
    def test_style_delimiter_round_trip(self, style: InlineStyle) -> None:
        assert InlineStyle.from_delimiter(style.delimiter) is style

    def test_unknown_delimiter(self) -> None:
        with pytest.raises(ValueError):
            InlineStyle.from_delimiter("#")

    def test_nested_equality(self) -> None:
        assert Styled(InlineStyle.STRONG, (PlainText("a"),)) != Styled(
            InlineStyle.EMPHASIS, (PlainText("a"),)
        )


class TestSourceLocation:
    """Location formatting."""

    def test_str(self) -> None:
        assert str(SourceLocation(lineno=3, col_offset=7)) == "3:7"

    def test_str_with_file(self) -> None:
        assert str(SourceLocation(lineno=3, col_offset=7, source_file="a.txt")) == "a.txt:3:7"


class TestInlineState:
    """Immutable parse context."""

    def test_defaults(self) -> None:
        state = InlineState()
        assert (state.in_table, state.in_link, state.last_word_end, state.depth) == (
            False,
            False,
            -1,
            0,
        )

    def test_after_word(self) -> None:
        state = InlineState().with_word_end(4)
        assert state.after_word(4)
        assert not state.after_word(5)
        assert not InlineState().after_word(0)

    def test_settled_drops_stale_marker(self) -> None:
        state = InlineState(in_table=True).with_word_end(4)
        assert state.settled(4) is state
        assert state.settled(5) == InlineState(in_table=True)

    def test_nested(self) -> None:
        state = InlineState(in_table=True).with_word_end(2)
        inner = state.nested(in_link=True)
        assert inner == InlineState(in_table=True, in_link=True, last_word_end=-1, depth=1)
        assert state.nested().in_link is False
        assert inner.nested().in_link is True
        assert inner.nested().depth == 2

    def test_hashable(self) -> None:
        assert len({InlineState(), InlineState(), InlineState(in_link=True)}) == 2

    def test_symbol_chars(self) -> None:
        assert InlineState().symbol_chars() == SYMBOL_CHARS
        assert "|" not in InlineState(in_table=True).symbol_chars()
        link_symbols = InlineState(in_link=True).symbol_chars()
        assert "]" not in link_symbols
        assert "|" not in link_symbols
        assert "[" in link_symbols

    def test_link_alias_symbols(self) -> None:
        assert InlineState(in_link=True).symbol_chars() == SYMBOL_CHARS - {"]", "|"}
        assert "\n" not in SYMBOL_CHARS


class TestCharsets:
    """Character classification helpers."""

    @pytest.mark.parametrize("char", ["*", "|", "\\", ".", "§", "€", "«"])
    def test_punctuation(self, char: str) -> None:
        assert is_punctuation(char)

    @pytest.mark.parametrize("char", ["a", "1", " ", "\t", "ß", ""])
    def test_not_punctuation(self, char: str) -> None:
        assert not is_punctuation(char)

    def test_word_boundary(self) -> None:
        assert is_word_boundary("ab", 2)
        assert is_word_boundary("a1", 1)
        assert is_word_boundary("a.", 1)
        assert not is_word_boundary("ab", 1)
