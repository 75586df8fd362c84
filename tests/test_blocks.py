"""Tests for the default block-level hooks."""

import pytest

from jiramark.blocks import DEFAULT_BLOCK_TERMINATORS, is_block_terminator, is_paragraph_end


class TestIsBlockTerminator:
    """``{keyword}`` detection."""

    @pytest.mark.parametrize("keyword", DEFAULT_BLOCK_TERMINATORS)
    def test_default_keywords(self, keyword: str) -> None:
        assert is_block_terminator(f"x{{{keyword}}}", 1, DEFAULT_BLOCK_TERMINATORS)

    def test_wrong_position(self) -> None:
        assert not is_block_terminator("x{quote}", 0, DEFAULT_BLOCK_TERMINATORS)

    def test_unclosed(self) -> None:
        assert not is_block_terminator("{quote", 0, DEFAULT_BLOCK_TERMINATORS)

    def test_keyword_with_parameters_is_not_a_terminator(self) -> None:
        # "{code:java}" opens a block, it does not close one
        assert not is_block_terminator("{code:java}", 0, DEFAULT_BLOCK_TERMINATORS)

    def test_prefix_of_keyword(self) -> None:
        assert not is_block_terminator("{quo}", 0, DEFAULT_BLOCK_TERMINATORS)

    def test_custom_keywords(self) -> None:
        assert is_block_terminator("{color}", 0, ("color",))
        assert not is_block_terminator("{quote}", 0, ())


class TestIsParagraphEnd:
    """The default paragraph-end predicate."""

    def test_end_of_input(self) -> None:
        assert is_paragraph_end("a\n", 2)

    @pytest.mark.parametrize("text", ["a\n\nb", "a\n   \nb", "a\n\t\n"])
    def test_blank_line(self, text: str) -> None:
        assert is_paragraph_end(text, 2)

    @pytest.mark.parametrize(
        "next_line",
        ["h1. Title", "* item", "# item", "- item", "** nested", "|cell|", "----", "{code}", "{panel:title=x}"],
    )
    def test_block_start(self, next_line: str) -> None:
        assert is_paragraph_end("a\n" + next_line, 2)

    @pytest.mark.parametrize(
        "next_line",
        ["more text", "*bold* start", "-strike-", "h7. no", "--x", "{color:red}x{color}"],
    )
    def test_continuation(self, next_line: str) -> None:
        assert not is_paragraph_end("a\n" + next_line, 2)
