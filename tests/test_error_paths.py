"""Error-path and malformed input tests.

Tests that exercise error handling, edge cases, and graceful degradation
for invalid markup. These complement the happy-path tests in test_api.py.
"""

import logging

import pytest

from jiramark import parse_inline_run, parse_inlines
from jiramark.errors import InlineParseError, JiramarkError, ParseError

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing bracket", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="test.txt")
        assert str(err) == "test.txt:1:1 error"

    def test_is_jiramark_error(self) -> None:
        assert isinstance(ParseError("x"), JiramarkError)


# =========================================================================
# InlineParseError
# =========================================================================


class TestInlineParseError:
    """Verify InlineParseError formatting and hierarchy."""

    def test_expected_sorted_and_unique(self) -> None:
        err = InlineParseError(offset=3, found="|", expected=["symbol", "emoji", "symbol"])
        assert err.expected == ("emoji", "symbol")
        assert str(err) == "unexpected '|'; expected emoji, symbol"

    def test_end_of_input(self) -> None:
        err = InlineParseError(offset=0, found="", expected=())
        assert str(err) == "unexpected end of input"

    def test_nothing_expected(self) -> None:
        err = InlineParseError(offset=2, found="{quote}", expected=(), lineno=1, col_offset=3)
        assert str(err) == "1:3 unexpected '{quote}'"

    def test_hierarchy(self) -> None:
        err = InlineParseError(offset=0, found="x", expected=())
        assert isinstance(err, ParseError)
        assert isinstance(err, JiramarkError)

    def test_caught_as_parse_error(self) -> None:
        with pytest.raises(ParseError):
            parse_inlines("a\n\nb")


# =========================================================================
# Malformed markup degrades to text
# =========================================================================


class TestMalformedInput:
    """Broken markup never raises, it becomes literal text."""

    @pytest.mark.parametrize(
        "markup",
        [
            "*",
            "[",
            "]|[",
            "!",
            "{",
            "{{",
            "}}",
            "{color:}",
            "{anchor:",
            "&",
            "&#;",
            "(",
            ":",
            "\\",
            "*_+-^~",
            "[*a|b*]",
            "{{*}}",
        ],
    )
    def test_degrades_gracefully(self, markup: str) -> None:
        nodes = parse_inlines(markup)
        assert nodes

    def test_deep_nesting_does_not_overflow(self) -> None:
        markup = "*" + "_*" * 200 + "x" + "*_" * 200 + "*"
        nodes, stop = parse_inline_run(markup)
        assert stop == len(markup)
        assert nodes

    def test_many_open_brackets(self) -> None:
        markup = "[" * 300 + "x"
        assert parse_inlines(markup)[-1].text == "x"


# =========================================================================
# Logging
# =========================================================================


class TestDebugLogging:
    """Recoverable oddities are logged at debug level."""

    def test_unknown_icon_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="jiramark"):
            parse_inlines("(nope)")
        assert any("nope" in record.getMessage() for record in caplog.records)

    def test_parse_stop_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="jiramark"):
            with pytest.raises(InlineParseError):
                parse_inlines("a\n\nb")
        assert any(record.name == "jiramark.parser" for record in caplog.records)
