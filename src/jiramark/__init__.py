"""
jiramark: inline parser for Jira wiki markup

Turns the inline markup of one paragraph or table cell into a typed,
immutable AST: text, spaces, line breaks, styled and monospaced spans,
colored text, links, images, anchors, entities, emoji and symbols.

Quick Start:
    >>> from jiramark import parse_inlines
    >>> parse_inlines("*bold* and (y)")
    (Styled(style=<InlineStyle.STRONG: '*'>, content=(PlainText(text='bold'),)), Space(), PlainText(text='and'), Space(), Emoji(icon=<Icon.THUMBS_UP: '(y)'>))

    >>> # Inside a table cell "|" is a separator, not text
    >>> from jiramark import parse_inline_run
    >>> nodes, stop = parse_inline_run("a|b", in_table=True)
    >>> stop
    1

Block-level drivers configure block terminators and the paragraph-end
predicate through ParseConfig (see jiramark.config).

Installation:
    pip install jiramark              # Zero runtime dependencies
"""

from jiramark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from jiramark.errors import InlineParseError, JiramarkError, ParseError
from jiramark.icons import Icon
from jiramark.location import SourceLocation
from jiramark.nodes import (
    Anchor,
    ColoredText,
    Emoji,
    Entity,
    Image,
    Inline,
    InlineStyle,
    LineBreak,
    Link,
    Monospaced,
    Node,
    PlainText,
    Space,
    SpecialChar,
    Styled,
)
from jiramark.parser import InlineParser
from jiramark.parsing import InlineState

__version__ = "0.1.0"


def parse_inlines(
    source: str,
    *,
    in_table: bool = False,
    in_link: bool = False,
    source_file: str | None = None,
) -> tuple[Inline, ...]:
    """Parse inline markup into a tuple of AST nodes.

    The whole source must be inline content. Use parse_inline_run() when
    the text may continue with block-level markup.

    Args:
        source: Inline markup of one paragraph or table cell
        in_table: Parse as table cell content ("|" is not text)
        in_link: Parse as link alias content (no links, "]" and "|" are not text)
        source_file: Optional source file path for error messages

    Returns:
        Inline elements in source order

    Raises:
        InlineParseError: If part of the source is not inline content, e.g.
            a block terminator like ``{quote}`` or a paragraph-ending newline.
            A trailing newline ends the paragraph, so ``parse_inlines("text\\n")``
            raises; strip it first or use parse_inline_run()

    Example:
        >>> parse_inlines("[Home|http://example.com]")
        (Link(alias=(PlainText(text='Home'),), url='http://example.com'),)

    """
    parser = InlineParser(source, source_file=source_file)
    return parser.parse(InlineState(in_table=in_table, in_link=in_link))


def parse_inline_run(
    source: str,
    pos: int = 0,
    *,
    in_table: bool = False,
    in_link: bool = False,
) -> tuple[tuple[Inline, ...], int]:
    """Parse inline elements from ``pos`` for as long as possible.

    This is the entry point for block-level drivers: parsing stops at end
    of input, at a block terminator, or wherever no inline element starts
    (such as a newline ending the paragraph, or "|" in a table cell).

    Returns:
        Tuple of (inline elements, offset where parsing stopped)

    """
    run = InlineParser(source).parse_run(pos, InlineState(in_table=in_table, in_link=in_link))
    return run.nodes, run.pos


__all__ = [
    # API
    "parse_inlines",
    "parse_inline_run",
    "InlineParser",
    "InlineState",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "JiramarkError",
    "ParseError",
    "InlineParseError",
    # Nodes
    "Node",
    "Inline",
    "InlineStyle",
    "Icon",
    "PlainText",
    "Space",
    "LineBreak",
    "SpecialChar",
    "Entity",
    "Emoji",
    "Anchor",
    "Image",
    "Link",
    "Styled",
    "ColoredText",
    "Monospaced",
    "SourceLocation",
    "__version__",
]
