"""Default block-level hooks for the inline parser.

The inline parser does not know about block structure. It asks two
questions of the block-level driver:

- Is the cursor at a block terminator such as ``{quote}``? Inline parsing
  stops there so the driver can close the block.
- Does a newline at the cursor end the paragraph? If so it is not an
  in-paragraph line break.

This module holds the defaults used when no driver overrides them via
:class:`jiramark.config.ParseConfig`.

Thread Safety:
    All data is immutable and the predicates are pure.

"""

import re

# Block macros closed by ``{name}``
DEFAULT_BLOCK_TERMINATORS: tuple[str, ...] = ("code", "noformat", "panel", "quote")

# Lines that start a new block, checked at the start of the following line
_BLOCK_START_RE = re.compile(
    r"""
    [ \t]*(?:
        h[1-6]\.                          # heading
      | [*#-]+[ \t]                       # list item
      | \|                                # table row
      | -{4,}[ \t]*(?:\n|$)               # horizontal rule
      | \{(?:code|noformat|panel|quote)[:}]  # block macro
    )
    """,
    re.VERBOSE,
)

# Whitespace-only line (blank line)
_BLANK_LINE_RE = re.compile(r"[ \t]*(?:\n|$)")


def is_block_terminator(text: str, pos: int, keywords: tuple[str, ...]) -> bool:
    """Check if ``{keyword}`` starts at ``pos`` for any of ``keywords``."""
    if not text.startswith("{", pos):
        return False
    for keyword in keywords:
        if text.startswith(keyword, pos + 1) and text.startswith("}", pos + 1 + len(keyword)):
            return True
    return False


def is_paragraph_end(text: str, pos: int) -> bool:
    """Default paragraph-end predicate.

    Called with ``pos`` just past a newline. The paragraph ends at end of
    input, at a blank line, or where the next line starts a new block.

    Args:
        text: Full source buffer
        pos: Offset of the first character after the newline

    Returns:
        True if the newline before ``pos`` ends the paragraph

    """
    if pos >= len(text):
        return True
    if _BLANK_LINE_RE.match(text, pos):
        return True
    return _BLOCK_START_RE.match(text, pos) is not None
