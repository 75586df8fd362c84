"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from jiramark.charsets import SPECIAL_CHARS

    if char in SPECIAL_CHARS:  # ends a plain-text run
        ...
"""

import unicodedata

# Punctuation with markup meaning somewhere in the inline grammar
SYMBOL_CHARS: frozenset[str] = frozenset("_+-*^~|[]{}()!&\\")

# Characters that end a plain-text run
SPECIAL_CHARS: frozenset[str] = frozenset(" \n") | SYMBOL_CHARS

# Symbols that are cell separators inside a table
TABLE_EXCLUDED: frozenset[str] = frozenset("|")

# Symbols that end a link alias
LINK_EXCLUDED: frozenset[str] = frozenset("]|")

# Style delimiters, in no particular order
STYLE_DELIMITERS: frozenset[str] = frozenset("*_+-^~")

# Characters allowed in an icon name between parentheses
ICON_NAME_PUNCTUATION: frozenset[str] = frozenset("/!+-?*")

# Characters that end a link url
LINK_URL_EXCLUDED: frozenset[str] = frozenset("|] \n")

# Characters that may not appear in an image url
IMAGE_URL_EXCLUDED: frozenset[str] = frozenset("\r\t\n")


def is_punctuation(char: str) -> bool:
    """Check if character may be backslash-escaped.

    Accepts ASCII punctuation and anything in a Unicode punctuation (P*)
    or symbol (S*) category. Symbols are included on purpose, so ``\\+``,
    ``\\|`` and ``\\~`` escape even though their category is S*, not P*.

    """
    if not char:
        return False
    if char.isascii():
        return char.isprintable() and not char.isalnum() and char != " "
    cat = unicodedata.category(char)
    return cat.startswith("P") or cat.startswith("S")


def is_word_boundary(text: str, pos: int) -> bool:
    """Check if ``pos`` is at end of input or before a non-letter."""
    return pos >= len(text) or not text[pos].isalpha()
