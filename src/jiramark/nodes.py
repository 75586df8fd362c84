"""Typed AST nodes for jiramark.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
└── Inline (inline elements)
    ├── PlainText
    ├── Space
    ├── LineBreak
    ├── SpecialChar
    ├── Entity
    ├── Emoji
    ├── Anchor
    ├── Image
    ├── Link
    ├── Styled
    ├── ColoredText
    └── Monospaced

Every node carries an optional source location. Locations do not take
part in equality, so trees compare by shape and content only.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from jiramark.icons import Icon
from jiramark.location import SourceLocation


class InlineStyle(Enum):
    """Text styles selected by a delimiter character."""

    STRONG = "*"
    EMPHASIS = "_"
    INSERT = "+"
    STRIKEOUT = "-"
    SUPERSCRIPT = "^"
    SUBSCRIPT = "~"

    @property
    def delimiter(self) -> str:
        return self.value

    @classmethod
    def from_delimiter(cls, char: str) -> InlineStyle:
        """Map a delimiter character to its style.

        Raises:
            ValueError: If ``char`` is not a style delimiter
        """
        return cls(char)


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""

    location: SourceLocation | None = field(
        default=None, compare=False, repr=False, kw_only=True
    )


# =============================================================================
# Leaf Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class PlainText(Node):
    """Run of characters without markup meaning.

    Never empty and never contains a special character.

    """

    text: str


@dataclass(frozen=True, slots=True)
class Space(Node):
    """One or more spaces, collapsed."""



@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Line break within a paragraph.

    Markup: a newline that does not end the paragraph, or ``\\\\``

    """



@dataclass(frozen=True, slots=True)
class SpecialChar(Node):
    """A single punctuation character emitted literally.

    Either backslash-escaped (``\\*``) or a symbol without markup
    meaning at its position.

    """

    char: str


@dataclass(frozen=True, slots=True)
class Entity(Node):
    """HTML-style character reference.

    Markup: ``&amp;`` or ``&#38;``
    Stores the body only: ``amp`` or ``#38``.

    """

    name: str


@dataclass(frozen=True, slots=True)
class Emoji(Node):
    """Icon or smiley.

    Markup: ``:)`` or ``(y)``

    """

    icon: Icon


@dataclass(frozen=True, slots=True)
class Anchor(Node):
    """Named anchor target.

    Markup: ``{anchor:name}``

    """

    name: str


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image reference.

    Markup: ``!image.png!``

    """

    url: str


# =============================================================================
# Container Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markup: ``[url]`` or ``[alias|url]``
    The alias is empty when the link has none.

    """

    alias: tuple[Inline, ...]
    url: str


@dataclass(frozen=True, slots=True)
class Styled(Node):
    """Styled span.

    Markup: ``*strong*``, ``_emphasis_``, ``+insert+``, ``-strikeout-``,
    ``^superscript^``, ``~subscript~``

    """

    style: InlineStyle
    content: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ColoredText(Node):
    """Colored span.

    Markup: ``{color:red}text{color}`` or ``{color:#ff0000}text{color}``

    """

    color: str
    content: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Monospaced(Node):
    """Monospaced span.

    Markup: ``{{code}}``

    """

    content: tuple[Inline, ...]


# PEP 695 type alias for inline elements
type Inline = (
    PlainText
    | Space
    | LineBreak
    | SpecialChar
    | Entity
    | Emoji
    | Anchor
    | Image
    | Link
    | Styled
    | ColoredText
    | Monospaced
)
