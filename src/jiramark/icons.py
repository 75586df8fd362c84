"""Emoji and icon tables for jiramark.

Jira markup knows a closed set of icons. Five of them are written as
smileys (``:)``, ``;)``), the rest as a short name in parentheses
(``(y)``, ``(flagoff)``).

Example:
    >>> from jiramark.icons import Icon, icon_from_name
    >>> icon_from_name("y")
    <Icon.THUMBS_UP: '(y)'>
    >>> Icon.WINKING.markup
    ';)'

Thread Safety:
    All tables are immutable. Safe to read from any thread.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Icon(Enum):
    """Icons recognized by the inline parser.

    Each member's value is its canonical markup.
    """

    SMILING = ":D"
    SLIGHTLY_SMILING = ":)"
    FROWNING = ":("
    TONGUE = ":P"
    WINKING = ";)"
    THUMBS_UP = "(y)"
    THUMBS_DOWN = "(n)"
    INFO = "(i)"
    CHECKMARK = "(/)"
    X = "(x)"
    ATTENTION = "(!)"
    PLUS = "(+)"
    MINUS = "(-)"
    QUESTION_MARK = "(?)"
    ON = "(on)"
    OFF = "(off)"
    STAR = "(*)"
    STAR_RED = "(*r)"
    STAR_GREEN = "(*g)"
    STAR_BLUE = "(*b)"
    STAR_YELLOW = "(*y)"
    FLAG = "(flag)"
    FLAG_OFF = "(flagoff)"

    @property
    def markup(self) -> str:
        """Canonical markup for this icon."""
        return self.value


# Character following ':' in a smiley
SMILEY_FACES: MappingProxyType[str, Icon] = MappingProxyType(
    {
        "D": Icon.SMILING,
        ")": Icon.SLIGHTLY_SMILING,
        "(": Icon.FROWNING,
        "P": Icon.TONGUE,
    }
)

# Name between parentheses -> icon
ICON_NAMES: MappingProxyType[str, Icon] = MappingProxyType(
    {
        icon.value[1:-1]: icon
        for icon in Icon
        if icon.value.startswith("(")
    }
)


def icon_from_name(name: str) -> Icon | None:
    """Look up a parenthesized icon by name.

    Args:
        name: Text between the parentheses, e.g. ``"y"`` or ``"*r"``

    Returns:
        The matching Icon, or None if the name is unknown
    """
    return ICON_NAMES.get(name)
