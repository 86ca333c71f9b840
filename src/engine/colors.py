"""Color symbols and basic land lookups."""
from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Union


class Color(str, Enum):
    WHITE = "W"
    BLUE = "U"
    BLACK = "B"
    RED = "R"
    GREEN = "G"


BASIC_LAND_NAMES: dict[Color, str] = {
    Color.WHITE: "Plains",
    Color.BLUE: "Island",
    Color.BLACK: "Swamp",
    Color.RED: "Mountain",
    Color.GREEN: "Forest",
}

COLOR_WORDS: dict[str, Color] = {color.name.lower(): color for color in Color}

_SEPARATORS = re.compile(r"[\s,/+]+")


class InvalidColorError(ValueError):
    """Raised when a color symbol is not one of W, U, B, R, G."""


def to_color(value: Union[Color, str]) -> Color:
    """Coerce a symbol such as ``"u"`` or a ``Color`` member to ``Color``."""
    if isinstance(value, Color):
        return value
    try:
        return Color(str(value).strip().upper())
    except ValueError:
        raise InvalidColorError(f"Unknown color symbol: {value!r}") from None


def normalize_colors(colors: Iterable[Union[Color, str]]) -> list[Color]:
    """Coerce colors and drop duplicates, keeping first-seen order."""
    seen: list[Color] = []
    for value in colors:
        color = to_color(value)
        if color not in seen:
            seen.append(color)
    return seen


def parse_colors(text: str) -> list[Color]:
    """Parse user input like ``"WU"``, ``"w, u"`` or ``"white blue"``.

    Tokens are split on whitespace, commas, slashes and plus signs. A token
    that names a color ("white", "blue", ...) maps to that color; any other
    token is read one symbol per character.

    Args:
        text: Raw color input

    Returns:
        Distinct colors in the order they first appear
    """
    symbols: list[Union[Color, str]] = []
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        word = COLOR_WORDS.get(token.lower())
        if word is not None:
            symbols.append(word)
        else:
            symbols.extend(token)
    return normalize_colors(symbols)


def color_string(colors: Iterable[Color]) -> str:
    return "".join(color.value for color in colors) or "colorless"
