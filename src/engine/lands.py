"""Basic land options and distribution."""
from __future__ import annotations

from src.engine.colors import BASIC_LAND_NAMES, Color
from src.engine.schemas import CardOption


def get_basic(colors: list[Color]) -> list[CardOption]:
    """Return one basic land option per color, in the given order."""
    return [CardOption(name=BASIC_LAND_NAMES[color]) for color in colors]


def distribute_basics(colors: list[Color], count: int) -> dict[Color, int]:
    """Split a basic land count across colors.

    Every color gets the same share, so the split is a starting point for
    a deck that leans evenly on its colors.

    Args:
        colors: Colors in priority order (e.g. [Color.WHITE, Color.BLUE])
        count: Number of basic lands to distribute

    Returns:
        Dictionary mapping color to land count. The remainder goes to the
        first colors in the given order (e.g. 29 over W, U -> {W: 15, U: 14})
    """
    if not colors or count <= 0:
        return {color: 0 for color in colors}

    per_color = count // len(colors)
    remainder = count % len(colors)

    distribution: dict[Color, int] = {}
    for i, color in enumerate(colors):
        distribution[color] = per_color + (1 if i < remainder else 0)

    return distribution
