"""Mana base recommendations by number of colors."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from src.engine.colors import Color, color_string, normalize_colors
from src.engine.land_tables import LandRecord, load_land_table
from src.engine.lands import get_basic
from src.engine.observability import log_event
from src.engine.schemas import CardOption, ManaBaseCardEntry, ManaBaseEntry

logger = logging.getLogger(__name__)

NO_COLORS_MESSAGE = "Please select at least one color."
TOO_MANY_COLORS_MESSAGE = "Mana base suggestions for 4+ colors are not yet implemented."

BASICS = "basics"


class MatchMode(str, Enum):
    ALL = "all"
    ANY = "any"


@dataclass(frozen=True)
class SlotSpec:
    land_type: str
    count: int
    table: str
    match: Optional[MatchMode] = None


@dataclass(frozen=True)
class CategorySpec:
    category: str
    slots: tuple[SlotSpec, ...]


MANA_BASE_TABLES: dict[int, tuple[CategorySpec, ...]] = {
    1: (
        CategorySpec("Basic Lands", (SlotSpec("basic", 29, BASICS),)),
        CategorySpec("Utility Lands", (SlotSpec("utility", 9, "utility_lands"),)),
        CategorySpec("Mana Rocks", (SlotSpec("manaRock", 5, "mana_rocks"),)),
    ),
    2: (
        CategorySpec("Basic Lands", (SlotSpec("basic", 12, BASICS),)),
        CategorySpec(
            "Staple Lands",
            (
                SlotSpec("fetchLand", 4, "fetch_lands", MatchMode.ANY),
                SlotSpec("OGDualLand", 1, "og_dual_lands", MatchMode.ALL),
                SlotSpec("shockLand", 1, "shock_lands", MatchMode.ALL),
                SlotSpec("bondLand", 1, "bond_lands", MatchMode.ALL),
                SlotSpec("slowLand", 1, "slow_lands", MatchMode.ALL),
                SlotSpec("painLand", 1, "pain_lands", MatchMode.ALL),
                SlotSpec("checkLand", 1, "check_lands", MatchMode.ALL),
                SlotSpec("pathwayLand", 1, "pathway_lands", MatchMode.ALL),
                SlotSpec("filterLand", 1, "filter_lands", MatchMode.ALL),
                SlotSpec("horizonLand", 1, "horizon_lands", MatchMode.ANY),
                SlotSpec("tangoLand", 1, "tango_lands", MatchMode.ALL),
                SlotSpec("bounceLand", 1, "bounce_lands", MatchMode.ALL),
            ),
        ),
        CategorySpec("Utility Lands", (SlotSpec("utility", 7, "utility_lands"),)),
        CategorySpec("Mana Rocks", (SlotSpec("manaRock", 5, "mana_rocks"),)),
    ),
    3: (
        CategorySpec("Basic Lands", (SlotSpec("basic", 9, BASICS),)),
        CategorySpec(
            "Staple Lands",
            (
                SlotSpec("triome", 1, "triomes", MatchMode.ALL),
                SlotSpec("fetchLand", 8, "fetch_lands", MatchMode.ANY),
                SlotSpec("OGDualLand", 3, "og_dual_lands", MatchMode.ALL),
                SlotSpec("shockLand", 3, "shock_lands", MatchMode.ALL),
                SlotSpec("bondLand", 3, "bond_lands", MatchMode.ALL),
                SlotSpec("slowLand", 3, "slow_lands", MatchMode.ALL),
                SlotSpec("horizonLand", 2, "horizon_lands", MatchMode.ANY),
            ),
        ),
        CategorySpec("Utility Lands", (SlotSpec("utility", 5, "utility_lands"),)),
        CategorySpec("Mana Rocks", (SlotSpec("manaRock", 5, "mana_rocks"),)),
    ),
}

LAND_TYPES: frozenset[str] = frozenset(
    slot.land_type
    for categories in MANA_BASE_TABLES.values()
    for spec in categories
    for slot in spec.slots
)


def filter_lands_by_colors(
    lands: Iterable[LandRecord],
    colors: Iterable[Color],
    match_any: bool = False,
) -> list[CardOption]:
    """Select lands by color membership.

    Args:
        lands: Records to filter, in source order
        colors: Requested colors
        match_any: When False (default) every color of a land must be
            requested; when True a single shared color is enough

    Returns:
        Options for the matching lands, source order preserved
    """
    requested = set(colors)
    if match_any:
        return [CardOption(name=land.name) for land in lands if requested.intersection(land.colors)]
    return [CardOption(name=land.name) for land in lands if requested.issuperset(land.colors)]


def _sentinel(category: str, message: str) -> list[ManaBaseEntry]:
    return [
        ManaBaseEntry(
            category=category,
            cards=[
                ManaBaseCardEntry(
                    type=message,
                    count=1,
                    options=[CardOption(name=message)],
                )
            ],
        )
    ]


def _resolve_slot(slot: SlotSpec, colors: list[Color]) -> ManaBaseCardEntry:
    if slot.table == BASICS:
        options = get_basic(colors)
    elif slot.match is None:
        options = [CardOption(name=record.name) for record in load_land_table(slot.table)]
    else:
        options = filter_lands_by_colors(
            load_land_table(slot.table), colors, match_any=slot.match is MatchMode.ANY
        )
    return ManaBaseCardEntry(type=slot.land_type, count=slot.count, options=options)


def get_mana_base(
    colors: Iterable[Union[Color, str]],
    exclude: Iterable[str] = (),
) -> list[ManaBaseEntry]:
    """Recommend a mana base for a set of colors.

    Zero colors and four or more colors do not raise: they return a single
    "Error" or "Warning" category carrying the explanation.

    Args:
        colors: Color symbols or ``Color`` members; duplicates are ignored
        exclude: Land types to leave out (e.g. ["OGDualLand"]). A category
            whose every slot is excluded is dropped.

    Returns:
        Category groups in display order
    """
    requested = normalize_colors(colors)
    excluded = set(exclude)

    num_colors = len(requested)
    if num_colors == 0:
        logger.info("Mana base requested with no colors")
        return _sentinel("Error", NO_COLORS_MESSAGE)
    if num_colors not in MANA_BASE_TABLES:
        logger.info("Mana base requested for %s colors", num_colors)
        return _sentinel("Warning", TOO_MANY_COLORS_MESSAGE)

    unknown = excluded - LAND_TYPES
    if unknown:
        raise ValueError(f"Unknown land type(s): {', '.join(sorted(unknown))}")

    entries: list[ManaBaseEntry] = []
    for spec in MANA_BASE_TABLES[num_colors]:
        cards = [
            _resolve_slot(slot, requested)
            for slot in spec.slots
            if slot.land_type not in excluded
        ]
        if cards:
            entries.append(ManaBaseEntry(category=spec.category, cards=cards))

    log_event(
        "mana_base.computed",
        {
            "colors": color_string(requested),
            "excluded": sorted(excluded),
            "total": total_card_count(entries),
        },
    )
    return entries


def total_card_count(entries: Iterable[ManaBaseEntry]) -> int:
    """Sum the counts of every card entry."""
    return sum(card.count for entry in entries for card in entry.cards)


def category_totals(entries: Iterable[ManaBaseEntry]) -> dict[str, int]:
    totals: dict[str, int] = {}
    for entry in entries:
        totals[entry.category] = totals.get(entry.category, 0) + sum(
            card.count for card in entry.cards
        )
    return totals
