"""Static land reference tables bundled with the package."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from src.config import settings
from src.engine.colors import Color, InvalidColorError, to_color

logger = logging.getLogger(__name__)

LAND_TABLES: tuple[str, ...] = (
    "bond_lands",
    "bounce_lands",
    "check_lands",
    "fetch_lands",
    "filter_lands",
    "horizon_lands",
    "mana_rocks",
    "og_dual_lands",
    "pain_lands",
    "pathway_lands",
    "shock_lands",
    "slow_lands",
    "tango_lands",
    "triomes",
    "utility_lands",
)


@dataclass(frozen=True)
class LandRecord:
    """A named card and the colors it belongs to."""

    name: str
    colors: tuple[Color, ...] = ()


class LandTableError(RuntimeError):
    """Raised when a land table is unknown, missing or malformed."""


def land_table_names() -> list[str]:
    return list(LAND_TABLES)


def load_land_table(name: str, data_dir: Optional[Path] = None) -> tuple[LandRecord, ...]:
    """Load a land table by name.

    Tables are read once per path and cached for the process lifetime.

    Args:
        name: Table name (e.g. "shock_lands")
        data_dir: Directory holding the JSON tables (defaults to settings.data_dir)

    Returns:
        Records in file order
    """
    if name not in LAND_TABLES:
        raise LandTableError(f"Unknown land table: {name!r}")
    path = data_dir / f"{name}.json" if data_dir else settings.table_path(name)
    return _read_table(path)


@lru_cache(maxsize=None)
def _read_table(path: Path) -> tuple[LandRecord, ...]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise LandTableError(f"Land table not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise LandTableError(f"Land table {path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise LandTableError(f"Land table {path} must be a JSON list")

    records = tuple(_parse_record(path, item) for item in payload)
    logger.debug("Loaded land table %s (%s records)", path.name, len(records))
    return records


def _parse_record(path: Path, item: object) -> LandRecord:
    if not isinstance(item, dict) or not isinstance(item.get("name"), str):
        raise LandTableError(f"Land table {path} has an entry without a name: {item!r}")
    try:
        colors = tuple(to_color(symbol) for symbol in item.get("colors") or [])
    except InvalidColorError as exc:
        raise LandTableError(f"Land table {path}, {item['name']!r}: {exc}") from exc
    return LandRecord(name=item["name"], colors=colors)
