"""Pydantic schemas for mana base recommendations."""
from __future__ import annotations

from pydantic import BaseModel


class CardOption(BaseModel):
    """A candidate card for a slot."""

    name: str


class ManaBaseCardEntry(BaseModel):
    """A land type, how many to play, and the candidates to pick from."""

    type: str
    count: int
    options: list[CardOption]


class ManaBaseEntry(BaseModel):
    """A display group of card entries."""

    category: str
    cards: list[ManaBaseCardEntry]
