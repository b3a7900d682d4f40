"""Perk point data model."""

from dataclasses import dataclass
from typing import Literal


PerkTier = Literal["supernova", "giant", "star"]


@dataclass(frozen=True, slots=True)
class PerkPoint:
    """A reward placed at a fixed spot on the polar plot.

    Whether the perk is unlocked is never stored here; it is derived from
    the live build on every query.
    """
    name: str
    description: str
    angle: float         # radians; wraparound-sector perks may exceed 2*pi
    radius_val: float    # stat units, at most the stat ceiling
    cost: float          # rendering emphasis weight
    tier: PerkTier = "star"
