"""Perk catalog generation.

The catalog is built once at startup and never changes afterwards. It has
three tiers:

1. Nine hand-authored "supernova" perks: one at each axis landmark and two
   at each sector midpoint.
2. Randomized "giants", kept away from the centre by a 0.4 floor ratio.
3. Randomized "stars", with a looser 0.2 floor ratio.

Random perks are placed inside the reachable envelope: the largest radius
the player could ever unlock at that angle under the point budget. The
envelope uses a linear split of the budget across the sector::

    max_v1 = max_stat - (max_stat - min_stat) * t
    max_v2 = min_stat + (max_stat - min_stat) * t

This is an approximation of the true budget-feasible frontier (which needs
a constrained maximisation of the ellipse radius per ``t``). It is kept on
purpose: swapping in an exact solver would move every generated perk.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol

from stat_plotter.engine.build_config import BuildConfig, CatalogConfig, TierSpec
from stat_plotter.engine.geometry import (
    SECTORS,
    ellipse_radius,
    landmark_angle,
    sector_for_pair,
    sector_midpoint,
)
from stat_plotter.models.constants import Axis
from stat_plotter.models.perk import PerkPoint, PerkTier

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Uniform random source; ``random.Random`` satisfies it."""

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


_STR_DEX = sector_for_pair(Axis.STRENGTH, Axis.DEXTERITY)
_DEX_INT = sector_for_pair(Axis.DEXTERITY, Axis.INTELLIGENCE)
_INT_STR = sector_for_pair(Axis.INTELLIGENCE, Axis.STRENGTH)

# (name, description, angle, radius_val)
LANDMARK_PERKS: tuple[tuple[str, str, float, float], ...] = (
    ("Warrior", "Increase area of effect by 30%", landmark_angle(Axis.STRENGTH), 80.0),
    ("Ranger", "+ 2 additional projectiles", landmark_angle(Axis.DEXTERITY), 80.0),
    ("Mage", "Spells chain to 2 additional targets", landmark_angle(Axis.INTELLIGENCE), 80.0),
    ("Duelist", "Attack speed scales with STR/DEX", sector_midpoint(_STR_DEX), 40.0),
    ("Monk", "Unarmed strikes stun enemies", sector_midpoint(_STR_DEX), 55.0),
    ("Ranger-Mage", "Arrows deal 5% more elemental damage", sector_midpoint(_DEX_INT), 40.0),
    ("Arcane Trickster", "Teleport on crit", sector_midpoint(_DEX_INT), 55.0),
    ("Battlemage", "Gain Energy Shield based on INT", sector_midpoint(_INT_STR), 40.0),
    ("Paladin", "Heal allies on hit", sector_midpoint(_INT_STR), 55.0),
)


def landmark_perks(cost: float = 10.0) -> list[PerkPoint]:
    """The fixed supernova tier."""
    return [
        PerkPoint(
            name=name,
            description=desc,
            angle=angle,
            radius_val=radius,
            cost=cost,
            tier="supernova",
        )
        for name, desc, angle, radius in LANDMARK_PERKS
    ]


def reachable_envelope(
    t: float,
    config: BuildConfig | None = None,
) -> tuple[float, float, float]:
    """Best-case governing values and radius at sector position *t*.

    Returns ``(max_v1, max_v2, max_radius_limit)``. Assumes the third axis
    sits at the floor and the rest of the budget is split linearly in *t*.
    """
    cfg = config or BuildConfig()
    span = cfg.max_stat - cfg.min_stat
    max_v1 = cfg.max_stat - span * t
    max_v2 = cfg.min_stat + span * t
    return max_v1, max_v2, ellipse_radius(max_v1, max_v2, t)


def generate_safe_point(
    rng: RandomSource,
    name: str,
    cost: float,
    min_radius_ratio: float,
    *,
    description: str = "Passive bonus",
    tier: PerkTier = "star",
    config: BuildConfig | None = None,
) -> PerkPoint:
    """Place one random perk inside the reachable envelope.

    Draw order is sector, then ``t``, then radius, so a seeded source
    always yields the same point.
    """
    sector = SECTORS[rng.randrange(len(SECTORS))]
    t = rng.random()
    angle = sector.start + t * sector.width

    _, _, limit = reachable_envelope(t, config)
    low = limit * min_radius_ratio
    radius = low + (limit - low) * rng.random()

    return PerkPoint(
        name=name,
        description=description,
        angle=angle,
        radius_val=radius,
        cost=cost,
        tier=tier,
    )


def _generate_tier(
    rng: RandomSource,
    spec: TierSpec,
    description: str,
    config: BuildConfig | None,
) -> list[PerkPoint]:
    return [
        generate_safe_point(
            rng,
            f"{spec.name_prefix} {i + 1}",
            spec.cost,
            spec.min_radius_ratio,
            description=description,
            tier=spec.tier,
            config=config,
        )
        for i in range(spec.count)
    ]


def generate_perk_catalog(
    rng: RandomSource | None = None,
    *,
    seed: int | None = None,
    build_config: BuildConfig | None = None,
    catalog_config: CatalogConfig | None = None,
) -> tuple[PerkPoint, ...]:
    """Build the full, immutable perk catalog.

    Pass *rng* to control the random source directly, or *seed* to get a
    fresh ``random.Random(seed)``, not both. With neither, the output is
    unseeded.
    """
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both")
    if rng is None:
        rng = random.Random(seed)
    cat = catalog_config or CatalogConfig()

    perks = landmark_perks(cat.landmark_cost)
    for spec in cat.random_tiers:
        perks.extend(_generate_tier(rng, spec, cat.random_description, build_config))

    logger.debug(
        "Generated perk catalog: %d landmark, %s",
        len(LANDMARK_PERKS),
        ", ".join(f"{spec.count} {spec.tier}" for spec in cat.random_tiers),
    )
    return tuple(perks)
