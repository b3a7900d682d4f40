"""Configuration knobs for the build engine and the perk catalog.

Defaults match the original plotter: stats run 10..100 under a 120 point
budget, and the catalog holds 9 landmark perks, 40 giants and 300 stars.
"""

from dataclasses import dataclass, field

from stat_plotter.models.constants import (
    DEFAULT_STEP,
    MAX_STAT_VAL,
    MAX_TOTAL_POINTS,
    MIN_STAT_VAL,
    UNLOCK_EPSILON,
)
from stat_plotter.models.perk import PerkTier


@dataclass(slots=True)
class BuildConfig:
    """Stat bounds and budget shared by the engine and the generator."""

    min_stat: float = MIN_STAT_VAL
    max_stat: float = MAX_STAT_VAL
    max_total_points: float = MAX_TOTAL_POINTS
    step: float = DEFAULT_STEP           # default +/- adjustment
    unlock_epsilon: float = UNLOCK_EPSILON
    blob_samples: int = 90               # outline vertices

    def validate(self) -> None:
        """Raise ValueError if the bounds can't hold a legal build."""
        if self.min_stat < 1:
            raise ValueError(f"min_stat must be >= 1, got {self.min_stat}")
        if self.min_stat > self.max_stat:
            raise ValueError(
                f"min_stat ({self.min_stat}) exceeds max_stat ({self.max_stat})"
            )
        if self.max_total_points < 3 * self.min_stat:
            raise ValueError(
                f"max_total_points ({self.max_total_points}) can't cover three "
                f"axes at the floor ({self.min_stat})"
            )
        if self.blob_samples < 1:
            raise ValueError(f"blob_samples must be positive, got {self.blob_samples}")


@dataclass(frozen=True, slots=True)
class TierSpec:
    """One randomized tier of the perk catalog."""

    name_prefix: str
    count: int
    cost: float
    min_radius_ratio: float   # floor of radius_val as a share of the envelope
    tier: PerkTier


@dataclass(slots=True)
class CatalogConfig:
    """Tier sizes and weights for catalog generation."""

    landmark_cost: float = 10.0
    giants: TierSpec = field(
        default_factory=lambda: TierSpec("Red Giant", 40, 5.0, 0.4, "giant")
    )
    stars: TierSpec = field(
        default_factory=lambda: TierSpec("Star", 300, 2.0, 0.2, "star")
    )
    random_description: str = "Passive bonus"

    @property
    def random_tiers(self) -> tuple[TierSpec, ...]:
        return (self.giants, self.stars)
