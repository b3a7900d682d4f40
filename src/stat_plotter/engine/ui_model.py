"""UI-facing adapter over BuildEngine and the perk catalog.

This module intentionally contains no GUI code. It provides stable, testable
data shapes that any renderer can draw: stat control rows, the blob outline
in stat units, per-perk unlock rows and the legend.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from stat_plotter.engine.build_engine import BuildEngine
from stat_plotter.engine.geometry import governing_axes
from stat_plotter.models.constants import (
    AXIS_ABBREVIATIONS,
    AXIS_NAMES,
    PANEL_ORDER,
    Axis,
)
from stat_plotter.models.perk import PerkPoint, PerkTier


@dataclass(frozen=True, slots=True)
class AxisControl:
    """One +/- stat row."""

    axis: Axis
    label: str
    abbreviation: str
    value: float
    min_value: float
    max_value: float
    can_decrement: bool
    can_increment: bool


@dataclass(frozen=True, slots=True)
class PointsSummary:
    spent: float
    budget: float

    @property
    def remaining(self) -> float:
        return self.budget - self.spent

    @property
    def fraction(self) -> float:
        return self.spent / self.budget if self.budget > 0 else 0.0


@dataclass(frozen=True, slots=True)
class PerkStatus:
    """A catalog perk with its derived lock state."""

    perk: PerkPoint
    unlocked: bool
    requires: tuple[Axis, ...]   # one axis near a landmark, else the sector pair


@dataclass(frozen=True, slots=True)
class LegendEntry:
    tier: PerkTier
    label: str
    cost: float


_TIER_LABELS: dict[str, str] = {
    "supernova": "Supernova",
    "giant": "Red Giant",
    "star": "Star",
}


class BuildUiModel:
    """Read/write adapter for UI operations over a BuildEngine."""

    __slots__ = ("_engine", "_perks")

    def __init__(self, engine: BuildEngine, perks: Sequence[PerkPoint] = ()) -> None:
        self._engine = engine
        self._perks = tuple(perks)

    @property
    def engine(self) -> BuildEngine:
        return self._engine

    @property
    def perks(self) -> tuple[PerkPoint, ...]:
        return self._perks

    # --- Controls ----------------------------------------------------------

    def axis_controls(self) -> list[AxisControl]:
        cfg = self._engine.config
        return [
            AxisControl(
                axis=axis,
                label=AXIS_NAMES[axis],
                abbreviation=AXIS_ABBREVIATIONS[axis],
                value=self._engine.value(axis),
                min_value=cfg.min_stat,
                max_value=cfg.max_stat,
                can_decrement=self._engine.can_decrement(axis),
                can_increment=self._engine.can_increment(axis),
            )
            for axis in PANEL_ORDER
        ]

    def points_summary(self) -> PointsSummary:
        return PointsSummary(
            spent=self._engine.total_points,
            budget=self._engine.config.max_total_points,
        )

    def increment(self, axis: Axis | int | str) -> bool:
        return self._engine.adjust_axis(axis, self._engine.config.step)

    def decrement(self, axis: Axis | int | str) -> bool:
        return self._engine.adjust_axis(axis, -self._engine.config.step)

    def reset(self) -> None:
        self._engine.reset()

    # --- Plot data ---------------------------------------------------------

    def blob_outline(self, samples: int | None = None) -> list[tuple[float, float]]:
        return self._engine.blob_outline(samples)

    def perk_rows(self) -> list[PerkStatus]:
        return [
            PerkStatus(
                perk=perk,
                unlocked=self._engine.is_unlocked(perk),
                requires=governing_axes(perk.angle),
            )
            for perk in self._perks
        ]

    def unlocked_count(self) -> int:
        return sum(1 for perk in self._perks if self._engine.is_unlocked(perk))

    def legend(self) -> list[LegendEntry]:
        """One entry per tier present in the catalog, heaviest first."""
        costs: dict[str, float] = {}
        for perk in self._perks:
            costs.setdefault(perk.tier, perk.cost)
        return [
            LegendEntry(tier=tier, label=_TIER_LABELS.get(tier, tier.title()), cost=cost)
            for tier, cost in sorted(costs.items(), key=lambda kv: -kv[1])
        ]
