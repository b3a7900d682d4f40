"""Build engine — owns the live three-axis build and its budget.

All mutation goes through ``adjust_axis``, ``set_axes`` and ``reset`` so the
clamp logic lives in one place. Every axis stays within
``[min_stat, max_stat]`` and the three values never sum past
``max_total_points``; a violation after a mutation is a bug in this module
and trips an assertion.

Read-side queries (boundary radius, unlock status, blob outline) delegate to
the reachability functions and never touch the state.
"""

from __future__ import annotations

import copy
import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from stat_plotter.engine import reachability
from stat_plotter.engine.build_config import BuildConfig
from stat_plotter.models.constants import AXIS_NAMES, MIN_STAT_VAL, Axis, coerce_axis
from stat_plotter.models.perk import PerkPoint

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


def _floor_values(floor: float = MIN_STAT_VAL) -> dict[Axis, float]:
    return {axis: float(floor) for axis in Axis}


@dataclass(slots=True)
class BuildState:
    """Snapshot of the three axis values, keyed by Axis."""

    values: dict[Axis, float] = field(default_factory=_floor_values)

    @property
    def total(self) -> float:
        return sum(self.values.values())


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class BuildEngine:
    """Bounded, budgeted three-axis build.

    Consumes a BuildConfig without modifying it.
    """

    __slots__ = ("_state", "_config")

    def __init__(self, config: BuildConfig | None = None) -> None:
        self._config = config or BuildConfig()
        self._config.validate()
        self._state = BuildState(_floor_values(self._config.min_stat))
        self._check_invariants()

    # --- Factories ---------------------------------------------------------

    @classmethod
    def new_build(cls, config: BuildConfig | None = None) -> BuildEngine:
        """Create a fresh engine with every axis at the floor."""
        return cls(config)

    @classmethod
    def from_state(
        cls,
        state: BuildState,
        config: BuildConfig | None = None,
    ) -> BuildEngine:
        """Restore an engine from a BuildState, validating it first."""
        engine = cls(config)
        engine.set_axes(state.values)
        return engine

    def copy(self) -> BuildEngine:
        """Independent clone for speculative exploration."""
        clone = BuildEngine.__new__(BuildEngine)
        clone._config = self._config
        clone._state = copy.deepcopy(self._state)
        return clone

    # --- Properties --------------------------------------------------------

    @property
    def state(self) -> BuildState:
        """Return a deep copy of the current build state."""
        return copy.deepcopy(self._state)

    @property
    def config(self) -> BuildConfig:
        return self._config

    @property
    def total_points(self) -> float:
        return self._state.total

    @property
    def remaining_points(self) -> float:
        return self._config.max_total_points - self._state.total

    def value(self, axis: Axis | int | str) -> float:
        return self._state.values[coerce_axis(axis)]

    # --- Invariants --------------------------------------------------------

    def _check_invariants(self) -> None:
        cfg = self._config
        for axis, val in self._state.values.items():
            assert cfg.min_stat <= val <= cfg.max_stat, (
                f"{AXIS_NAMES[axis]} = {val} escaped [{cfg.min_stat}, {cfg.max_stat}]"
            )
        assert self._state.total <= cfg.max_total_points, (
            f"Build total {self._state.total} exceeds budget {cfg.max_total_points}"
        )

    # --- Mutation ----------------------------------------------------------

    def can_increment(self, axis: Axis | int | str) -> bool:
        axis = coerce_axis(axis)
        room_stat = self._config.max_stat - self._state.values[axis]
        return room_stat > 0 and self.remaining_points > 0

    def can_decrement(self, axis: Axis | int | str) -> bool:
        axis = coerce_axis(axis)
        return self._state.values[axis] > self._config.min_stat

    def adjust_axis(self, axis: Axis | int | str, delta: float | None = None) -> bool:
        """Move one axis by *delta* (default: the config step), clamped.

        Increments stop at whichever is smaller, the room left under the
        axis ceiling or the points left in the budget. Decrements stop at
        the floor. Returns True if the value changed.
        """
        axis = coerce_axis(axis)
        if delta is None:
            delta = self._config.step
        current = self._state.values[axis]

        if delta > 0:
            cfg = self._config
            others = sum(v for a, v in self._state.values.items() if a != axis)
            new_value = min(current + delta, cfg.max_stat, cfg.max_total_points - others)
            # Float rounding can still put the stored total an ulp over budget.
            trial = dict(self._state.values)
            trial[axis] = new_value
            while new_value > current and sum(trial.values()) > cfg.max_total_points:
                new_value = math.nextafter(new_value, -math.inf)
                trial[axis] = new_value
            if new_value <= current:
                logger.debug("Increment of %s rejected: no room", AXIS_NAMES[axis])
                return False
        elif delta < 0:
            new_value = max(self._config.min_stat, current + delta)
        else:
            return False

        if new_value == current:
            return False
        self._state.values[axis] = new_value
        self._check_invariants()
        return True

    def set_axes(self, values: Mapping[Axis | int | str, float]) -> None:
        """Assign all three axes at once. Validates keys, range, and budget."""
        cfg = self._config
        resolved: dict[Axis, float] = {}
        for key, val in values.items():
            axis = coerce_axis(key)
            if axis in resolved:
                raise ValueError(f"Duplicate value for {AXIS_NAMES[axis]}")
            resolved[axis] = float(val)
        if set(resolved) != set(Axis):
            raise ValueError(
                f"Must provide exactly the 3 axes {[AXIS_NAMES[a] for a in Axis]}, "
                f"got {[AXIS_NAMES[a] for a in sorted(resolved)]}"
            )
        for axis, val in resolved.items():
            if not (cfg.min_stat <= val <= cfg.max_stat):
                raise ValueError(
                    f"{AXIS_NAMES[axis]} = {val} is out of range "
                    f"[{cfg.min_stat}, {cfg.max_stat}]"
                )
        total = sum(resolved.values())
        if total > cfg.max_total_points:
            raise ValueError(
                f"Point budget exceeded: {total} > {cfg.max_total_points}"
            )
        self._state.values = resolved
        self._check_invariants()

    def reset(self) -> BuildState:
        """Return every axis to the floor."""
        self._state = BuildState(_floor_values(self._config.min_stat))
        self._check_invariants()
        logger.debug("Build reset to floor %.1f", self._config.min_stat)
        return self.state

    # --- Queries -----------------------------------------------------------

    def current_radius(self, angle: float) -> float:
        return reachability.current_radius(self._state, angle)

    def is_unlocked(self, perk: PerkPoint) -> bool:
        return reachability.is_unlocked(self._state, perk, self._config.unlock_epsilon)

    def blob_outline(self, samples: int | None = None) -> list[tuple[float, float]]:
        if samples is None:
            samples = self._config.blob_samples
        return reachability.blob_outline(self._state, samples)

    def unlocked_perks(self, perks: Iterable[PerkPoint]) -> list[PerkPoint]:
        """Filter *perks* down to the ones the current build reaches."""
        return [p for p in perks if self.is_unlocked(p)]
