"""Live blob boundary and perk unlock checks.

Everything here is a pure read of a BuildState. Unlock status is recomputed
on every call and never cached, so it can't go stale after an adjustment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stat_plotter.engine.geometry import ellipse_radius, sector_of
from stat_plotter.models.constants import TAU, UNLOCK_EPSILON
from stat_plotter.models.perk import PerkPoint

if TYPE_CHECKING:
    from stat_plotter.engine.build_engine import BuildState


def current_radius(state: BuildState, angle: float) -> float:
    """Radius of the currently reachable shape at *angle*."""
    v1, v2, t = sector_of(angle)
    return ellipse_radius(state.values[v1], state.values[v2], t)


def is_unlocked(
    state: BuildState,
    perk: PerkPoint,
    epsilon: float = UNLOCK_EPSILON,
) -> bool:
    """True once the blob boundary reaches *perk* at its own angle."""
    return perk.radius_val <= current_radius(state, perk.angle) + epsilon


def blob_outline(state: BuildState, samples: int = 90) -> list[tuple[float, float]]:
    """Sample the boundary as ``(angle, radius)`` pairs around the full circle."""
    if samples < 1:
        raise ValueError(f"samples must be positive, got {samples}")
    outline: list[tuple[float, float]] = []
    for i in range(samples):
        angle = (i / samples) * TAU
        outline.append((angle, current_radius(state, angle)))
    return outline
