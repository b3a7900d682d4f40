"""Polar geometry of the build blob.

The plane is split into three sectors, one between each pair of adjacent
landmark angles. Inside a sector the boundary radius is the polar form of a
quarter-ellipse whose semi-axes are the two governing axis values, so the
blob bulges toward whichever axis is larger and becomes a perfect circle when
both are equal.

Sectors are half-open ``[start, stop)``. The Intelligence -> Dexterity
sector wraps past 360 degrees; its ``end`` reads as the Dexterity landmark
plus 2*pi.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from stat_plotter.models.constants import (
    ANG_DEXTERITY,
    ANG_INTELLIGENCE,
    ANG_STRENGTH,
    LANDMARK_ANGLES,
    TAU,
    Axis,
)


@dataclass(frozen=True, slots=True)
class Sector:
    """Angular span governed by an ordered pair of axes."""

    start: float   # radians, landmark of v1
    stop: float    # radians, landmark of v2, in [0, 2*pi)
    v1: Axis       # axis active at start
    v2: Axis       # axis active at stop

    @property
    def wraps(self) -> bool:
        return self.stop <= self.start

    @property
    def end(self) -> float:
        """The stop landmark unwrapped past 2*pi when the sector wraps."""
        return self.stop + TAU if self.wraps else self.stop

    @property
    def width(self) -> float:
        return self.end - self.start

    def contains(self, angle: float) -> bool:
        """True if the normalized *angle* falls in ``[start, stop)``."""
        a = normalize_angle(angle)
        if self.wraps:
            return a >= self.start or a < self.stop
        return self.start <= a < self.stop

    def local_t(self, angle: float) -> float:
        """Position of *angle* across the sector: 0 at start, 1 at end."""
        a = normalize_angle(angle)
        if a < self.start:
            a += TAU
        return (a - self.start) / self.width


# Order matters: the catalog generator picks sectors by index.
SECTORS: tuple[Sector, ...] = (
    Sector(ANG_DEXTERITY, ANG_STRENGTH, Axis.DEXTERITY, Axis.STRENGTH),
    Sector(ANG_STRENGTH, ANG_INTELLIGENCE, Axis.STRENGTH, Axis.INTELLIGENCE),
    Sector(ANG_INTELLIGENCE, ANG_DEXTERITY, Axis.INTELLIGENCE, Axis.DEXTERITY),
)


def normalize_angle(angle: float) -> float:
    """Map any angle in radians onto ``[0, 2*pi)``."""
    a = math.fmod(angle, TAU)
    if a < 0.0:
        a += TAU
    # fmod of a tiny negative can round back up to exactly TAU.
    if a >= TAU:
        a = 0.0
    return a


def sector_containing(angle: float) -> Sector:
    """Return the one sector whose half-open span holds *angle*."""
    for sector in SECTORS[:-1]:
        if sector.contains(angle):
            return sector
    return SECTORS[-1]


def sector_of(angle: float) -> tuple[Axis, Axis, float]:
    """Resolve *angle* to ``(v1_axis, v2_axis, t)``.

    ``t`` is 0 at the sector's low landmark and approaches 1 toward its
    high landmark; the high landmark itself belongs to the next sector.
    """
    sector = sector_containing(angle)
    return sector.v1, sector.v2, sector.local_t(angle)


def ellipse_radius(v1: float, v2: float, t: float) -> float:
    """Boundary radius between two governing axis values.

    Polar form of a quarter-ellipse with semi-axes *v1* (at ``t=0``) and
    *v2* (at ``t=1``). Returns 0 when both values are below 1, where the
    formula becomes numerically unstable.
    """
    if v1 < 1.0 and v2 < 1.0:
        return 0.0
    phi = t * (math.pi / 2.0)
    return (v1 * v2) / math.sqrt((v2 * math.cos(phi)) ** 2 + (v1 * math.sin(phi)) ** 2)


def landmark_angle(axis: Axis) -> float:
    return LANDMARK_ANGLES[axis]


def sector_midpoint(sector: Sector) -> float:
    """Circular average of the sector's two landmarks.

    Uses the unwrapped end, so the wraparound sector averages to 337.5
    degrees instead of 157.5.
    """
    return (sector.start + sector.end) / 2.0


def sector_for_pair(a: Axis, b: Axis) -> Sector:
    """Return the sector governed by axes *a* and *b* in either order."""
    for sector in SECTORS:
        if {sector.v1, sector.v2} == {a, b}:
            return sector
    raise ValueError(f"No sector is governed by {a!r} and {b!r}")


def governing_axes(angle: float, tolerance: float = math.radians(5.0)) -> tuple[Axis, ...]:
    """Axes a perk at *angle* depends on.

    A single axis when *angle* sits within *tolerance* of that axis's
    landmark, otherwise the sector's ``(v1, v2)`` pair.
    """
    a = normalize_angle(angle)
    for axis, landmark in LANDMARK_ANGLES.items():
        diff = abs(a - landmark)
        if min(diff, TAU - diff) < tolerance:
            return (Axis(axis),)
    sector = sector_containing(a)
    return (sector.v1, sector.v2)
