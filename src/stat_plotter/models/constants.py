"""Build axes, landmark angles, and default stat bounds.

Exactly three axes exist. Each owns a landmark direction on the polar plot
where that axis alone determines the boundary radius. The landmarks are
spaced unevenly, so the three sectors between them span 90, 135 and 135
degrees.
"""

import math
from enum import IntEnum


class Axis(IntEnum):
    """Build attribute indices."""
    STRENGTH = 0       # axis A
    DEXTERITY = 1      # axis B
    INTELLIGENCE = 2   # axis C


AXIS_NAMES: dict[int, str] = {
    Axis.STRENGTH: "Strength",
    Axis.DEXTERITY: "Dexterity",
    Axis.INTELLIGENCE: "Intelligence",
}

AXIS_ABBREVIATIONS: dict[int, str] = {
    Axis.STRENGTH: "STR",
    Axis.DEXTERITY: "DEX",
    Axis.INTELLIGENCE: "INT",
}

# Panel order used by the original stat controls (STR, INT, DEX).
PANEL_ORDER: tuple[Axis, ...] = (Axis.STRENGTH, Axis.INTELLIGENCE, Axis.DEXTERITY)

TAU = 2.0 * math.pi

# Landmark angles in radians, counter-clockwise from +x.
ANG_DEXTERITY = math.radians(45.0)
ANG_STRENGTH = math.radians(135.0)
ANG_INTELLIGENCE = math.radians(270.0)

LANDMARK_ANGLES: dict[int, float] = {
    Axis.STRENGTH: ANG_STRENGTH,
    Axis.DEXTERITY: ANG_DEXTERITY,
    Axis.INTELLIGENCE: ANG_INTELLIGENCE,
}

# Default stat bounds, in stat units.
MIN_STAT_VAL = 10.0
MAX_STAT_VAL = 100.0
MAX_TOTAL_POINTS = 120.0

# Default +/- button step.
DEFAULT_STEP = 5.0

# Tolerance absorbing float drift at exact landmark boundaries.
UNLOCK_EPSILON = 0.5


def coerce_axis(value: int | str) -> Axis:
    """Resolve an Axis from an index, enum name, display name or abbreviation.

    Raises ValueError for anything that doesn't name one of the three axes.
    """
    if isinstance(value, Axis):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Unknown axis: {value!r}")
    if isinstance(value, int):
        return Axis(value)
    if isinstance(value, str):
        text = value.strip().lower()
        for axis in Axis:
            if text in (
                axis.name.lower(),
                AXIS_NAMES[axis].lower(),
                AXIS_ABBREVIATIONS[axis].lower(),
            ):
                return axis
        try:
            return Axis(int(text, 0))
        except ValueError:
            pass
    raise ValueError(f"Unknown axis: {value!r}")
