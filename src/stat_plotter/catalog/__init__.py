"""Perk catalog generation interfaces."""

from stat_plotter.catalog.generator import (
    LANDMARK_PERKS,
    RandomSource,
    generate_perk_catalog,
    generate_safe_point,
    landmark_perks,
    reachable_envelope,
)

__all__ = [
    "LANDMARK_PERKS",
    "RandomSource",
    "generate_perk_catalog",
    "generate_safe_point",
    "landmark_perks",
    "reachable_envelope",
]
