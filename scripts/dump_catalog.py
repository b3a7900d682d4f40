"""Dump a generated perk catalog, sorted by tier then angle.

Usage:
    python -m scripts.dump_catalog [--seed N] [--tier supernova|giant|star] [--json]
"""

import argparse
import json
import logging
import math
from dataclasses import asdict

from stat_plotter.catalog.generator import generate_perk_catalog, reachable_envelope
from stat_plotter.engine.geometry import sector_of
from stat_plotter.logging_config import setup_logging
from stat_plotter.models.constants import AXIS_ABBREVIATIONS


_TIER_ORDER = {"supernova": 0, "giant": 1, "star": 2}


def envelope_headroom(perk) -> float:
    """Distance between a perk and the envelope limit at its angle."""
    _, _, t = sector_of(perk.angle)
    _, _, limit = reachable_envelope(t)
    return limit - perk.radius_val


def format_perk(perk) -> str:
    v1, v2, t = sector_of(perk.angle)
    deg = math.degrees(perk.angle) % 360.0
    pair = f"{AXIS_ABBREVIATIONS[v1]}->{AXIS_ABBREVIATIONS[v2]}"
    return (
        f"{perk.name:<18} | {deg:>6.1f} deg | {pair:<8} t={t:4.2f} "
        f"| r={perk.radius_val:6.2f} | cost {perk.cost:4.1f}"
    )


def main():
    parser = argparse.ArgumentParser(description="Dump the generated perk catalog")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random tiers")
    parser.add_argument("--tier", choices=sorted(_TIER_ORDER), default=None,
                        help="Only show one tier")
    parser.add_argument("--json", action="store_true",
                        help="Print perks as a JSON list")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        setup_logging(logging.DEBUG)

    perks = list(generate_perk_catalog(seed=args.seed))
    if args.tier:
        perks = [p for p in perks if p.tier == args.tier]
    perks.sort(key=lambda p: (_TIER_ORDER[p.tier], p.angle % math.tau))

    if args.json:
        print(json.dumps([asdict(p) for p in perks], indent=2))
        return

    for p in perks:
        print(format_perk(p))
        if p.tier != "supernova":
            print(f"{'':<18} | headroom {envelope_headroom(p):.2f}")
        else:
            print(f"{'':<18} | {p.description}")

    print(f"Total: {len(perks)} perks")


if __name__ == "__main__":
    main()
