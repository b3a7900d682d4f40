"""Apply stat adjustments to a fresh build and report the blob and perks.

Usage examples:
    python -m scripts.explore_build --adjust str+ --adjust str+ --adjust dex+10
    python -m scripts.explore_build --set strength=100 --set int=10 --unlocked-only
    python -m scripts.explore_build --seed 7 --set str=40 --set dex=40 --set int=40 --json
    python -m scripts.explore_build --seed 7 --write webui/state.json
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import re
from pathlib import Path

from stat_plotter.engine.build_engine import BuildEngine
from stat_plotter.logging_config import setup_logging
from stat_plotter.models.constants import AXIS_ABBREVIATIONS, Axis, coerce_axis
from stat_plotter.ui.bootstrap import bootstrap_default_session
from stat_plotter.webui.export_state import build_state_payload, write_state


_ADJUST_RE = re.compile(r"^\s*([A-Za-z_]+)\s*([+-])\s*(\d+(?:\.\d+)?)?\s*$")


def _parse_adjustment(text: str) -> tuple[Axis, float, float | None]:
    """Parse ``AXIS+N`` / ``AXIS-N`` into ``(axis, sign, magnitude)``.

    A bare sign (``str+``) has no magnitude and means one default step.
    """
    match = _ADJUST_RE.match(text)
    if match is None:
        raise ValueError(f"Adjustment must look like 'str+5' or 'dex-', got {text!r}")
    axis = coerce_axis(match.group(1))
    sign = 1.0 if match.group(2) == "+" else -1.0
    magnitude = float(match.group(3)) if match.group(3) is not None else None
    return axis, sign, magnitude


def _parse_assignment(text: str) -> tuple[Axis, float]:
    if "=" not in text:
        raise ValueError(f"Assignment must look like 'strength=40', got {text!r}")
    name, raw = text.split("=", 1)
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"Invalid value in {text!r}") from None
    return coerce_axis(name), value


def apply_adjustments(engine: BuildEngine, adjustments: list[str]) -> list[bool]:
    """Apply each adjustment in order; returns which ones changed the build."""
    applied: list[bool] = []
    step = engine.config.step
    for text in adjustments:
        axis, sign, magnitude = _parse_adjustment(text)
        delta = sign * (step if magnitude is None else magnitude)
        applied.append(engine.adjust_axis(axis, delta))
    return applied


def apply_assignments(engine: BuildEngine, assignments: list[str]) -> None:
    values = {axis: engine.config.min_stat for axis in Axis}
    for text in assignments:
        axis, value = _parse_assignment(text)
        values[axis] = value
    engine.set_axes(values)


def _format_requires(requires) -> str:
    return " + ".join(AXIS_ABBREVIATIONS[a] for a in requires)


def main() -> None:
    parser = argparse.ArgumentParser(description="Explore a three-axis build")
    parser.add_argument("--seed", type=int, default=None,
                        help="Catalog seed (default: unseeded)")
    parser.add_argument("--set", dest="assignments", action="append", default=[],
                        help="Explicit axis value, e.g. strength=40. Unset axes stay at the floor.")
    parser.add_argument("--adjust", dest="adjustments", action="append", default=[],
                        help="Adjustment applied after --set, e.g. str+5, dex-, int+")
    parser.add_argument("--samples", type=int, default=None,
                        help="Blob outline samples to print")
    parser.add_argument("--unlocked-only", action="store_true",
                        help="Only list unlocked perks")
    parser.add_argument("--json", action="store_true",
                        help="Print the full state snapshot as JSON")
    parser.add_argument("--write", type=Path, default=None,
                        help="Write the state snapshot to this path")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        setup_logging(logging.DEBUG)

    session, state = bootstrap_default_session(args.seed)
    try:
        if args.samples is not None and args.samples < 1:
            raise ValueError(f"--samples must be at least 1, got {args.samples}")
        if args.assignments:
            apply_assignments(session.engine, args.assignments)
        applied = apply_adjustments(session.engine, args.adjustments)
        payload = build_state_payload(session, state, args.samples)
    except ValueError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)

    for text, ok in zip(args.adjustments, applied):
        if not ok:
            print(f"Warning: adjustment {text!r} had no effect")

    if args.write is not None:
        path = write_state(args.write, payload)
        print(f"State written: {path}")
    if args.json:
        print(json.dumps(payload, indent=2))
        return

    ui = session.ui_model
    summary = ui.points_summary()
    print(f"Points: {summary.spent:.0f} / {summary.budget:.0f}")
    for control in ui.axis_controls():
        print(f"  {control.abbreviation}: {control.value:>5.1f}")

    print("\nBlob outline (deg -> radius):")
    for angle, radius in ui.blob_outline(args.samples):
        print(f"  {math.degrees(angle):>6.1f} -> {radius:6.2f}")

    print()
    rows = ui.perk_rows()
    if args.unlocked_only:
        rows = [r for r in rows if r.unlocked]
    for row in rows:
        perk = row.perk
        status = "UNLOCKED" if row.unlocked else "locked"
        deg = math.degrees(perk.angle) % 360.0
        print(
            f"{perk.name:<18} | {deg:>6.1f} deg r={perk.radius_val:6.2f} "
            f"| {_format_requires(row.requires):<9} | {status}"
        )
    print(f"\nUnlocked: {ui.unlocked_count()} / {len(ui.perks)}")


if __name__ == "__main__":
    main()
