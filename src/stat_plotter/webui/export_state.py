"""Export a plotter session as a JSON-safe snapshot.

Angles are radians and radii are stat units; a renderer is expected to do
its own scaling to pixels.
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from stat_plotter.models.constants import AXIS_NAMES
from stat_plotter.ui.bootstrap import PlotterSession, bootstrap_default_session
from stat_plotter.ui.state import UiState


def _perk_payload(row) -> dict[str, Any]:
    perk = row.perk
    return {
        "name": perk.name,
        "description": perk.description,
        "tier": perk.tier,
        "angle": float(perk.angle),
        "angle_degrees": math.degrees(perk.angle) % 360.0,
        "radius_val": float(perk.radius_val),
        "cost": float(perk.cost),
        "unlocked": bool(row.unlocked),
        "requires": [AXIS_NAMES[axis] for axis in row.requires],
    }


def build_state_payload(
    session: PlotterSession,
    state: UiState,
    samples: int | None = None,
) -> dict[str, Any]:
    """Build a snapshot from a live session."""
    ui = session.ui_model
    cfg = session.engine.config
    summary = ui.points_summary()
    outline = ui.blob_outline(state.blob_samples if samples is None else samples)

    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "app": {
            "banner_title": state.banner_title,
            "build_name": state.build_name,
            "catalog_seed": state.catalog_seed,
            "config": asdict(cfg),
        },
        "build": {
            "axes": [
                {
                    "axis": control.label,
                    "abbreviation": control.abbreviation,
                    "value": float(control.value),
                    "can_increment": control.can_increment,
                    "can_decrement": control.can_decrement,
                }
                for control in ui.axis_controls()
            ],
            "spent": float(summary.spent),
            "budget": float(summary.budget),
            "remaining": float(summary.remaining),
        },
        "blob": [
            {"angle": float(angle), "radius": float(radius)}
            for angle, radius in outline
        ],
        "perks": [_perk_payload(row) for row in ui.perk_rows()],
        "unlocked_count": ui.unlocked_count(),
        "legend": [asdict(entry) for entry in ui.legend()],
    }


def build_default_state(seed: int | None = None) -> dict[str, Any]:
    """Snapshot of a fresh floor-level build with a seeded catalog."""
    session, state = bootstrap_default_session(seed)
    return build_state_payload(session, state)


def write_state(path: Path, payload: dict[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n")
    return path
