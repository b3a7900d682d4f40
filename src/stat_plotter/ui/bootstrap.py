"""Bootstrap helpers for wiring a build, its catalog and the UI model."""

from __future__ import annotations

from dataclasses import dataclass

from stat_plotter.catalog.generator import generate_perk_catalog
from stat_plotter.engine.build_config import BuildConfig, CatalogConfig
from stat_plotter.engine.build_engine import BuildEngine
from stat_plotter.engine.ui_model import BuildUiModel
from stat_plotter.ui.state import UiState


@dataclass(slots=True)
class PlotterSession:
    engine: BuildEngine
    ui_model: BuildUiModel


def bootstrap_default_session(
    seed: int | None = None,
    build_config: BuildConfig | None = None,
    catalog_config: CatalogConfig | None = None,
) -> tuple[PlotterSession, UiState]:
    """Generate the catalog once and attach it to a fresh floor-level build."""
    build_config = build_config or BuildConfig()
    engine = BuildEngine.new_build(build_config)
    perks = generate_perk_catalog(
        seed=seed,
        build_config=build_config,
        catalog_config=catalog_config,
    )
    ui_model = BuildUiModel(engine, perks)
    state = UiState(catalog_seed=seed, blob_samples=build_config.blob_samples)
    return PlotterSession(engine, ui_model), state
