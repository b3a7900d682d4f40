"""Shared UI state and lightweight app metadata."""

from dataclasses import dataclass


@dataclass(slots=True)
class UiState:
    """Top-level app state used by views and the state export."""

    build_name: str = "Untitled Build"
    banner_title: str = "Stat Plotter"
    catalog_seed: int | None = None
    blob_samples: int = 90
