"""Path construction helpers for estimation output directories."""

from __future__ import annotations

from pathlib import Path


def aggregate_path(out_dir: Path) -> Path:
    """Return path to the mean-aggregate Parquet file."""
    return out_dir / "mobility_aggregate.parquet"


def value_assignment_path(out_dir: Path) -> Path:
    """Return path to the per-face values Parquet file."""
    return out_dir / "face_values.parquet"
