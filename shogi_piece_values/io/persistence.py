"""Parquet read/write helpers for aggregates and value assignments."""

from __future__ import annotations

import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from shogi_piece_values.io.schemas import (
    AGGREGATE_SCHEMA,
    AGGREGATE_SCHEMA_VERSION,
    VALUE_ASSIGNMENT_SCHEMA,
    VALUE_ASSIGNMENT_SCHEMA_VERSION,
)
from shogi_piece_values.simulation.aggregate import FLAT_FIELD_NAMES, MobilityAggregate
from shogi_piece_values.valuation import ValueAssignment

logger = logging.getLogger(__name__)


def write_aggregate(path: Path, aggregate: MobilityAggregate, trial_count: int) -> Path:
    """Persist one mean aggregate as a single-row Parquet table."""
    if trial_count < 1:
        raise ValueError("trial_count must be >= 1")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    row: dict[str, list[int | float]] = {
        "schema_version": [AGGREGATE_SCHEMA_VERSION],
        "trial_count": [trial_count],
    }
    for name, value in aggregate.as_dict().items():
        row[name] = [value]
    pq.write_table(pa.Table.from_pydict(row, schema=AGGREGATE_SCHEMA), path)
    logger.info("wrote aggregate of %d trials to %s", trial_count, path)
    return path


def read_aggregate(path: Path) -> tuple[MobilityAggregate, int]:
    """Load an aggregate written by :func:`write_aggregate`.

    Returns the aggregate together with the trial count it was built from.
    """
    rows = pq.read_table(path).to_pylist()
    if len(rows) != 1:
        raise ValueError(f"expected exactly one aggregate row in {path}, found {len(rows)}")
    row = rows[0]
    version = row.get("schema_version")
    if version != AGGREGATE_SCHEMA_VERSION:
        raise ValueError(f"unsupported aggregate schema_version: {version}")
    aggregate = MobilityAggregate.from_dict({name: row[name] for name in FLAT_FIELD_NAMES})
    return aggregate, int(row["trial_count"])


def write_value_assignment(path: Path, assignment: ValueAssignment) -> Path:
    """Persist per-face values, one row per face."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    columns: dict[str, list[int | float | str]] = {
        "schema_version": [],
        "face": [],
        "move_count": [],
        "raw_value": [],
        "half_points": [],
        "value": [],
    }
    for entry in assignment:
        columns["schema_version"].append(VALUE_ASSIGNMENT_SCHEMA_VERSION)
        columns["face"].append(entry.name)
        columns["move_count"].append(len(entry.face.moves))
        columns["raw_value"].append(entry.raw)
        columns["half_points"].append(entry.points.halves)
        columns["value"].append(entry.points.value)
    pq.write_table(pa.Table.from_pydict(columns, schema=VALUE_ASSIGNMENT_SCHEMA), path)
    logger.info("wrote %d face values to %s", len(assignment), path)
    return path


def read_value_assignment(path: Path) -> dict[str, float]:
    """Load ``face -> value`` pairs written by :func:`write_value_assignment`."""
    table = pq.read_table(path, columns=["face", "value"])
    faces = table.column("face").to_pylist()
    values = table.column("value").to_pylist()
    return dict(zip(faces, values, strict=True))
