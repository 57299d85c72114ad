"""Parquet schema definitions for estimation artifacts.

Both artifact schemas are declared here so that writers and readers work
against the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

from shogi_piece_values.simulation.aggregate import FLAT_FIELD_NAMES

AGGREGATE_SCHEMA_VERSION = 1
VALUE_ASSIGNMENT_SCHEMA_VERSION = 1

AGGREGATE_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("trial_count", pa.int64()),
        *((name, pa.float64()) for name in FLAT_FIELD_NAMES),
    ]
)
"""One row per estimation run: the mean aggregate and how many trials built it."""

VALUE_ASSIGNMENT_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("face", pa.string()),
        ("move_count", pa.int64()),
        ("raw_value", pa.float64()),
        ("half_points", pa.int64()),
        ("value", pa.float64()),
    ]
)
"""One row per face, in catalog order."""
