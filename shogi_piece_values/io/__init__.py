"""Parquet persistence for aggregates and value assignments."""

from shogi_piece_values.io.paths import aggregate_path, value_assignment_path
from shogi_piece_values.io.persistence import (
    read_aggregate,
    read_value_assignment,
    write_aggregate,
    write_value_assignment,
)

__all__ = [
    "aggregate_path",
    "read_aggregate",
    "read_value_assignment",
    "value_assignment_path",
    "write_aggregate",
    "write_value_assignment",
]
