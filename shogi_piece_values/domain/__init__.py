"""Domain layer: board occupancy, directions, movement evaluators and faces."""

from shogi_piece_values.domain.directions import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    AxisClass,
    Direction,
)
from shogi_piece_values.domain.faces import Face, Move, MoveKind, default_faces
from shogi_piece_values.domain.grid import Grid, Square, populate_grid, sample_piece_counts

__all__ = [
    "ALL_DIRECTIONS",
    "AxisClass",
    "DIAGONAL_DIRECTIONS",
    "Direction",
    "Face",
    "Grid",
    "Move",
    "MoveKind",
    "ORTHOGONAL_DIRECTIONS",
    "Square",
    "default_faces",
    "populate_grid",
    "sample_piece_counts",
]
