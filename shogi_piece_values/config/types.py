"""Configuration dataclass for Monte Carlo estimation runs."""

from __future__ import annotations

from dataclasses import dataclass

from shogi_piece_values.config.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEFAULT_BATCH_SIZE,
    LEAP_BUDGET,
    MAX_PIECES_PER_SIDE,
    MAX_PLACEMENT_ATTEMPTS,
    MAX_TOTAL_PIECES,
    MIN_BOARD_SIZE,
    MIN_TOTAL_PIECES,
)

__all__ = ["EstimationConfig"]


@dataclass(frozen=True)
class EstimationConfig:
    """Board geometry, population bounds and execution knobs for one run.

    Piece bounds follow the sampling rule used by ``populate_grid``:
    ``total`` is drawn from ``[min_total_pieces, max_total_pieces)`` and
    ``friendly`` from ``[1, min(total - 1, max_pieces_per_side))``.
    """

    board_width: int = BOARD_WIDTH
    board_height: int = BOARD_HEIGHT
    min_total_pieces: int = MIN_TOTAL_PIECES
    max_total_pieces: int = MAX_TOTAL_PIECES
    max_pieces_per_side: int = MAX_PIECES_PER_SIDE
    leap_budget: int = LEAP_BUDGET
    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS
    workers: int | None = None
    batch_size: int = DEFAULT_BATCH_SIZE
    base_seed: int = 0

    def __post_init__(self) -> None:
        if self.board_width < MIN_BOARD_SIZE or self.board_height < MIN_BOARD_SIZE:
            raise ValueError(f"board dimensions must be >= {MIN_BOARD_SIZE}")
        if self.min_total_pieces < 3:
            raise ValueError("min_total_pieces must be >= 3")
        if self.max_total_pieces <= self.min_total_pieces:
            raise ValueError("max_total_pieces must be > min_total_pieces")
        if self.max_pieces_per_side < 2:
            raise ValueError("max_pieces_per_side must be >= 2")
        # Largest board load: max_total_pieces - 1 pieces in the worst case
        if self.max_total_pieces - 1 > self.board_width * self.board_height:
            raise ValueError("max_total_pieces exceeds board capacity")
        if self.leap_budget < 0:
            raise ValueError("leap_budget must be >= 0")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be >= 1")
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be >= 1")
        if self.batch_size < 1:
            raise ValueError("batch_size must be >= 1")

    @property
    def board_cells(self) -> int:
        """Total number of cells on the board."""
        return self.board_width * self.board_height
