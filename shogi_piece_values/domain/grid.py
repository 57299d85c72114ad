"""Occupancy grid and random board population.

The grid is a fixed ``width x height`` array addressed by ``(x, y)`` and
stored row-major. Only the playable interior ``0 < x < width - 1`` and
``0 < y < height - 1`` can be moved from or moved onto; the outermost ring
exists so that coordinates next to the interior stay addressable.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from random import Random

import numpy as np

from shogi_piece_values.config.types import EstimationConfig
from shogi_piece_values.errors import PlacementError

logger = logging.getLogger(__name__)


class Square(IntEnum):
    """Occupancy state of one cell. The ordering carries no meaning."""

    EMPTY = 0
    FRIENDLY = 1
    OPPONENT = 2


class Grid:
    """Fixed-size board of ``Square`` values."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1")
        self.width = width
        self.height = height
        self.cells = np.full((height, width), Square.EMPTY, dtype=np.int8)

    @classmethod
    def empty(cls, config: EstimationConfig | None = None) -> Grid:
        config = config or EstimationConfig()
        return cls(config.board_width, config.board_height)

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")

    def get(self, x: int, y: int) -> Square:
        self._check_bounds(x, y)
        return Square(self.cells.item(y, x))

    def set(self, square: Square, x: int, y: int) -> None:
        self._check_bounds(x, y)
        self.cells[y, x] = square

    def is_interior(self, x: int, y: int) -> bool:
        """True when ``(x, y)`` lies strictly inside the outermost ring."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def count(self, square: Square) -> int:
        return int(np.count_nonzero(self.cells == square))

    def positions(self, square: Square) -> set[tuple[int, int]]:
        """Return every ``(x, y)`` currently holding ``square``."""
        ys, xs = np.nonzero(self.cells == square)
        return {(int(x), int(y)) for x, y in zip(xs, ys, strict=True)}

    def randomly_place(self, rng: Random, square: Square, max_attempts: int) -> tuple[int, int]:
        """Put ``square`` on a uniformly drawn empty cell and return its position.

        Occupied draws are resampled. Raises :exc:`PlacementError` after
        ``max_attempts`` draws without finding a free cell.
        """
        for attempt in range(max_attempts):
            x = rng.randrange(self.width)
            y = rng.randrange(self.height)
            if self.cells.item(y, x) == Square.EMPTY:
                if attempt:
                    logger.debug(
                        "placed %s at (%d, %d) after %d retries", square.name, x, y, attempt
                    )
                self.cells[y, x] = square
                return x, y
        raise PlacementError(
            f"no free cell for {square.name} after {max_attempts} attempts "
            f"on a {self.width}x{self.height} grid"
        )


def sample_piece_counts(rng: Random, config: EstimationConfig) -> tuple[int, int]:
    """Draw ``(friendly_count, opponent_count)`` for one trial.

    ``total`` is uniform over ``[min_total_pieces, max_total_pieces)`` and
    ``friendly`` uniform over ``[1, min(total - 1, max_pieces_per_side))``.
    Opponents fill the remainder, capped at ``max_pieces_per_side``.
    """
    total = rng.randrange(config.min_total_pieces, config.max_total_pieces)
    friendly = rng.randrange(1, min(total - 1, config.max_pieces_per_side))
    opponent = min(total - friendly, config.max_pieces_per_side)
    return friendly, opponent


def populate_grid(rng: Random, config: EstimationConfig | None = None) -> Grid:
    """Create a fresh grid with a random number of friendly and opponent pieces."""
    config = config or EstimationConfig()
    grid = Grid.empty(config)
    friendly, opponent = sample_piece_counts(rng, config)
    for _ in range(friendly):
        grid.randomly_place(rng, Square.FRIENDLY, config.max_placement_attempts)
    for _ in range(opponent):
        grid.randomly_place(rng, Square.OPPONENT, config.max_placement_attempts)
    return grid
