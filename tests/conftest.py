from __future__ import annotations

import pytest

from shogi_piece_values.config.types import EstimationConfig


@pytest.fixture
def small_config() -> EstimationConfig:
    """A 10x10 board with few pieces so full trials run quickly."""
    return EstimationConfig(
        board_width=10,
        board_height=10,
        max_total_pieces=30,
        max_pieces_per_side=15,
        batch_size=2,
    )
