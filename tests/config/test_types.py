"""Tests for EstimationConfig validation."""

from __future__ import annotations

import pytest

from shogi_piece_values.config.types import EstimationConfig


class TestEstimationConfig:
    def test_defaults_are_valid(self) -> None:
        config = EstimationConfig()
        assert config.board_cells == 36 * 36
        assert config.workers is None

    def test_is_frozen(self) -> None:
        config = EstimationConfig()
        with pytest.raises(AttributeError):
            config.board_width = 10  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"board_width": 4},
            {"board_height": 0},
            {"min_total_pieces": 2},
            {"min_total_pieces": 10, "max_total_pieces": 10},
            {"max_pieces_per_side": 1},
            {"board_width": 10, "board_height": 10},
            {"leap_budget": -1},
            {"max_placement_attempts": 0},
            {"workers": 0},
            {"batch_size": 0},
        ],
    )
    def test_invalid_values_raise(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            EstimationConfig(**kwargs)

    def test_small_board_with_matching_piece_bounds(self) -> None:
        config = EstimationConfig(
            board_width=6, board_height=6, max_total_pieces=37, max_pieces_per_side=18
        )
        assert config.board_cells == 36
