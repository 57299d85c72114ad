"""Configuration layer: constants and the typed estimation config."""

from shogi_piece_values.config.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEFAULT_BATCH_SIZE,
    DEFAULT_TRIAL_COUNT,
    JUMP_SLOTS,
    LEAP_BUDGET,
    MAX_JUMP_DISTANCE,
    MAX_PIECES_PER_SIDE,
    MAX_PLACEMENT_ATTEMPTS,
    MAX_STEP_DISTANCE,
    MAX_TOTAL_PIECES,
    MIN_TOTAL_PIECES,
    STEP_SLOTS,
)
from shogi_piece_values.config.types import EstimationConfig

__all__ = [
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_TRIAL_COUNT",
    "EstimationConfig",
    "JUMP_SLOTS",
    "LEAP_BUDGET",
    "MAX_JUMP_DISTANCE",
    "MAX_PIECES_PER_SIDE",
    "MAX_PLACEMENT_ATTEMPTS",
    "MAX_STEP_DISTANCE",
    "MAX_TOTAL_PIECES",
    "MIN_TOTAL_PIECES",
    "STEP_SLOTS",
]
