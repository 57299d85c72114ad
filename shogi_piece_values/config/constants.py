"""Centralized domain constants for piece-value estimation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

BOARD_WIDTH = 36
"""Board width in cells."""

BOARD_HEIGHT = 36
"""Board height in cells."""

MIN_BOARD_SIZE = 5
"""Smallest board edge that still leaves a 3x3 playable interior."""

MIN_TOTAL_PIECES = 3
"""Inclusive lower bound for the sampled number of pieces on a board."""

MAX_TOTAL_PIECES = 804
"""Exclusive upper bound for the sampled number of pieces on a board."""

MAX_PIECES_PER_SIDE = 402
"""Exclusive bound on sampled friendly pieces; inclusive cap on opponents."""

MAX_STEP_DISTANCE = 7
"""Largest step-N distance tracked in the mobility aggregate."""

STEP_SLOTS = 8
"""Step-distance slots per axis class (index 0 is always zero)."""

MAX_JUMP_DISTANCE = 3
"""Largest fixed-offset jump tracked in the mobility aggregate."""

JUMP_SLOTS = 4
"""Jump-distance slots per axis class (index 0 is always zero)."""

LEAP_BUDGET = 3
"""Occupied cells a flying jump may pass before it must stop."""

MAX_PLACEMENT_ATTEMPTS = 100_000
"""Retry cap when drawing a free cell for one piece."""

DEFAULT_TRIAL_COUNT = 10_000
"""Trial count used by the command line when none is given."""

DEFAULT_BATCH_SIZE = 64
"""Trials handed to one worker task in parallel runs."""

DIRECTION_SYMMETRY_DIVISOR = 4.0
"""Equivalent rays per axis class folded into one representative value."""

KNIGHT_SYMMETRY_DIVISOR = 2.0
"""Equivalent knight jumps folded into one representative value."""
