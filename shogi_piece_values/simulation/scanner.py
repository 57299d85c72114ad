"""Board scan: run every movement evaluator from every cell of one grid."""

from __future__ import annotations

from shogi_piece_values.config.constants import (
    DIRECTION_SYMMETRY_DIVISOR,
    KNIGHT_SYMMETRY_DIVISOR,
    LEAP_BUDGET,
    MAX_JUMP_DISTANCE,
    MAX_STEP_DISTANCE,
)
from shogi_piece_values.domain.directions import DIRECTIONS_BY_AXIS, AxisClass
from shogi_piece_values.domain.grid import Grid
from shogi_piece_values.domain.moves import (
    ReachTable,
    flying_capture,
    flying_jump,
    full_lion,
    hook,
    jump,
    jump_then_range,
    knight_jump,
    limited_lion,
)
from shogi_piece_values.simulation.aggregate import (
    FIELD_OFFSETS,
    FIELD_WIDTHS,
    VECTOR_LENGTH,
    MobilityAggregate,
    axis_field,
)

# Families summed over the four rays of an axis class, then averaged.
_DIRECTIONAL_FAMILIES = (
    "steps",
    "jumps",
    "range",
    "flying_jump",
    "flying_capture",
    "jump_then_range",
    "hook",
)


_OFFSETS: dict[AxisClass, dict[str, int]] = {
    axis: {family: FIELD_OFFSETS[axis_field(family, axis)] for family in _DIRECTIONAL_FAMILIES}
    for axis in AxisClass
}


def _scan_axis(
    grid: Grid,
    reach_table: ReachTable,
    x: int,
    y: int,
    axis: AxisClass,
    totals: list[float],
    leap_budget: int,
) -> None:
    at = _OFFSETS[axis]
    steps_at = at["steps"]
    jumps_at = at["jumps"]

    for direction in DIRECTIONS_BY_AXIS[axis]:
        reach = reach_table(x, y, direction)
        # A capped slide scores min(uncapped, cap): every cell walked counts 1
        for n in range(1, MAX_STEP_DISTANCE + 1):
            totals[steps_at + n] += min(reach, n)
        totals[at["range"]] += reach
        for n in range(1, MAX_JUMP_DISTANCE + 1):
            totals[jumps_at + n] += jump(grid, x, y, direction, n)
        totals[at["flying_jump"]] += flying_jump(grid, x, y, direction, budget=leap_budget)
        totals[at["flying_capture"]] += flying_capture(grid, x, y, direction)
        totals[at["jump_then_range"]] += jump_then_range(grid, x, y, direction, cast=reach_table)
        totals[at["hook"]] += hook(grid, x, y, direction, cast=reach_table)


def scan_board(grid: Grid, leap_budget: int = LEAP_BUDGET) -> MobilityAggregate:
    """Visit every cell once and accumulate symmetry-normalized mobility totals.

    Directional families are divided by 4 (one representative ray per axis
    class) and the knight total by 2. Lion totals are kept as they are.
    Border cells score 0 for every pattern and are skipped.
    """
    reach_table = ReachTable(grid)
    totals = [0.0] * VECTOR_LENGTH
    knight = 0
    lion = 0
    lion_dog = 0
    for y in range(1, grid.height - 1):
        for x in range(1, grid.width - 1):
            for axis in AxisClass:
                _scan_axis(grid, reach_table, x, y, axis, totals, leap_budget)
            knight += knight_jump(grid, x, y)
            lion += full_lion(grid, x, y)
            lion_dog += limited_lion(grid, x, y)

    for axis in AxisClass:
        for family in _DIRECTIONAL_FAMILIES:
            name = axis_field(family, axis)
            start = FIELD_OFFSETS[name]
            for i in range(start, start + FIELD_WIDTHS[name]):
                totals[i] /= DIRECTION_SYMMETRY_DIVISOR
    totals[FIELD_OFFSETS["knight_jump"]] = knight / KNIGHT_SYMMETRY_DIVISOR
    totals[FIELD_OFFSETS["full_lion"]] = float(lion)
    totals[FIELD_OFFSETS["limited_lion"]] = float(lion_dog)
    return MobilityAggregate(totals)
