"""Movement evaluators.

Each evaluator answers one question for a hypothetical piece standing on
``(x, y)``: how many cells does this movement pattern reach (or capture)
against the current occupancy? All of them are pure functions of the grid
and are parameterized by :class:`Direction` rather than written per compass
point.

Shared rules:

- A move may only start from, and only land on, the playable interior
  (see :meth:`Grid.is_interior`). An origin on the outermost ring scores 0.
- Sliding moves count an empty cell and keep going, count an opponent and
  stop (capture), and stop without credit on a friendly piece.
"""

from __future__ import annotations

from collections.abc import Callable

from shogi_piece_values.config.constants import LEAP_BUDGET, MAX_JUMP_DISTANCE
from shogi_piece_values.domain.directions import ALL_DIRECTIONS, Direction
from shogi_piece_values.domain.grid import Grid, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = ((1, -2), (-1, -2))
"""Forward knight jumps; north is ``dy = -1``."""

LION_RADIUS = 2
"""Chebyshev radius of the full lion's landing area."""

SlideCast = Callable[[int, int, Direction], int]
"""Unlimited slide length from ``(x, y)`` along a direction."""


def _ray_limit(grid: Grid) -> int:
    return max(grid.width, grid.height)


def line_cast(grid: Grid, x: int, y: int, direction: Direction, n: int) -> int:
    """Count cells a slide of at most ``n`` steps reaches from ``(x, y)``."""
    if n <= 0 or not grid.is_interior(x, y):
        return 0
    total = 0
    for _ in range(n):
        x += direction.dx
        y += direction.dy
        if not grid.is_interior(x, y):
            break
        square = grid.get(x, y)
        if square is Square.FRIENDLY:
            break
        total += 1
        if square is Square.OPPONENT:
            break
    return total


def unlimited_line_cast(grid: Grid, x: int, y: int, direction: Direction) -> int:
    """Slide with no distance cap; always ends at a piece or the border."""
    return line_cast(grid, x, y, direction, _ray_limit(grid))


class ReachTable:
    """Unlimited slide length from every cell in every direction of one grid.

    Built with one pass per direction: a cell's reach is 0 when the next
    cell is off the interior or friendly, 1 when it is an opponent, and one
    more than the next cell's reach when it is empty. Calling the table
    gives the same numbers as :func:`unlimited_line_cast`.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        cells = grid.cells.tolist()
        self._tables = {d: self._build(grid, cells, d) for d in ALL_DIRECTIONS}

    @staticmethod
    def _build(grid: Grid, cells: list[list[int]], direction: Direction) -> list[list[int]]:
        dx, dy = direction.dx, direction.dy
        table = [[0] * grid.width for _ in range(grid.height)]
        # Visit the next cell along the ray before the cell itself
        ys = range(grid.height) if dy <= 0 else range(grid.height - 1, -1, -1)
        xs = range(grid.width) if dx <= 0 else range(grid.width - 1, -1, -1)
        for y in ys:
            for x in xs:
                nx, ny = x + dx, y + dy
                if not (grid.is_interior(x, y) and grid.is_interior(nx, ny)):
                    continue
                square = cells[ny][nx]
                if square == Square.EMPTY:
                    table[y][x] = 1 + table[ny][nx]
                elif square == Square.OPPONENT:
                    table[y][x] = 1
        return table

    def __call__(self, x: int, y: int, direction: Direction) -> int:
        if not self._grid.is_interior(x, y):
            return 0
        return self._tables[direction][y][x]


def _slide_cast(grid: Grid, cast: SlideCast | None) -> SlideCast:
    if cast is not None:
        return cast
    return lambda x, y, direction: unlimited_line_cast(grid, x, y, direction)


def jump_to(grid: Grid, x: int, y: int, dx: int, dy: int) -> int:
    """Score a single jump to ``(x + dx, y + dy)``, ignoring cells in between."""
    if not grid.is_interior(x, y):
        return 0
    tx, ty = x + dx, y + dy
    if not grid.is_interior(tx, ty):
        return 0
    return 0 if grid.get(tx, ty) is Square.FRIENDLY else 1


def jump(grid: Grid, x: int, y: int, direction: Direction, n: int) -> int:
    """Score a jump of exactly ``n`` cells along ``direction``. ``n == 0`` scores 0."""
    if n <= 0:
        return 0
    return jump_to(grid, x, y, direction.dx * n, direction.dy * n)


def knight_jump(grid: Grid, x: int, y: int) -> int:
    """Sum of both forward knight jumps."""
    return sum(jump_to(grid, x, y, dx, dy) for dx, dy in KNIGHT_OFFSETS)


def flying_jump(
    grid: Grid,
    x: int,
    y: int,
    direction: Direction,
    budget: int = LEAP_BUDGET,
    n: int | None = None,
) -> int:
    """Slide that may pass over up to ``budget`` occupied cells.

    Every visited cell counts 1. An occupied cell spends one unit of the
    budget; the occupied cell reached with no budget left is the last one.
    """
    if not grid.is_interior(x, y):
        return 0
    limit = _ray_limit(grid) if n is None else n
    total = 0
    for _ in range(limit):
        x += direction.dx
        y += direction.dy
        if not grid.is_interior(x, y):
            break
        total += 1
        if grid.get(x, y) is Square.EMPTY:
            continue
        if budget == 0:
            break
        budget -= 1
    return total


def flying_capture(grid: Grid, x: int, y: int, direction: Direction) -> int:
    """Slide to the first piece, then count every piece further along the ray.

    Empty cells before the first piece count 1 each and the first piece is
    scored like the end of a normal slide. Beyond it, each occupied cell
    adds 1 whatever its side, and nothing stops the count except the border.
    """
    if not grid.is_interior(x, y):
        return 0
    total = 0
    blocked = False
    for _ in range(_ray_limit(grid)):
        x += direction.dx
        y += direction.dy
        if not grid.is_interior(x, y):
            break
        square = grid.get(x, y)
        if square is Square.EMPTY:
            if not blocked:
                total += 1
            continue
        if blocked:
            total += 1
        else:
            blocked = True
            if square is Square.OPPONENT:
                total += 1
    return total


def hook(
    grid: Grid, x: int, y: int, direction: Direction, cast: SlideCast | None = None
) -> int:
    """Slide that may turn once at a right angle on any empty cell it passes.

    ``cast`` supplies the perpendicular slides; pass a :class:`ReachTable`
    to avoid re-walking them.
    """
    if not grid.is_interior(x, y):
        return 0
    cast = _slide_cast(grid, cast)
    left, right = direction.perpendicular()
    total = 0
    for _ in range(_ray_limit(grid)):
        x += direction.dx
        y += direction.dy
        if not grid.is_interior(x, y):
            break
        square = grid.get(x, y)
        if square is Square.FRIENDLY:
            break
        total += 1
        if square is Square.OPPONENT:
            break
        total += cast(x, y, left) + cast(x, y, right)
    return total


def jump_then_range(
    grid: Grid, x: int, y: int, direction: Direction, cast: SlideCast | None = None
) -> int:
    """Slide from the origin plus a slide from one cell further along."""
    if not grid.is_interior(x, y):
        return 0
    cast = _slide_cast(grid, cast)
    return cast(x, y, direction) + cast(x + direction.dx, y + direction.dy, direction)


def _with_existence_credit(reachable: int) -> int:
    # The move itself is worth one more once any landing exists
    return reachable + 1 if reachable else 0


def full_lion(grid: Grid, x: int, y: int) -> int:
    """Area move over the 24 cells within Chebyshev distance 2."""
    if not grid.is_interior(x, y):
        return 0
    reachable = 0
    for dy in range(-LION_RADIUS, LION_RADIUS + 1):
        for dx in range(-LION_RADIUS, LION_RADIUS + 1):
            if dx or dy:
                reachable += jump_to(grid, x, y, dx, dy)
    return _with_existence_credit(reachable)


def limited_lion(grid: Grid, x: int, y: int) -> int:
    """Single jumps of 1, 2 and 3 cells in all eight directions."""
    if not grid.is_interior(x, y):
        return 0
    reachable = sum(
        jump(grid, x, y, direction, n)
        for direction in ALL_DIRECTIONS
        for n in range(1, MAX_JUMP_DISTANCE + 1)
    )
    return _with_existence_credit(reachable)
