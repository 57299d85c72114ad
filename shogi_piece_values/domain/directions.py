"""Compass directions shared by every movement evaluator.

Each direction carries its unit offset and its axis class, so movement
families are written once and parameterized by ``Direction``. North is
``dy = -1`` (towards row 0).
"""

from __future__ import annotations

from enum import Enum


class AxisClass(Enum):
    """Orthogonal (N/E/S/W) versus diagonal (NE/SE/SW/NW) rays."""

    ORTHOGONAL = "orthogonal"
    DIAGONAL = "diagonal"


class Direction(Enum):
    """One of the eight unit offsets ``(dx, dy)``."""

    NORTH = (0, -1)
    NORTH_EAST = (1, -1)
    EAST = (1, 0)
    SOUTH_EAST = (1, 1)
    SOUTH = (0, 1)
    SOUTH_WEST = (-1, 1)
    WEST = (-1, 0)
    NORTH_WEST = (-1, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def axis(self) -> AxisClass:
        if self.dx == 0 or self.dy == 0:
            return AxisClass.ORTHOGONAL
        return AxisClass.DIAGONAL

    def is_orthogonal(self) -> bool:
        return self.axis is AxisClass.ORTHOGONAL

    def perpendicular(self) -> tuple[Direction, Direction]:
        """Return the two directions at right angles to this one."""
        return Direction((-self.dy, self.dx)), Direction((self.dy, -self.dx))

    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))


ALL_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)
"""All eight directions in clockwise order starting at north."""

ORTHOGONAL_DIRECTIONS: tuple[Direction, ...] = tuple(
    d for d in Direction if d.axis is AxisClass.ORTHOGONAL
)

DIAGONAL_DIRECTIONS: tuple[Direction, ...] = tuple(
    d for d in Direction if d.axis is AxisClass.DIAGONAL
)

DIRECTIONS_BY_AXIS: dict[AxisClass, tuple[Direction, ...]] = {
    AxisClass.ORTHOGONAL: ORTHOGONAL_DIRECTIONS,
    AxisClass.DIAGONAL: DIAGONAL_DIRECTIONS,
}
