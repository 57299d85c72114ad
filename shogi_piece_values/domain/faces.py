"""Composite pieces ("faces") built from elementary move descriptors.

A face's value is the sum of the values of its moves, so each ``Move``
covers exactly one direction (or one whole area move for the lions).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shogi_piece_values.domain.directions import (
    ALL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    AxisClass,
    Direction,
)

N = Direction.NORTH
NE = Direction.NORTH_EAST
E = Direction.EAST
SE = Direction.SOUTH_EAST
S = Direction.SOUTH
SW = Direction.SOUTH_WEST
W = Direction.WEST
NW = Direction.NORTH_WEST


class MoveKind(Enum):
    """Movement family a descriptor selects."""

    STEP = "step"
    RANGE = "range"
    JUMP = "jump"
    JUMP_OR_RANGE = "jump_or_range"
    KNIGHT_FORWARD = "knight_forward"
    KNIGHT_BACKWARD = "knight_backward"
    HOOK = "hook"
    FULL_LION = "full_lion"
    LIMITED_LION = "limited_lion"
    JUMP_THEN_RANGE = "jump_then_range"
    FLYING_JUMP = "flying_jump"
    FLYING_CAPTURE = "flying_capture"


DIRECTIONLESS_KINDS = frozenset(
    {
        MoveKind.KNIGHT_FORWARD,
        MoveKind.KNIGHT_BACKWARD,
        MoveKind.FULL_LION,
        MoveKind.LIMITED_LION,
    }
)

DISTANCE_KINDS = frozenset(
    {
        MoveKind.STEP,
        MoveKind.JUMP,
        MoveKind.JUMP_OR_RANGE,
        MoveKind.JUMP_THEN_RANGE,
    }
)


@dataclass(frozen=True)
class Move:
    """One elementary move: family, direction and optional distance."""

    kind: MoveKind
    direction: Direction | None = None
    distance: int | None = None

    def __post_init__(self) -> None:
        if self.kind in DIRECTIONLESS_KINDS:
            if self.direction is not None:
                raise ValueError(f"{self.kind.value} moves take no direction")
        elif self.direction is None:
            raise ValueError(f"{self.kind.value} moves need a direction")
        if self.kind in DISTANCE_KINDS:
            if self.distance is None or self.distance < 0:
                raise ValueError(f"{self.kind.value} moves need a distance >= 0")
        elif self.distance is not None:
            raise ValueError(f"{self.kind.value} moves take no distance")

    @property
    def axis(self) -> AxisClass | None:
        return None if self.direction is None else self.direction.axis


@dataclass(frozen=True)
class Face:
    """A named composite piece."""

    name: str
    moves: tuple[Move, ...]


# ---------------------------------------------------------------------------
# Descriptor helpers
# ---------------------------------------------------------------------------


def steps(n: int, *directions: Direction) -> tuple[Move, ...]:
    return tuple(Move(MoveKind.STEP, d, n) for d in directions)


def ranges(*directions: Direction) -> tuple[Move, ...]:
    return tuple(Move(MoveKind.RANGE, d) for d in directions)


def jumps(n: int, *directions: Direction) -> tuple[Move, ...]:
    return tuple(Move(MoveKind.JUMP, d, n) for d in directions)


def hooks(*directions: Direction) -> tuple[Move, ...]:
    return tuple(Move(MoveKind.HOOK, d) for d in directions)


def flying_jumps(*directions: Direction) -> tuple[Move, ...]:
    return tuple(Move(MoveKind.FLYING_JUMP, d) for d in directions)


def flying_captures(*directions: Direction) -> tuple[Move, ...]:
    return tuple(Move(MoveKind.FLYING_CAPTURE, d) for d in directions)


def jump_or_ranges(n: int, *directions: Direction) -> tuple[Move, ...]:
    return tuple(Move(MoveKind.JUMP_OR_RANGE, d, n) for d in directions)


def jump_then_ranges(n: int, *directions: Direction) -> tuple[Move, ...]:
    return tuple(Move(MoveKind.JUMP_THEN_RANGE, d, n) for d in directions)


def face(name: str, *groups: tuple[Move, ...]) -> Face:
    return Face(name=name, moves=tuple(m for group in groups for m in group))


# ---------------------------------------------------------------------------
# Default catalog
# ---------------------------------------------------------------------------

KNIGHT = (Move(MoveKind.KNIGHT_FORWARD),)
LION = (Move(MoveKind.FULL_LION),)
LION_DOG = (Move(MoveKind.LIMITED_LION),)


def default_faces() -> list[Face]:
    """Return the built-in catalog of well-known large-variant pieces."""
    return [
        face("Pawn", steps(1, N)),
        face("Go Between", steps(1, N, S)),
        face("Stone General", steps(1, NE, NW)),
        face("Iron General", steps(1, N, NE, NW)),
        face("Copper General", steps(1, N, NE, NW, S)),
        face("Silver General", steps(1, N, NE, NW, SE, SW)),
        face("Ferocious Leopard", steps(1, N, NE, NW, S, SE, SW)),
        face("Gold General", steps(1, N, NE, NW, E, W, S)),
        face("Blind Tiger", steps(1, NE, NW, E, W, S, SE, SW)),
        face("Drunk Elephant", steps(1, N, NE, NW, E, W, SE, SW)),
        face("King", steps(1, *ALL_DIRECTIONS)),
        face("Lance", ranges(N)),
        face("Knight", KNIGHT),
        face("Side Mover", ranges(E, W), steps(1, N, S)),
        face("Vertical Mover", ranges(N, S), steps(1, E, W)),
        face("Bishop", ranges(*DIAGONAL_DIRECTIONS)),
        face("Rook", ranges(*ORTHOGONAL_DIRECTIONS)),
        face("Dragon Horse", ranges(*DIAGONAL_DIRECTIONS), steps(1, *ORTHOGONAL_DIRECTIONS)),
        face("Dragon King", ranges(*ORTHOGONAL_DIRECTIONS), steps(1, *DIAGONAL_DIRECTIONS)),
        face("Free King", ranges(*ALL_DIRECTIONS)),
        face("Phoenix", steps(1, *ORTHOGONAL_DIRECTIONS), jumps(2, *DIAGONAL_DIRECTIONS)),
        face("Kirin", steps(1, *DIAGONAL_DIRECTIONS), jumps(2, *ORTHOGONAL_DIRECTIONS)),
        face("Lion", LION),
        face("Lion Dog", LION_DOG),
        face("Hook Mover", hooks(*ORTHOGONAL_DIRECTIONS)),
        face("Capricorn", hooks(*DIAGONAL_DIRECTIONS)),
        face("Great General", flying_captures(*ALL_DIRECTIONS)),
        face(
            "Vice General",
            flying_captures(*DIAGONAL_DIRECTIONS),
            steps(1, *ORTHOGONAL_DIRECTIONS),
        ),
        face("Flying Rook", flying_jumps(*ORTHOGONAL_DIRECTIONS)),
        face("Flying Bishop", flying_jumps(*DIAGONAL_DIRECTIONS)),
        face("Charging Rook", jump_then_ranges(1, *ORTHOGONAL_DIRECTIONS)),
        face("Soaring Eagle", ranges(*ORTHOGONAL_DIRECTIONS, SE, SW), jump_then_ranges(1, NE, NW)),
        face("Horned Falcon", ranges(*DIAGONAL_DIRECTIONS, E, W, S), jump_then_ranges(1, N)),
        face("Leaping Rook", jump_or_ranges(2, *ORTHOGONAL_DIRECTIONS)),
    ]
