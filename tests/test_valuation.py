"""Tests for shogi_piece_values.valuation."""

from __future__ import annotations

import numpy as np
import pytest

from shogi_piece_values.domain.directions import Direction
from shogi_piece_values.domain.faces import Face, Move, MoveKind, default_faces
from shogi_piece_values.errors import ValuationError
from shogi_piece_values.simulation.aggregate import FIELD_OFFSETS, VECTOR_LENGTH, MobilityAggregate
from shogi_piece_values.valuation import (
    HalfPoints,
    assign_values_to_faces,
    normalize,
    round_to_nearest_half,
    value_of_face,
    value_of_move,
)


def _aggregate(**fields: float) -> MobilityAggregate:
    values = np.zeros(VECTOR_LENGTH)
    for name, value in fields.items():
        if name[-1].isdigit():
            base, index = name.rsplit("_", 1)
            values[FIELD_OFFSETS[base] + int(index)] = value
        else:
            values[FIELD_OFFSETS[name]] = value
    return MobilityAggregate(values)


@pytest.fixture
def normalized() -> MobilityAggregate:
    return _aggregate(
        orthogonal_steps_1=1.0,
        orthogonal_steps_2=1.8,
        diagonal_steps_1=0.9,
        orthogonal_jumps_2=0.7,
        diagonal_jumps_2=0.6,
        orthogonal_range=4.0,
        diagonal_range=3.5,
        knight_jump=0.4,
        orthogonal_hook=20.0,
        diagonal_hook=18.0,
        orthogonal_flying_jump=6.0,
        diagonal_flying_jump=5.0,
        orthogonal_flying_capture=7.0,
        diagonal_flying_capture=6.5,
        orthogonal_jump_then_range=7.5,
        diagonal_jump_then_range=6.0,
        full_lion=15.0,
        limited_lion=14.0,
    )


class TestNormalize:
    def test_pins_single_step_to_one(self) -> None:
        aggregate = _aggregate(orthogonal_steps_1=4.0, orthogonal_range=10.0)
        result = normalize(aggregate)
        assert result.pawn() == 1.0
        assert result.orthogonal_range == 2.5

    def test_zero_unit_raises(self) -> None:
        with pytest.raises(ValuationError):
            normalize(MobilityAggregate.zero())


class TestValueOfMove:
    @pytest.mark.parametrize(
        ("move", "expected"),
        [
            (Move(MoveKind.STEP, Direction.NORTH, 1), 1.0),
            (Move(MoveKind.STEP, Direction.EAST, 2), 1.8),
            (Move(MoveKind.STEP, Direction.SOUTH_WEST, 1), 0.9),
            (Move(MoveKind.RANGE, Direction.NORTH_WEST), 3.5),
            (Move(MoveKind.JUMP, Direction.SOUTH, 2), 0.7),
            (Move(MoveKind.JUMP_OR_RANGE, Direction.NORTH_EAST, 2), 0.6 + 3.5),
            (Move(MoveKind.KNIGHT_FORWARD), 0.8),
            (Move(MoveKind.KNIGHT_BACKWARD), 0.8),
            (Move(MoveKind.HOOK, Direction.WEST), 20.0),
            (Move(MoveKind.FLYING_JUMP, Direction.SOUTH_EAST), 5.0),
            (Move(MoveKind.FLYING_CAPTURE, Direction.NORTH), 7.0),
            (Move(MoveKind.JUMP_THEN_RANGE, Direction.NORTH, 1), 7.5),
            (Move(MoveKind.FULL_LION), 15.0),
            (Move(MoveKind.LIMITED_LION), 14.0),
        ],
    )
    def test_selects_field(
        self, move: Move, expected: float, normalized: MobilityAggregate
    ) -> None:
        assert value_of_move(move, normalized) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "move",
        [
            Move(MoveKind.STEP, Direction.NORTH, 8),
            Move(MoveKind.JUMP, Direction.NORTH, 4),
            Move(MoveKind.JUMP_OR_RANGE, Direction.NORTH, 9),
        ],
    )
    def test_distance_outside_layout_raises(
        self, move: Move, normalized: MobilityAggregate
    ) -> None:
        with pytest.raises(ValuationError):
            value_of_move(move, normalized)

    def test_face_value_sums_moves(self, normalized: MobilityAggregate) -> None:
        rook = Face("Rook", tuple(Move(MoveKind.RANGE, d) for d in Direction if d.is_orthogonal()))
        assert value_of_face(rook, normalized) == pytest.approx(16.0)


class TestHalfPoints:
    @pytest.mark.parametrize(
        ("value", "halves", "text"),
        [
            (1.0, 2, "1"),
            (1.2, 2, "1"),
            (1.3, 3, "1.5"),
            (3.74, 7, "3.5"),
            (0.1, 0, "0"),
            (-0.8, -2, "-1"),
        ],
    )
    def test_rounding_and_display(self, value: float, halves: int, text: str) -> None:
        points = round_to_nearest_half(value)
        assert points == HalfPoints(halves)
        assert str(points) == text
        assert points.value == halves / 2

    def test_negative_half(self) -> None:
        assert str(HalfPoints(-3)) == "-1.5"


class TestAssignValues:
    def test_pawn_is_one_point(self) -> None:
        aggregate = _aggregate(orthogonal_steps_1=2.0, orthogonal_range=9.0, full_lion=25.0)
        assignment = assign_values_to_faces(aggregate)
        assert assignment["Pawn"] == HalfPoints(2)
        assert assignment["Rook"] == HalfPoints(36)
        assert assignment["Lion"].value == 12.5
        assert len(assignment) == len(default_faces())

    def test_custom_catalog_keeps_order(self) -> None:
        faces = [
            Face("B", (Move(MoveKind.FULL_LION),)),
            Face("A", (Move(MoveKind.STEP, Direction.NORTH, 1),)),
        ]
        aggregate = _aggregate(orthogonal_steps_1=1.0, full_lion=3.3)
        assignment = assign_values_to_faces(aggregate, faces)
        assert [entry.name for entry in assignment] == ["B", "A"]
        assert assignment.as_dict() == {"B": 3.5, "A": 1.0}
        assert next(iter(assignment)).raw == pytest.approx(3.3)

    def test_missing_face_raises_key_error(self) -> None:
        assignment = assign_values_to_faces(_aggregate(orthogonal_steps_1=1.0), [])
        with pytest.raises(KeyError):
            assignment["Pawn"]
