"""Tests for move descriptors and the default face catalog."""

from __future__ import annotations

import pytest

from shogi_piece_values.domain.directions import AxisClass, Direction
from shogi_piece_values.domain.faces import (
    Face,
    Move,
    MoveKind,
    default_faces,
    face,
    ranges,
    steps,
)


class TestMove:
    def test_axis_follows_direction(self) -> None:
        assert Move(MoveKind.RANGE, Direction.NORTH_EAST).axis is AxisClass.DIAGONAL
        assert Move(MoveKind.FULL_LION).axis is None

    @pytest.mark.parametrize(
        ("kind", "direction", "distance"),
        [
            (MoveKind.STEP, Direction.NORTH, None),
            (MoveKind.STEP, None, 1),
            (MoveKind.JUMP, Direction.NORTH, -1),
            (MoveKind.RANGE, Direction.NORTH, 2),
            (MoveKind.FULL_LION, Direction.NORTH, None),
            (MoveKind.KNIGHT_FORWARD, None, 1),
        ],
    )
    def test_invalid_descriptors_raise(
        self, kind: MoveKind, direction: Direction | None, distance: int | None
    ) -> None:
        with pytest.raises(ValueError):
            Move(kind, direction, distance)

    def test_moves_are_hashable_values(self) -> None:
        assert Move(MoveKind.STEP, Direction.NORTH, 1) == Move(MoveKind.STEP, Direction.NORTH, 1)
        assert len({Move(MoveKind.HOOK, Direction.EAST), Move(MoveKind.HOOK, Direction.EAST)}) == 1


class TestFaceHelpers:
    def test_face_flattens_move_groups(self) -> None:
        dragon = face("Dragon", ranges(Direction.NORTH), steps(1, Direction.EAST, Direction.WEST))
        assert isinstance(dragon, Face)
        assert [m.kind for m in dragon.moves] == [MoveKind.RANGE, MoveKind.STEP, MoveKind.STEP]


class TestDefaultCatalog:
    def test_names_are_unique(self) -> None:
        names = [f.name for f in default_faces()]
        assert len(names) == len(set(names))

    def test_pawn_is_single_orthogonal_step(self) -> None:
        pawn = next(f for f in default_faces() if f.name == "Pawn")
        assert pawn.moves == (Move(MoveKind.STEP, Direction.NORTH, 1),)

    def test_every_face_has_moves(self) -> None:
        assert all(f.moves for f in default_faces())

    def test_catalog_uses_every_move_kind_except_backward_knight(self) -> None:
        kinds = {m.kind for f in default_faces() for m in f.moves}
        assert kinds == set(MoveKind) - {MoveKind.KNIGHT_BACKWARD}
