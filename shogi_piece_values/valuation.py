"""Turn a mobility aggregate into point values for named faces.

The orthogonal single step is pinned to one point. Every other field is
expressed relative to it, summed per face and rounded to a half point.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from shogi_piece_values.domain.faces import Face, Move, MoveKind, default_faces
from shogi_piece_values.errors import ValuationError
from shogi_piece_values.simulation.aggregate import MobilityAggregate, axis_field

KNIGHT_VARIANTS = 2
"""Knight jumps folded into one ``knight_jump`` field."""

# Move kinds whose value is one axis-class field, keyed by field family.
_AXIS_FIELD_KINDS: dict[MoveKind, str] = {
    MoveKind.RANGE: "range",
    MoveKind.HOOK: "hook",
    MoveKind.FLYING_JUMP: "flying_jump",
    MoveKind.FLYING_CAPTURE: "flying_capture",
    MoveKind.JUMP_THEN_RANGE: "jump_then_range",
}


def normalize(aggregate: MobilityAggregate) -> MobilityAggregate:
    """Divide every field by the pinned unit so a single step is worth 1.0."""
    pawn = aggregate.pawn()
    if pawn == 0 or not math.isfinite(pawn):
        raise ValuationError(f"cannot normalize by pinned unit {pawn!r}")
    return aggregate / pawn


def _indexed(values: np.ndarray, n: int, label: str) -> float:
    if not 0 <= n < len(values):
        raise ValuationError(f"{label} distance {n} outside 0..{len(values) - 1}")
    return float(values[n])


def value_of_move(move: Move, normalized: MobilityAggregate) -> float:
    """Return the aggregate value a single move descriptor selects."""
    kind = move.kind
    if kind in (MoveKind.KNIGHT_FORWARD, MoveKind.KNIGHT_BACKWARD):
        return normalized.field("knight_jump") * KNIGHT_VARIANTS  # type: ignore[operator]
    if kind is MoveKind.FULL_LION:
        return normalized.field("full_lion")  # type: ignore[return-value]
    if kind is MoveKind.LIMITED_LION:
        return normalized.field("limited_lion")  # type: ignore[return-value]

    axis = move.axis
    assert axis is not None and move.direction is not None
    if kind is MoveKind.STEP:
        return _indexed(normalized.steps(axis), move.distance or 0, "step")
    if kind is MoveKind.JUMP:
        return _indexed(normalized.jumps(axis), move.distance or 0, "jump")
    if kind is MoveKind.JUMP_OR_RANGE:
        jump_value = _indexed(normalized.jumps(axis), move.distance or 0, "jump")
        return jump_value + normalized.field(axis_field("range", axis))  # type: ignore[operator]
    family = _AXIS_FIELD_KINDS.get(kind)
    if family is None:
        raise ValuationError(f"no aggregate field for move kind {kind.value}")
    return normalized.field(axis_field(family, axis))  # type: ignore[return-value]


def value_of_face(face: Face, normalized: MobilityAggregate) -> float:
    return sum(value_of_move(move, normalized) for move in face.moves)


@dataclass(frozen=True, order=True)
class HalfPoints:
    """A value stored as a whole number of half points."""

    halves: int

    @classmethod
    def from_float(cls, value: float) -> HalfPoints:
        return cls(round(2.0 * value))

    @property
    def value(self) -> float:
        return self.halves / 2

    def __str__(self) -> str:
        whole, half = divmod(abs(self.halves), 2)
        sign = "-" if self.halves < 0 else ""
        return f"{sign}{whole}.5" if half else f"{sign}{whole}"


def round_to_nearest_half(value: float) -> HalfPoints:
    """Round to the nearest multiple of 0.5 (``round(2x) / 2``)."""
    return HalfPoints.from_float(value)


@dataclass(frozen=True)
class FaceValue:
    """Value of one face, before and after rounding."""

    face: Face
    raw: float
    points: HalfPoints

    @property
    def name(self) -> str:
        return self.face.name


@dataclass(frozen=True)
class ValueAssignment:
    """Per-face values in catalog order."""

    entries: tuple[FaceValue, ...]

    def __iter__(self) -> Iterator[FaceValue]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, name: str) -> HalfPoints:
        for entry in self.entries:
            if entry.name == name:
                return entry.points
        raise KeyError(name)

    def as_dict(self) -> dict[str, float]:
        return {entry.name: entry.points.value for entry in self.entries}


def assign_values_to_faces(
    aggregate: MobilityAggregate, faces: Iterable[Face] | None = None
) -> ValueAssignment:
    """Normalize ``aggregate`` and value every face of the catalog."""
    normalized = normalize(aggregate)
    catalog = default_faces() if faces is None else faces
    entries = []
    for face in catalog:
        raw = value_of_face(face, normalized)
        entries.append(FaceValue(face=face, raw=raw, points=round_to_nearest_half(raw)))
    return ValueAssignment(entries=tuple(entries))
