"""Fixed-shape vector of mobility totals produced by one or more trials.

The aggregate is a single float64 numpy vector with a named layout, so
addition and scalar division are one elementwise operation each and stay
associative regardless of how trials are grouped.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from shogi_piece_values.config.constants import JUMP_SLOTS, STEP_SLOTS
from shogi_piece_values.domain.directions import AxisClass

FIELD_LAYOUT: tuple[tuple[str, int], ...] = (
    ("orthogonal_steps", STEP_SLOTS),
    ("diagonal_steps", STEP_SLOTS),
    ("orthogonal_jumps", JUMP_SLOTS),
    ("diagonal_jumps", JUMP_SLOTS),
    ("orthogonal_range", 1),
    ("diagonal_range", 1),
    ("knight_jump", 1),
    ("orthogonal_flying_jump", 1),
    ("diagonal_flying_jump", 1),
    ("orthogonal_flying_capture", 1),
    ("diagonal_flying_capture", 1),
    ("orthogonal_jump_then_range", 1),
    ("diagonal_jump_then_range", 1),
    ("orthogonal_hook", 1),
    ("diagonal_hook", 1),
    ("full_lion", 1),
    ("limited_lion", 1),
)
"""Field name and width, in vector order."""


def _build_offsets() -> dict[str, int]:
    offsets: dict[str, int] = {}
    position = 0
    for name, width in FIELD_LAYOUT:
        offsets[name] = position
        position += width
    return offsets


FIELD_OFFSETS: dict[str, int] = _build_offsets()
"""Start index of each field within the vector."""

FIELD_WIDTHS: dict[str, int] = dict(FIELD_LAYOUT)

VECTOR_LENGTH = sum(width for _, width in FIELD_LAYOUT)

FLAT_FIELD_NAMES: tuple[str, ...] = tuple(
    f"{name}_{i}" if width > 1 else name for name, width in FIELD_LAYOUT for i in range(width)
)
"""One stable name per vector slot, e.g. ``orthogonal_steps_1`` or ``full_lion``."""


def axis_field(family: str, axis: AxisClass) -> str:
    """Return the field name for ``family`` on one axis class, e.g. ``diagonal_hook``."""
    name = f"{axis.value}_{family}"
    if name not in FIELD_OFFSETS:
        raise KeyError(f"unknown aggregate field: {name}")
    return name


@dataclass(frozen=True, eq=False)
class MobilityAggregate:
    """Named vector of mobility totals. Instances are immutable."""

    values: np.ndarray

    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=np.float64)
        if values.shape != (VECTOR_LENGTH,):
            raise ValueError(f"aggregate vector must have shape ({VECTOR_LENGTH},)")
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    @classmethod
    def zero(cls) -> MobilityAggregate:
        return cls(np.zeros(VECTOR_LENGTH))

    @classmethod
    def from_dict(cls, flat: dict[str, float]) -> MobilityAggregate:
        """Inverse of :meth:`as_dict`. Missing names raise ``KeyError``."""
        return cls(np.array([flat[name] for name in FLAT_FIELD_NAMES], dtype=np.float64))

    # -- arithmetic --------------------------------------------------------

    def __add__(self, other: object) -> MobilityAggregate:
        if not isinstance(other, MobilityAggregate):
            return NotImplemented
        return MobilityAggregate(self.values + other.values)

    def __radd__(self, other: object) -> MobilityAggregate:
        # Lets builtin sum() start from 0
        if isinstance(other, int) and other == 0:
            return self
        return NotImplemented

    def __truediv__(self, divisor: float) -> MobilityAggregate:
        return MobilityAggregate(self.values / float(divisor))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MobilityAggregate):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    __hash__ = None  # type: ignore[assignment]

    def isclose(
        self, other: MobilityAggregate, rel_tol: float = 1e-9, abs_tol: float = 1e-12
    ) -> bool:
        return bool(np.allclose(self.values, other.values, rtol=rel_tol, atol=abs_tol))

    # -- field access ------------------------------------------------------

    def field(self, name: str) -> float | np.ndarray:
        """Return a scalar field as ``float`` or an indexed field as a read-only array."""
        start = FIELD_OFFSETS[name]
        width = FIELD_WIDTHS[name]
        if width == 1:
            return float(self.values[start])
        return self.values[start : start + width]

    def steps(self, axis: AxisClass) -> np.ndarray:
        return self.field(axis_field("steps", axis))  # type: ignore[return-value]

    def jumps(self, axis: AxisClass) -> np.ndarray:
        return self.field(axis_field("jumps", axis))  # type: ignore[return-value]

    def pawn(self) -> float:
        """The pinned unit: one orthogonal step of length one."""
        return float(self.values[FIELD_OFFSETS["orthogonal_steps"] + 1])

    def as_dict(self) -> dict[str, float]:
        return {name: float(v) for name, v in zip(FLAT_FIELD_NAMES, self.values, strict=True)}

    def __getattr__(self, name: str) -> float | np.ndarray:
        # Only reached for names that are not real attributes
        if name in FIELD_OFFSETS:
            return self.field(name)
        raise AttributeError(name)

    def __repr__(self) -> str:
        return f"MobilityAggregate(pawn={self.pawn():.6g}, fields={VECTOR_LENGTH})"
