"""Exception hierarchy for fatal contract violations.

Nothing in this package recovers from these: they abort the current trial
(and, through the worker pool, the whole run) instead of producing wrong
numbers.
"""

from __future__ import annotations


class PieceValueError(Exception):
    """Base class for all package-specific errors."""


class PlacementError(PieceValueError, RuntimeError):
    """Random placement could not find a free cell within the retry cap."""


class ValuationError(PieceValueError, ValueError):
    """A move descriptor or aggregate cannot be turned into a point value."""
