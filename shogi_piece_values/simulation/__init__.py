"""Simulation layer: mobility aggregate, board scan and Monte Carlo driver."""

from shogi_piece_values.simulation.aggregate import FLAT_FIELD_NAMES, MobilityAggregate
from shogi_piece_values.simulation.engine import (
    combine_pairwise,
    combine_sequential,
    simulate,
    simulate_n,
    simulate_n_par,
)
from shogi_piece_values.simulation.scanner import scan_board

__all__ = [
    "FLAT_FIELD_NAMES",
    "MobilityAggregate",
    "combine_pairwise",
    "combine_sequential",
    "scan_board",
    "simulate",
    "simulate_n",
    "simulate_n_par",
]
