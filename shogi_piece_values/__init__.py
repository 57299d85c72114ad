"""Monte Carlo estimation of mobility-based piece values for large shogi variants."""

from shogi_piece_values.config.types import EstimationConfig
from shogi_piece_values.estimate import estimate_aggregate, run_estimation
from shogi_piece_values.simulation.aggregate import MobilityAggregate
from shogi_piece_values.simulation.engine import simulate, simulate_n, simulate_n_par
from shogi_piece_values.valuation import (
    HalfPoints,
    ValueAssignment,
    assign_values_to_faces,
    normalize,
)

__all__ = [
    "EstimationConfig",
    "HalfPoints",
    "MobilityAggregate",
    "ValueAssignment",
    "assign_values_to_faces",
    "estimate_aggregate",
    "normalize",
    "run_estimation",
    "simulate",
    "simulate_n",
    "simulate_n_par",
]
