"""Estimation entry point and CLI.

``run_estimation`` is the whole public surface: give it a trial count and
it returns a value per face. The CLI below is a thin wrapper that adds
seeding, worker count, Parquet output and a JSON summary.
"""

from __future__ import annotations

import argparse
import json
import logging
import time
from collections.abc import Iterable
from pathlib import Path

from shogi_piece_values.config.constants import DEFAULT_TRIAL_COUNT
from shogi_piece_values.config.types import EstimationConfig
from shogi_piece_values.domain.faces import Face
from shogi_piece_values.io.paths import aggregate_path, value_assignment_path
from shogi_piece_values.io.persistence import write_aggregate, write_value_assignment
from shogi_piece_values.simulation.aggregate import MobilityAggregate
from shogi_piece_values.simulation.engine import simulate_n, simulate_n_par
from shogi_piece_values.valuation import ValueAssignment, assign_values_to_faces

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def estimate_aggregate(
    trial_count: int,
    *,
    config: EstimationConfig | None = None,
    parallel: bool = True,
) -> MobilityAggregate:
    """Mean mobility aggregate over ``trial_count`` random boards."""
    config = config or EstimationConfig()
    if parallel:
        return simulate_n_par(trial_count, config)
    return simulate_n(trial_count, config)


def run_estimation(
    trial_count: int,
    *,
    config: EstimationConfig | None = None,
    faces: Iterable[Face] | None = None,
    parallel: bool = True,
) -> ValueAssignment:
    """Estimate a half-point value for every face from ``trial_count`` trials."""
    aggregate = estimate_aggregate(trial_count, config=config, parallel=parallel)
    return assign_values_to_faces(aggregate, faces)


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from exc
    if value < 1:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monte Carlo mobility-based piece values for a 36x36 shogi variant"
    )
    parser.add_argument("--trials", type=_positive_int, default=DEFAULT_TRIAL_COUNT)
    parser.add_argument("--workers", type=_positive_int, default=None)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--sequential", action="store_true", help="run trials in-process")
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint: estimate, optionally persist, print a JSON summary."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = EstimationConfig(workers=args.workers, base_seed=args.seed)
    started = time.perf_counter()
    aggregate = estimate_aggregate(args.trials, config=config, parallel=not args.sequential)
    assignment = assign_values_to_faces(aggregate)
    elapsed = time.perf_counter() - started

    if args.out_dir is not None:
        write_aggregate(aggregate_path(args.out_dir), aggregate, args.trials)
        write_value_assignment(value_assignment_path(args.out_dir), assignment)

    summary = {
        "trials": args.trials,
        "seed": args.seed,
        "elapsed_seconds": round(elapsed, 3),
        "pinned_unit": aggregate.pawn(),
        "values": {entry.name: str(entry.points) for entry in assignment},
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
