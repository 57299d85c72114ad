"""Monte Carlo driver: seeded trials, sequential or across worker processes."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor
from random import Random

from shogi_piece_values.config.types import EstimationConfig
from shogi_piece_values.domain.grid import populate_grid
from shogi_piece_values.simulation.aggregate import MobilityAggregate
from shogi_piece_values.simulation.scanner import scan_board

logger = logging.getLogger(__name__)


def trial_rng(base_seed: int, trial_index: int) -> Random:
    """Build the private random source for one trial."""
    return Random(base_seed + trial_index)


def simulate(rng: Random, config: EstimationConfig | None = None) -> MobilityAggregate:
    """Run one trial: populate a fresh grid and scan it."""
    config = config or EstimationConfig()
    grid = populate_grid(rng, config)
    return scan_board(grid, leap_budget=config.leap_budget)


def combine_sequential(aggregates: Iterable[MobilityAggregate]) -> MobilityAggregate:
    """Left-to-right running sum starting from the zero aggregate."""
    total = MobilityAggregate.zero()
    for aggregate in aggregates:
        total = total + aggregate
    return total


def combine_pairwise(aggregates: Sequence[MobilityAggregate]) -> MobilityAggregate:
    """Tree reduction: add neighbours pairwise until one aggregate remains."""
    level = list(aggregates)
    if not level:
        return MobilityAggregate.zero()
    while len(level) > 1:
        paired = [level[i] + level[i + 1] for i in range(0, len(level) - 1, 2)]
        if len(level) % 2:
            paired.append(level[-1])
        level = paired
    return level[0]


def run_trials(start: int, stop: int, config: EstimationConfig) -> MobilityAggregate:
    """Sum of trials ``start..stop-1``; the unit of work handed to a worker."""
    return combine_sequential(
        simulate(trial_rng(config.base_seed, i), config) for i in range(start, stop)
    )


def _check_trial_count(n: int) -> None:
    if n < 1:
        raise ValueError("trial count must be >= 1")


def simulate_n(n: int, config: EstimationConfig | None = None) -> MobilityAggregate:
    """Mean aggregate over ``n`` trials run one after another."""
    _check_trial_count(n)
    config = config or EstimationConfig()
    started = time.perf_counter()
    total = run_trials(0, n, config)
    logger.info("finished %d sequential trials in %.2fs", n, time.perf_counter() - started)
    return total / n


def _batches(n: int, batch_size: int) -> list[tuple[int, int]]:
    return [(start, min(start + batch_size, n)) for start in range(0, n, batch_size)]


def simulate_n_par(
    n: int, config: EstimationConfig | None = None, workers: int | None = None
) -> MobilityAggregate:
    """Mean aggregate over ``n`` trials spread across worker processes.

    Trials are grouped into batches of ``config.batch_size`` and each batch
    sum is reduced pairwise. Trial ``i`` always uses seed ``base_seed + i``,
    so the result matches :func:`simulate_n` up to floating-point rounding.
    """
    _check_trial_count(n)
    config = config or EstimationConfig()
    workers = workers or config.workers or os.cpu_count() or 1
    batches = _batches(n, config.batch_size)
    started = time.perf_counter()

    if workers == 1 or len(batches) == 1:
        logger.info("running %d trials in-process (%d batches)", n, len(batches))
        partials = [run_trials(start, stop, config) for start, stop in batches]
    else:
        workers = min(workers, len(batches))
        logger.info("running %d trials on %d workers (%d batches)", n, workers, len(batches))
        with ProcessPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(run_trials, start, stop, config) for start, stop in batches]
            partials = [future.result() for future in futures]

    total = combine_pairwise(partials)
    logger.info("finished %d parallel trials in %.2fs", n, time.perf_counter() - started)
    return total / n
