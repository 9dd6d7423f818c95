"""
One-call entry point tying the runner, statistics and report together.
"""

import logging
from typing import Callable, Optional

from .benchmark.metrics import summarize
from .benchmark.reporter import BenchmarkResult, build_report
from .benchmark.runner import (
    BenchmarkConfig,
    BenchmarkRunner,
    ProgressCallback,
    Workload,
    echo_progress,
)

logger = logging.getLogger(__name__)


def bench(
    workload: Workload,
    rounds: int = 50,
    verbose: bool = False,
    pretty: bool = False,
    units: Optional[str] = None,
    list_timings: bool = False,
    sign_digits: int = 4,
    on_progress: Optional[ProgressCallback] = None,
    clock: Optional[Callable[[], int]] = None,
) -> BenchmarkResult:
    """
    Benchmark ``workload`` and report its timing statistics.

    Options are validated before the first round, so a bad option never
    leaves a partially run benchmark behind. Errors raised by the workload
    propagate unchanged.

    Example:
        bench(lambda: sorted(data), rounds=100, pretty=True)
        # '4µs 541ns +/- 1µs 201ns'

    Args:
        workload: Zero-argument callable to benchmark
        rounds: Number of sequential executions, at least 1
        verbose: Report progress after every round
        pretty: Return "<mean> +/- <std>" instead of a record
        units: Fixed unit (ns, us/µs, ms, sec, min) for every duration
        list_timings: Include the raw per-round timings
        sign_digits: Significant digits kept for the statistics, 0 keeps all
        on_progress: Progress sink used when verbose (default: echo_progress)
        clock: Nanosecond clock override

    Returns:
        A string in pretty mode, otherwise a BenchmarkReport
    """
    config = BenchmarkConfig(
        rounds=rounds,
        units=units,
        sign_digits=sign_digits,
        pretty=pretty,
        list_timings=list_timings,
        verbose=verbose,
    ).validate()

    runner = BenchmarkRunner(clock=clock)
    if config.verbose:
        runner.on_progress(on_progress or echo_progress)

    samples = runner.run(workload, config.rounds)
    stats = summarize(samples)
    logger.debug(f"Statistics (ns): {stats.to_dict()}")

    return build_report(
        stats,
        samples,
        units=config.units,
        sign_digits=config.sign_digits,
        pretty=config.pretty,
        list_timings=config.list_timings,
    )
