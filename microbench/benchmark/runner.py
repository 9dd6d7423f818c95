"""
Benchmark runner for timing a workload over a fixed number of rounds.
"""

import time
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import click

from ..exceptions import ConfigurationError
from .formatting import resolve_unit

logger = logging.getLogger(__name__)

Workload = Callable[[], Any]
ProgressCallback = Callable[[int, int], None]


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run."""
    rounds: int = 50
    units: Optional[str] = None
    sign_digits: int = 4
    pretty: bool = False
    list_timings: bool = False
    verbose: bool = False

    def validate(self) -> "BenchmarkConfig":
        """
        Check the options before anything runs.

        Returns:
            A copy with ``units`` in canonical form

        Raises:
            ConfigurationError: If any option is out of range
        """
        if self.rounds < 1:
            raise ConfigurationError(
                f"Invalid rounds {self.rounds}: at least 1 round is required",
                {"rounds": self.rounds},
            )
        if self.sign_digits < 0:
            raise ConfigurationError(
                f"Invalid sign digits {self.sign_digits}: must be 0 or greater",
                {"sign_digits": self.sign_digits},
            )
        units = resolve_unit(self.units) if self.units is not None else None

        return BenchmarkConfig(
            rounds=self.rounds,
            units=units,
            sign_digits=self.sign_digits,
            pretty=self.pretty,
            list_timings=self.list_timings,
            verbose=self.verbose,
        )


def echo_progress(completed: int, total: int) -> None:
    """Print "completed / total" in place, ending the line after the last round."""
    click.echo(f"\r{completed} / {total}", nl=False)
    if completed == total:
        click.echo()


class BenchmarkRunner:
    """
    Times a zero-argument workload, one round after another.

    Rounds never overlap: each sample measures exactly one call. If the
    workload raises, the error propagates unchanged and the samples
    collected so far are discarded.

    Example:
        runner = BenchmarkRunner().on_progress(echo_progress)
        samples = runner.run(lambda: sum(range(1000)), rounds=50)
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """
        Initialize benchmark runner.

        Args:
            clock: Monotonic nanosecond clock (default: time.perf_counter_ns)
        """
        self.clock = clock or time.perf_counter_ns

        # Callbacks
        self._on_progress: Optional[ProgressCallback] = None

    def on_progress(self, callback: Optional[ProgressCallback]) -> "BenchmarkRunner":
        """
        Set progress callback.

        Args:
            callback: Function(completed, total) called after every round
        """
        self._on_progress = callback
        return self

    def run(self, workload: Workload, rounds: int) -> List[int]:
        """
        Run the workload ``rounds`` times.

        Args:
            workload: Zero-argument callable to time
            rounds: Number of sequential executions, at least 1

        Returns:
            Elapsed nanoseconds per round, in execution order
        """
        if rounds < 1:
            raise ConfigurationError(
                f"Invalid rounds {rounds}: at least 1 round is required",
                {"rounds": rounds},
            )

        logger.info(f"Starting benchmark: {rounds} rounds")

        clock = self.clock
        samples: List[int] = []
        for completed in range(1, rounds + 1):
            start = clock()
            workload()
            elapsed = clock() - start
            samples.append(elapsed)

            logger.debug(f"Round {completed}/{rounds}: {elapsed}ns")

            if self._on_progress:
                self._on_progress(completed, rounds)

        logger.info(f"Benchmark complete: {len(samples)} samples")
        return samples
