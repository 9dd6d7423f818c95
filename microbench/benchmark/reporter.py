"""
Report building and rendering for benchmark results.
Supports a one-line pretty summary, a console table and JSON output.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from rich.console import Console
from rich.table import Table

from .formatting import format_duration
from .metrics import Statistics


@dataclass(frozen=True)
class BenchmarkReport:
    """Formatted statistics of a benchmark run."""
    mean: str
    min: str
    max: str
    std: str
    times: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out ``times`` unless it was requested."""
        data: Dict[str, Any] = {
            "mean": self.mean,
            "min": self.min,
            "max": self.max,
            "std": self.std,
        }
        if self.times is not None:
            data["times"] = list(self.times)
        return data


# Pretty mode yields a plain string, every other mode a BenchmarkReport
BenchmarkResult = Union[str, BenchmarkReport]


def build_report(
    stats: Statistics,
    samples: Sequence[int],
    units: Optional[str] = None,
    sign_digits: int = 4,
    pretty: bool = False,
    list_timings: bool = False,
) -> BenchmarkResult:
    """
    Format statistics into the requested output shape.

    Args:
        stats: Summary statistics of the run
        samples: Raw per-round timings in nanoseconds
        units: Fixed unit for every duration, natural form if None
        sign_digits: Significant digits kept for the statistics
        pretty: Return "<mean> +/- <std>" instead of a record
        list_timings: Include per-round timings (ignored in pretty mode)

    Returns:
        A string in pretty mode, otherwise a BenchmarkReport
    """
    def fmt(value: float) -> str:
        return format_duration(value, units=units, sign_digits=sign_digits)

    mean = fmt(stats.mean)
    std = fmt(stats.std)

    if pretty:
        return f"{mean} +/- {std}"

    times = None
    if list_timings:
        # Individual samples are never rounded
        times = [format_duration(sample, units=units, sign_digits=0) for sample in samples]

    return BenchmarkReport(
        mean=mean,
        min=fmt(stats.min),
        max=fmt(stats.max),
        std=std,
        times=times,
    )


class Reporter:
    """
    Render benchmark results.

    Supports:
        - Console output (rich tables)
        - JSON data export

    Example:
        reporter = Reporter()
        reporter.print_report(result)
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize reporter.

        Args:
            console: Rich console to write to (default: stdout)
        """
        self.console = console or Console()

    def print_report(self, result: BenchmarkResult, format: str = "table") -> None:
        """
        Print a result to the console.

        Args:
            result: Pretty string or BenchmarkReport
            format: "table" or "json" (records only)
        """
        if isinstance(result, str):
            self.console.print(result, markup=False, highlight=False)
            return

        if format == "json":
            self.console.print_json(self.to_json(result))
            return

        table = Table(title="Benchmark Results")
        table.add_column("Statistic", style="cyan")
        table.add_column("Duration", justify="right")
        table.add_row("mean", result.mean)
        table.add_row("min", result.min)
        table.add_row("max", result.max)
        table.add_row("std", result.std)
        self.console.print(table)

        if result.times is not None:
            self.console.print(self._format_timings_table(result.times))

    def _format_timings_table(self, times: Sequence[str]) -> Table:
        """Build the per-round timings table."""
        table = Table(title="Timings")
        table.add_column("Round", style="cyan", justify="right")
        table.add_column("Duration", justify="right")

        for index, duration in enumerate(times, start=1):
            table.add_row(str(index), duration)

        return table

    def to_json(self, result: BenchmarkResult) -> str:
        """
        Serialize a result as JSON.

        Returns:
            A JSON string for a pretty result, a JSON object for a record
        """
        if isinstance(result, str):
            return json.dumps(result, ensure_ascii=False)
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
