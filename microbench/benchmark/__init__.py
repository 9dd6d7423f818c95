"""
Benchmark execution, statistics and reporting package.
"""

from .runner import BenchmarkRunner, BenchmarkConfig, echo_progress
from .metrics import Statistics, summarize
from .formatting import format_duration, parse_duration, round_significant, resolve_unit
from .reporter import BenchmarkReport, Reporter, build_report
from .workload import load_workload

__all__ = [
    "BenchmarkRunner",
    "BenchmarkConfig",
    "echo_progress",
    "Statistics",
    "summarize",
    "format_duration",
    "parse_duration",
    "round_significant",
    "resolve_unit",
    "BenchmarkReport",
    "Reporter",
    "build_report",
    "load_workload",
]
