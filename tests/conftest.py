"""
Pytest Configuration

Shared fixtures for the microbench test suite.
"""

import io
import sys
import types

import pytest
from rich.console import Console


@pytest.fixture
def fake_clock():
    """
    Build a nanosecond clock whose rounds take the given durations.

    The runner reads the clock once before and once after each round.
    """
    def factory(durations):
        readings = []
        now = 1_000
        for duration in durations:
            readings.extend([now, now + duration])
            now += duration + 10
        return iter(readings).__next__

    return factory


@pytest.fixture
def console_buffer():
    """Provide a rich console writing into a string buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    return console, buffer


@pytest.fixture
def workload_module(monkeypatch):
    """
    Register an importable module of sample workloads.

    Its functions are reachable as "microbench_sample_workloads:<name>".
    """
    module = types.ModuleType("microbench_sample_workloads")
    module.calls = []

    def noop():
        module.calls.append("noop")

    def sort_numbers():
        return sorted(range(100, 0, -1))

    def fail():
        raise KeyError("boom")

    class Parser:
        @staticmethod
        def parse():
            return int("42")

    module.noop = noop
    module.sort_numbers = sort_numbers
    module.fail = fail
    module.Parser = Parser
    module.answer = 42

    monkeypatch.setitem(sys.modules, module.__name__, module)
    return module
