"""
Tests for workload loading
"""

import time
import collections

import pytest

from microbench.benchmark.workload import load_workload
from microbench.exceptions import ConfigurationError


class TestLoadWorkload:
    """Test cases for module:attr references."""

    def test_module_attribute(self):
        """Test importing a top-level function."""
        assert load_workload("time:perf_counter") is time.perf_counter

    def test_nested_attribute(self):
        """Test a dotted attribute path."""
        assert load_workload("collections:OrderedDict.fromkeys") == collections.OrderedDict.fromkeys

    def test_surrounding_whitespace(self):
        """Test that the reference is stripped."""
        assert load_workload("  time:perf_counter \n") is time.perf_counter

    def test_registered_module(self, workload_module):
        """Test that the loaded function is the module's own callable."""
        workload = load_workload("microbench_sample_workloads:noop")

        workload()

        assert workload is workload_module.noop
        assert workload_module.calls == ["noop"]

    def test_static_method(self, workload_module):
        """Test a method reached through a class."""
        assert load_workload("microbench_sample_workloads:Parser.parse")() == 42

    def test_missing_module(self):
        """Test an unknown module."""
        with pytest.raises(ConfigurationError, match="Cannot import"):
            load_workload("no_such_module_for_microbench:run")

    def test_missing_attribute(self):
        """Test an unknown attribute."""
        with pytest.raises(ConfigurationError, match="no attribute"):
            load_workload("math:no_such_function")

    def test_not_callable(self, workload_module):
        """Test that constants are rejected."""
        with pytest.raises(ConfigurationError, match="not callable"):
            load_workload("microbench_sample_workloads:answer")

    @pytest.mark.parametrize("code", [
        "",
        "   ",
        "sorted(range(1000))",
        "time.perf_counter",
        "x = 1 + 1",
        "time:",
        ":perf_counter",
        "time:perf_counter()",
    ])
    def test_not_a_reference(self, code):
        """Test that anything but module:attr is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_workload(code)

        assert exc_info.value.details == {"code": code}
