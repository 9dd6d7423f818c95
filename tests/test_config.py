"""
Tests for configuration defaults
"""

import pytest

from microbench.config import Config
from microbench.exceptions import ConfigurationError

SETTINGS = ["MICROBENCH_ROUNDS", "MICROBENCH_SIGN_DIGITS", "MICROBENCH_UNITS"]


class TestBenchmarkDefaults:
    """Test cases for Config.get_benchmark_defaults."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        """Start every test without microbench settings."""
        for name in SETTINGS:
            monkeypatch.delenv(name, raising=False)

    def test_builtin_defaults(self):
        """Test the values used when nothing is set."""
        assert Config.get_benchmark_defaults() == {
            "rounds": 50,
            "sign_digits": 4,
            "units": None,
        }

    def test_environment_overrides(self, monkeypatch):
        """Test values read from the environment."""
        monkeypatch.setenv("MICROBENCH_ROUNDS", "200")
        monkeypatch.setenv("MICROBENCH_SIGN_DIGITS", " 0 ")
        monkeypatch.setenv("MICROBENCH_UNITS", "ms")

        assert Config.get_benchmark_defaults() == {
            "rounds": 200,
            "sign_digits": 0,
            "units": "ms",
        }

    def test_blank_values_fall_back(self, monkeypatch):
        """Test that empty settings count as unset."""
        monkeypatch.setenv("MICROBENCH_ROUNDS", "")
        monkeypatch.setenv("MICROBENCH_UNITS", "  ")

        defaults = Config.get_benchmark_defaults()

        assert defaults["rounds"] == 50
        assert defaults["units"] is None

    @pytest.mark.parametrize("name", ["MICROBENCH_ROUNDS", "MICROBENCH_SIGN_DIGITS"])
    def test_malformed_integer(self, monkeypatch, name):
        """Test that a non-integer names the variable and its value."""
        monkeypatch.setenv(name, "many")

        with pytest.raises(ConfigurationError, match=name) as exc_info:
            Config.get_benchmark_defaults()

        assert exc_info.value.details == {name: "many"}
