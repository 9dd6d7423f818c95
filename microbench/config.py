"""
Configuration management for microbench.
Loads defaults from environment variables and a .env file.
"""

import os
from typing import Dict, Any, Optional
from dotenv import load_dotenv, find_dotenv

from .exceptions import ConfigurationError

# Load .env from the directory the tool is run in
load_dotenv(find_dotenv(usecwd=True))


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


def _integer(name: str, default: int) -> int:
    """Read an integer setting, naming the variable when it is malformed."""
    value = _optional(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid {name} '{value}': expected an integer",
            {name: value},
        ) from e


class Config:
    """Central configuration management."""

    # ==========================================================================
    # Logging
    # ==========================================================================
    LOG_LEVEL: str = os.getenv("MICROBENCH_LOG_LEVEL", "WARNING").upper()

    # ==========================================================================
    # Benchmark Defaults
    # ==========================================================================

    @classmethod
    def get_benchmark_defaults(cls) -> Dict[str, Any]:
        """
        Get the default benchmark options.

        Read on every call, so a malformed value surfaces as a
        ConfigurationError where the options are validated.
        """
        return {
            "rounds": _integer("MICROBENCH_ROUNDS", 50),
            "sign_digits": _integer("MICROBENCH_SIGN_DIGITS", 4),
            "units": _optional("MICROBENCH_UNITS"),
        }
