"""
Exception classes for microbench.

There is no workload error class: whatever the benchmarked code raises
reaches the caller unchanged.
"""

from typing import Optional, Any, Dict


class MicrobenchError(Exception):
    """Base exception class for all microbench errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(MicrobenchError):
    """Raised when benchmark options are invalid. Always raised before any round runs."""
    pass


class EmptyInputError(MicrobenchError):
    """Raised when statistics are requested for an empty sample set."""
    pass
