"""
microbench - time a piece of Python code over repeated rounds.
"""

from .api import bench
from .exceptions import MicrobenchError, ConfigurationError, EmptyInputError

__version__ = "1.0.0"

__all__ = [
    "bench",
    "MicrobenchError",
    "ConfigurationError",
    "EmptyInputError",
]
