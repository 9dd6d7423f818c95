"""
Summary statistics for benchmark timings.
"""

import statistics
from dataclasses import dataclass
from typing import Dict, Sequence

from ..exceptions import EmptyInputError


@dataclass(frozen=True)
class Statistics:
    """
    Descriptive statistics of a sample set.

    All values are nanoseconds as floats; truncation to whole
    nanoseconds happens only when formatting.
    """
    mean: float
    min: float
    max: float
    std: float

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {
            "mean": self.mean,
            "min": self.min,
            "max": self.max,
            "std": self.std,
        }


def summarize(samples: Sequence[int]) -> Statistics:
    """
    Compute mean, min, max and population standard deviation.

    Args:
        samples: Per-round timings in nanoseconds

    Returns:
        Statistics for the samples

    Raises:
        EmptyInputError: If there are no samples
    """
    if not samples:
        raise EmptyInputError("Cannot summarize an empty sample set")

    mean = statistics.fmean(samples)
    return Statistics(
        mean=mean,
        min=float(min(samples)),
        max=float(max(samples)),
        # Population deviation (divide by N), not the sample estimator
        std=statistics.pstdev(samples, mu=mean),
    )
