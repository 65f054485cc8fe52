"""
Common data structures for bootstrap inference.

NullDistributionParams is the payload wrapped by Result[P] and exposed
through NullDistributionSolution. ConfidenceInterval and HistogramData
are plain immutable values any caller (or charting library) can consume.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


DEFAULT_REPS = 1000
DEFAULT_LEVEL = 0.95
DEFAULT_BINS = 20

NULL_STATS = ("mean", "median")
CI_TYPES = ("percentile", "se", "bias-corrected")
DIRECTIONS = ("less", "greater", "two-sided")


@dataclass(frozen=True)
class NullDistributionParams:
    """
    Parameter payload for a bootstrap null distribution.

    - stats: one statistic per resample, read-only
    - observed: statistic of the unshifted sample
    - null_value: hypothesized population value the sample was shifted to
    - shift: null_value - observed, added to every value before resampling
    """
    stats: NDArray[np.floating[Any]]           # shape (reps,)
    observed: float
    null_value: float
    shift: float
    stat: str                                   # "mean" | "median"
    reps: int
    n: int


@dataclass(frozen=True)
class ConfidenceInterval:
    """
    Closed interval [lower, upper] derived from a bootstrap distribution.

    Attributes:
        lower: Lower bound
        upper: Upper bound, >= lower
        level: Confidence level in (0, 1)
        type: Method that produced the bounds
    """
    lower: float
    upper: float
    level: float
    type: str = "percentile"

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        """True if value lies inside the closed interval."""
        return self.lower <= value <= self.upper

    def as_tuple(self) -> tuple[float, float]:
        return (self.lower, self.upper)

    def __repr__(self) -> str:
        return (
            f"ConfidenceInterval(lower={self.lower:.6g}, upper={self.upper:.6g}, "
            f"level={self.level}, type={self.type!r})"
        )


@dataclass(frozen=True)
class HistogramData:
    """
    Binned null distribution ready for any charting layer.

    - counts: statistics per bin, shape (bins,)
    - edges: bin edges, shape (bins + 1,)
    - shaded: True for bins that overlap the interval, shape (bins,)
    - interval: the interval used for shading, or None
    """
    counts: NDArray[np.integer[Any]]
    edges: NDArray[np.floating[Any]]
    shaded: NDArray[np.bool_]
    interval: ConfidenceInterval | None

    @property
    def bins(self) -> int:
        return len(self.counts)

    @property
    def centers(self) -> NDArray[np.floating[Any]]:
        return (self.edges[:-1] + self.edges[1:]) / 2.0
