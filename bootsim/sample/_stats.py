"""
Point statistics on 1D value vectors.

A single registry maps statistic names to reductions so the point
estimator and the bootstrap backends always agree on what "mean" or
"median" means.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from bootsim.core.validation import (
    check_1d,
    check_array,
    check_choice,
    check_finite,
    check_min_samples,
    check_not_empty,
)
from bootsim.sample.solution import Sample


def _sd(x: NDArray) -> float:
    return float(np.std(x, ddof=1))


def _var(x: NDArray) -> float:
    return float(np.var(x, ddof=1))


STATISTICS: dict[str, Callable[[NDArray], float]] = {
    "mean": lambda x: float(np.mean(x)),
    "median": lambda x: float(np.median(x)),
    "sd": _sd,
    "var": _var,
    "sum": lambda x: float(np.sum(x)),
}

# sd and var use Bessel's correction
MIN_SAMPLES = {"sd": 2, "var": 2}


def sample_values(sample: Sample | ArrayLike, name: str = "sample") -> NDArray[np.floating[Any]]:
    """
    Extract the value vector from a Sample or array-like.

    Returns a validated 1D finite float64 array, possibly empty.
    """
    if isinstance(sample, Sample):
        return sample.values
    values = check_array(sample, name)
    check_1d(values, name)
    check_finite(values, name)
    return values


def compute_stat(values: NDArray[np.floating[Any]], stat: str, name: str = "sample") -> float:
    """
    Compute a named statistic on a validated value vector.

    Raises:
        InvalidParameterError: Unknown statistic name
        EmptyInputError: No values
        InsufficientDataError: sd/var on a single value
    """
    check_choice(stat, STATISTICS, "stat")
    check_not_empty(values, name)
    check_min_samples(values, MIN_SAMPLES.get(stat, 1), name)
    return STATISTICS[stat](values)
