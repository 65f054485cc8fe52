"""
Empirical p-values from a null distribution.

left  = proportion of null statistics <= observed
right = proportion of null statistics >= observed
two-sided = min(1, 2 * min(left, right))
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def compute_p_value(stats: NDArray, observed: float, direction: str) -> float:
    """
    Proportion of the null distribution at least as extreme as observed.

    Args:
        stats: Null distribution, 1D, non-empty.
        observed: Observed statistic.
        direction: "less", "greater" or "two-sided".
    """
    left = float(np.mean(stats <= observed))
    right = float(np.mean(stats >= observed))

    if direction == "less":
        return left
    if direction == "greater":
        return right
    return min(1.0, 2.0 * min(left, right))
