"""
Confidence intervals from a bootstrap distribution.

Implements the three interval methods of infer's get_confidence_interval():
- percentile: empirical quantiles of the distribution
- se: point estimate plus/minus a normal multiple of the bootstrap SD
- bias-corrected: percentile interval with quantile levels shifted by z0
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from bootsim.core.exceptions import InvalidParameterError
from bootsim.infer._common import ConfidenceInterval


def compute_ci(
    stats: NDArray,
    level: float,
    ci_type: str,
    point_estimate: float | None = None,
) -> ConfidenceInterval:
    """
    Compute a confidence interval.

    Args:
        stats: Bootstrap statistics, 1D, at least 2 values.
        level: Confidence level, already validated to lie in (0, 1).
        ci_type: "percentile", "se" or "bias-corrected".
        point_estimate: Required for "se" and "bias-corrected".

    Returns:
        ConfidenceInterval
    """
    alpha = 1.0 - level

    if ci_type == "percentile":
        lower, upper = _ci_percentile(stats, alpha)
    else:
        if point_estimate is None:
            raise InvalidParameterError(
                f"type={ci_type!r} requires point_estimate",
                parameter="point_estimate",
                value=None,
            )
        if ci_type == "se":
            lower, upper = _ci_se(stats, alpha, point_estimate)
        elif ci_type == "bias-corrected":
            lower, upper = _ci_bias_corrected(stats, alpha, point_estimate)
        else:
            raise InvalidParameterError(
                f"Unknown CI type: {ci_type!r}",
                parameter="type",
                value=ci_type,
            )

    return ConfidenceInterval(
        lower=float(lower),
        upper=float(upper),
        level=level,
        type=ci_type,
    )


def _ci_percentile(stats: NDArray, alpha: float) -> tuple[float, float]:
    """
    Percentile CI.

    CI = [Q(alpha/2), Q(1-alpha/2)], linear interpolation between order
    statistics (Hyndman-Fan type 7).
    """
    lo, hi = np.quantile(stats, [alpha / 2.0, 1.0 - alpha / 2.0])
    return lo, hi


def _ci_se(stats: NDArray, alpha: float, point_estimate: float) -> tuple[float, float]:
    """
    Standard-error CI.

    CI = point_estimate -/+ z_{1-alpha/2} * sd(stats)
    """
    z = sp_stats.norm.ppf(1.0 - alpha / 2.0)
    se = np.std(stats, ddof=1)
    return point_estimate - z * se, point_estimate + z * se


def _ci_bias_corrected(
    stats: NDArray,
    alpha: float,
    point_estimate: float,
) -> tuple[float, float]:
    """
    Bias-corrected percentile CI.

    z0 = Phi^{-1}(proportion of stats <= point_estimate)
    CI = [Q(Phi(2 z0 - z)), Q(Phi(2 z0 + z))], z = z_{1-alpha/2}

    A proportion of 0 or 1 gives an infinite z0, which collapses both
    levels onto the matching end of the distribution.
    """
    prop_below = np.mean(stats <= point_estimate)
    z0 = sp_stats.norm.ppf(prop_below)
    z = sp_stats.norm.ppf(1.0 - alpha / 2.0)

    probs = sp_stats.norm.cdf([2.0 * z0 - z, 2.0 * z0 + z])
    lo, hi = np.quantile(stats, probs)
    return lo, hi
