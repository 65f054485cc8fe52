"""
Solver dispatch for bootstrap inference.

Provides bootstrap_null_distribution(), confidence_interval(), p_value()
and histogram().
"""

from __future__ import annotations

import warnings
from typing import Any, Literal, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from bootsim.core.exceptions import ValidationError
from bootsim.core.protocols import Backend
from bootsim.core.validation import (
    check_1d,
    check_array,
    check_choice,
    check_finite,
    check_finite_scalar,
    check_level,
    check_min_samples,
    check_not_empty,
    check_positive_int,
)
from bootsim.infer._ci import compute_ci
from bootsim.infer._common import (
    CI_TYPES,
    DEFAULT_BINS,
    DEFAULT_LEVEL,
    DIRECTIONS,
    ConfidenceInterval,
    HistogramData,
)
from bootsim.infer._histogram import bin_distribution
from bootsim.infer._p_value import compute_p_value
from bootsim.infer.backends.cpu import CPUNullBootstrapBackend
from bootsim.infer.design import NullBootstrapDesign
from bootsim.infer.solution import NullDistributionSolution

if TYPE_CHECKING:
    from bootsim.sample.solution import Sample


CIType = Literal['percentile', 'se', 'bias-corrected']
Direction = Literal['less', 'greater', 'two-sided']


def _get_backend(backend: str = 'cpu') -> Backend:
    if backend == 'cpu':
        return CPUNullBootstrapBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def _distribution_stats(
    distribution: NullDistributionSolution | ArrayLike,
) -> NDArray[np.floating[Any]]:
    """Replicate statistics from a solution or a raw 1D array."""
    if isinstance(distribution, NullDistributionSolution):
        return distribution.stats
    stats = check_array(distribution, "distribution")
    check_1d(stats, "distribution")
    check_finite(stats, "distribution")
    return stats


def bootstrap_null_distribution(
    sample: 'Sample | ArrayLike',
    reps: int,
    null_value: float,
    *,
    stat: Literal['mean', 'median'] = 'mean',
    seed: int | np.random.Generator | None = None,
    backend: str = 'cpu',
) -> NullDistributionSolution:
    """
    Bootstrap distribution of a statistic under a point null hypothesis.

    The sample is shifted so that its statistic equals null_value, then
    reps resamples of the same size are drawn with replacement and the
    statistic is recorded for each.

    Parameters
    ----------
    sample : Sample or array-like
        Observed sample, non-empty.
    reps : int
        Number of bootstrap replicates, >= 1.
    null_value : float
        Hypothesized population value of the statistic. There is no
        default: pass mean_of(sample) to centre on the observed mean.
    stat : str
        'mean' (default) or 'median'.
    seed : int, numpy.random.Generator or None
        An int seeds a fresh generator; a Generator is used as-is.
    backend : str
        'cpu' (default).

    Returns
    -------
    NullDistributionSolution

    Raises
    ------
    EmptyInputError
        Empty sample.
    InvalidParameterError
        reps < 1, non-finite null_value, unknown stat.
    """
    design = NullBootstrapDesign.for_point_null(
        sample, reps, null_value, stat=stat,
    )

    rng = np.random.default_rng(seed)
    result = _get_backend(backend).solve(design, rng)

    for w in result.warnings:
        warnings.warn(w, RuntimeWarning, stacklevel=2)

    return NullDistributionSolution(_result=result, _design=design)


def confidence_interval(
    distribution: NullDistributionSolution | ArrayLike,
    level: float = DEFAULT_LEVEL,
    *,
    type: CIType = 'percentile',
    point_estimate: float | None = None,
) -> ConfidenceInterval:
    """
    Two-sided confidence interval from a bootstrap distribution.

    Parameters
    ----------
    distribution : NullDistributionSolution or array-like
        Bootstrap statistics, at least 2.
    level : float
        Confidence level strictly between 0 and 1. Default 0.95.
    type : str
        'percentile' (default): the (1-level)/2 and 1-(1-level)/2
        empirical quantiles, interpolated linearly.
        'se': point_estimate -/+ z * sd(distribution).
        'bias-corrected': percentile interval with z0 correction.
    point_estimate : float or None
        Required for 'se' and 'bias-corrected'.

    Returns
    -------
    ConfidenceInterval

    Raises
    ------
    InvalidParameterError
        level outside (0, 1), unknown type, or missing point_estimate.
    InsufficientDataError
        Fewer than 2 statistics.
    """
    level = check_level(level, "level")
    check_choice(type, CI_TYPES, "type")
    if point_estimate is not None:
        point_estimate = check_finite_scalar(point_estimate, "point_estimate")

    stats = _distribution_stats(distribution)
    check_min_samples(stats, 2, "distribution")

    return compute_ci(stats, level, type, point_estimate)


def p_value(
    distribution: NullDistributionSolution | ArrayLike,
    observed: float,
    *,
    direction: Direction = 'two-sided',
) -> float:
    """
    Empirical p-value of an observed statistic against a null distribution.

    Parameters
    ----------
    distribution : NullDistributionSolution or array-like
        Null distribution, non-empty.
    observed : float
        Observed statistic, e.g. mean_of(sample).
    direction : str
        'less', 'greater' or 'two-sided' (default).

    Returns
    -------
    float in [0, 1]. A value of exactly 0 only means no replicate was as
    extreme as observed; a UserWarning is emitted in that case.
    """
    observed = check_finite_scalar(observed, "observed")
    check_choice(direction, DIRECTIONS, "direction")
    stats = _distribution_stats(distribution)
    check_not_empty(stats, "distribution")

    p = compute_p_value(stats, observed, direction)
    if p == 0.0:
        warnings.warn(
            f"p-value of 0 from {len(stats)} replicates: report it as "
            f"p < {1.0 / len(stats):.3g} rather than exactly 0",
            UserWarning,
            stacklevel=2,
        )
    return p


def histogram(
    distribution: NullDistributionSolution | ArrayLike,
    bins: int = DEFAULT_BINS,
    interval: ConfidenceInterval | None = None,
) -> HistogramData:
    """
    Bin a bootstrap distribution for plotting.

    Parameters
    ----------
    distribution : NullDistributionSolution or array-like
        Bootstrap statistics, non-empty.
    bins : int
        Number of equal-width bins, >= 1. Default 20.
    interval : ConfidenceInterval or None
        If given, bins overlapping it are flagged in HistogramData.shaded.
    """
    bins = check_positive_int(bins, "bins")
    stats = _distribution_stats(distribution)
    check_not_empty(stats, "distribution")
    return bin_distribution(stats, bins, interval)
