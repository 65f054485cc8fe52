"""
Solver dispatch for samples.

Provides generate_sample() (synthetic Beta data), mean_of() (the point
estimator) and calculate() for the other supported point statistics.
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import ArrayLike

from bootsim.core.exceptions import ValidationError
from bootsim.core.protocols import Backend
from bootsim.sample._common import DEFAULT_ALPHA, DEFAULT_BETA, DEFAULT_SAMPLE_SIZE
from bootsim.sample._stats import compute_stat, sample_values
from bootsim.sample.backends.cpu import CPUSampleBackend
from bootsim.sample.design import SampleDesign
from bootsim.sample.solution import Sample


StatName = Literal['mean', 'median', 'sd', 'var', 'sum']
SeedLike = int | np.random.Generator | None


def _get_backend(backend: str = 'cpu') -> Backend:
    if backend == 'cpu':
        return CPUSampleBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def generate_sample(
    n: int | SampleDesign = DEFAULT_SAMPLE_SIZE,
    *,
    alpha: float = DEFAULT_ALPHA,
    beta: float = DEFAULT_BETA,
    replace_names: bool = False,
    seed: SeedLike = None,
    backend: str = 'cpu',
) -> Sample:
    """
    Draw a labeled sample from a Beta distribution.

    Parameters
    ----------
    n : int or SampleDesign
        Number of observations (default 25), or a pre-built design.
    alpha, beta : float
        Beta shape parameters. Default Beta(1, 3): right-skewed on [0, 1].
    replace_names : bool
        If False (default) identifiers are distinct lowercase letters, so
        n may not exceed 26. If True, identifiers may repeat.
    seed : int, numpy.random.Generator or None
        An int seeds a fresh generator. A Generator is used as-is and
        advanced, which lets several stages share one stream.
    backend : str
        'cpu' (default).

    Returns
    -------
    Sample

    Raises
    ------
    InvalidParameterError
        n < 1, n > 26 without replace_names, or non-positive shapes.
    """
    if isinstance(n, SampleDesign):
        design = n
    else:
        design = SampleDesign.for_generation(
            n,
            alpha=alpha,
            beta=beta,
            replace_names=replace_names,
        )

    rng = np.random.default_rng(seed)
    result = _get_backend(backend).solve(design, rng)
    return Sample(_result=result, _design=design)


def mean_of(sample: Sample | ArrayLike) -> float:
    """
    Arithmetic mean of a sample's values.

    Raises
    ------
    EmptyInputError
        If the sample has no observations.
    """
    return compute_stat(sample_values(sample), "mean")


def calculate(sample: Sample | ArrayLike, stat: StatName = 'mean') -> float:
    """
    Compute a point statistic of a sample.

    Parameters
    ----------
    sample : Sample or array-like
        Sample or 1D finite values.
    stat : str
        'mean' (default), 'median', 'sd', 'var' or 'sum'. sd and var use
        n - 1 in the denominator.

    Raises
    ------
    InvalidParameterError
        Unknown stat.
    EmptyInputError
        Empty sample.
    InsufficientDataError
        sd or var of a single observation.
    """
    return compute_stat(sample_values(sample), stat)
