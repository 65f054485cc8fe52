"""
The end-to-end bootstrap interval simulator.

simulator() runs generate -> estimate -> resample -> interval -> bin
with one generator seeded once and shared, in order, by every stage.
"""

from __future__ import annotations

from typing import Literal

import numpy as np

from bootsim.core.compute.timing import Timer
from bootsim.core.exceptions import InvalidParameterError
from bootsim.core.validation import check_choice, check_level, check_positive_int
from bootsim.infer._common import CI_TYPES, DEFAULT_LEVEL, DEFAULT_REPS, NULL_STATS
from bootsim.infer.solvers import bootstrap_null_distribution, confidence_interval
from bootsim.sample._common import DEFAULT_SAMPLE_SIZE
from bootsim.sample.solvers import calculate, generate_sample
from bootsim.simulation.solution import SimulationSolution


DEFAULT_SEED = 123
DEFAULT_SIM_BINS = 50


def simulator(
    null_value: float | Literal['observed'],
    numer: int = DEFAULT_SAMPLE_SIZE,
    bins: int = DEFAULT_SIM_BINS,
    *,
    reps: int = DEFAULT_REPS,
    level: float = DEFAULT_LEVEL,
    stat: Literal['mean', 'median'] = 'mean',
    ci_type: Literal['percentile', 'se', 'bias-corrected'] = 'percentile',
    seed: int | np.random.Generator | None = DEFAULT_SEED,
) -> SimulationSolution:
    """
    Simulate a Beta(1, 3) sample and its bootstrap confidence interval.

    Parameters
    ----------
    null_value : float or 'observed'
        Hypothesized value the bootstrap distribution is centred on.
        Required. Pass a number (e.g. 0.5) to test a fixed value, or the
        string 'observed' to centre on the generated sample's own
        statistic.
    numer : int
        Sample size. Default 25, at most 26.
    bins : int
        Histogram bin count. Default 50.
    reps : int
        Bootstrap replicates. Default 1000.
    level : float
        Confidence level in (0, 1). Default 0.95.
    stat : str
        'mean' (default) or 'median'.
    ci_type : str
        'percentile' (default), 'se' or 'bias-corrected'. The latter two
        use the sample's observed statistic as the point estimate.
    seed : int, numpy.random.Generator or None
        Default 123. Seeds the single generator used by every stage.

    Returns
    -------
    SimulationSolution
    """
    # Validate everything before any randomness is consumed
    numer = check_positive_int(numer, "numer")
    bins = check_positive_int(bins, "bins")
    reps = check_positive_int(reps, "reps")
    level = check_level(level, "level")
    check_choice(stat, NULL_STATS, "stat")
    check_choice(ci_type, CI_TYPES, "ci_type")
    if isinstance(null_value, str) and null_value != 'observed':
        raise InvalidParameterError(
            f"null_value must be a number or 'observed', got {null_value!r}",
            parameter="null_value",
            value=null_value,
        )

    rng = np.random.default_rng(seed)
    timer = Timer()
    timer.start()

    with timer.section('generate'):
        sample = generate_sample(numer, seed=rng)

    with timer.section('estimate'):
        observed = calculate(sample, stat)
        center = observed if isinstance(null_value, str) else null_value

    with timer.section('resample'):
        distribution = bootstrap_null_distribution(
            sample, reps, center, stat=stat, seed=rng,
        )

    with timer.section('interval'):
        interval = confidence_interval(
            distribution,
            level,
            type=ci_type,
            point_estimate=None if ci_type == 'percentile' else observed,
        )

    with timer.section('histogram'):
        chart = distribution.histogram(bins=bins, interval=interval)

    timer.stop()

    return SimulationSolution(
        sample=sample,
        distribution=distribution,
        interval=interval,
        histogram=chart,
        seed=seed if isinstance(seed, (int, np.integer)) else None,
        timing=timer.result(),
    )
