"""
Point-null bootstrap inference.

Usage:
    from bootsim.infer import bootstrap_null_distribution, confidence_interval

    null_distn = bootstrap_null_distribution(sample, reps=1000, null_value=0.5, seed=123)
    ci = confidence_interval(null_distn, level=0.95)
    chart_data = null_distn.histogram(bins=50, interval=ci)
"""

from bootsim.infer._common import ConfidenceInterval, HistogramData
from bootsim.infer.design import NullBootstrapDesign
from bootsim.infer.solution import NullDistributionSolution
from bootsim.infer.solvers import (
    bootstrap_null_distribution,
    confidence_interval,
    histogram,
    p_value,
)

__all__ = [
    "bootstrap_null_distribution",
    "confidence_interval",
    "p_value",
    "histogram",
    "ConfidenceInterval",
    "HistogramData",
    "NullBootstrapDesign",
    "NullDistributionSolution",
]
