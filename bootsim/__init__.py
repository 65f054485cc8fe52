"""
bootsim: bootstrap confidence-interval simulation for Python.

Draws a synthetic sample, bootstraps the distribution of its mean under a
point null hypothesis and derives confidence intervals from it.

Submodules:
    sample: Synthetic Beta samples and point estimates
    infer: Point-null bootstrap, confidence intervals, p-values
    simulation: The composed simulator() pipeline
"""

__version__ = "0.1.0"

from bootsim import sample
from bootsim import infer
from bootsim import simulation
from bootsim.sample import calculate, generate_sample, mean_of
from bootsim.infer import (
    bootstrap_null_distribution,
    confidence_interval,
    histogram,
    p_value,
)
from bootsim.simulation import simulator

__all__ = [
    "__version__",
    "sample",
    "infer",
    "simulation",
    "generate_sample",
    "mean_of",
    "calculate",
    "bootstrap_null_distribution",
    "confidence_interval",
    "p_value",
    "histogram",
    "simulator",
]
