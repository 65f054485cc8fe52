"""
Synthetic samples and point estimates.

Usage:
    from bootsim.sample import generate_sample, mean_of

    sample = generate_sample(25, seed=123)
    mean_of(sample)
"""

from bootsim.sample.design import SampleDesign
from bootsim.sample.solution import Sample
from bootsim.sample.solvers import calculate, generate_sample, mean_of

__all__ = [
    "generate_sample",
    "mean_of",
    "calculate",
    "Sample",
    "SampleDesign",
]
