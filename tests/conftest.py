"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from bootsim.sample import Sample, generate_sample


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def beta_sample():
    """The default simulator sample: 25 Beta(1, 3) draws, seed 123."""
    return generate_sample(25, seed=123)


@pytest.fixture
def small_sample():
    """Hand-written sample with known summary statistics."""
    return Sample.from_values(
        [0.1, 0.2, 0.3, 0.4, 0.5],
        names=["a", "b", "c", "d", "e"],
    )
