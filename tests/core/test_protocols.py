"""
Tests that the shipped backends satisfy the Backend protocol.
"""

import numpy as np

from bootsim.core.protocols import Backend
from bootsim.infer.backends import CPUNullBootstrapBackend
from bootsim.infer.design import NullBootstrapDesign
from bootsim.sample.backends import CPUSampleBackend
from bootsim.sample.design import SampleDesign


class TestBackendProtocol:

    def test_sample_backend(self):
        backend = CPUSampleBackend()
        assert isinstance(backend, Backend)
        assert backend.name == 'cpu_beta_sample'

    def test_null_bootstrap_backend(self):
        backend = CPUNullBootstrapBackend()
        assert isinstance(backend, Backend)
        assert backend.name == 'cpu_null_bootstrap'

    def test_backends_are_stateless(self):
        """Same design and same stream state give the same result."""
        design = SampleDesign.for_generation(5)
        backend = CPUSampleBackend()
        r1 = backend.solve(design, np.random.default_rng(0))
        r2 = backend.solve(design, np.random.default_rng(0))
        np.testing.assert_array_equal(r1.params.values, r2.params.values)

        null_design = NullBootstrapDesign.for_point_null(r1.params.values, 20, 0.5)
        b = CPUNullBootstrapBackend()
        n1 = b.solve(null_design, np.random.default_rng(1))
        n2 = b.solve(null_design, np.random.default_rng(1))
        np.testing.assert_array_equal(n1.params.stats, n2.params.stats)
