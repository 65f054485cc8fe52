"""
CPU backend for synthetic sample generation.
"""

from __future__ import annotations

import numpy as np

from bootsim.core.result import Result
from bootsim.core.compute.timing import Timer
from bootsim.sample._common import IDENTIFIER_ALPHABET, SampleParams
from bootsim.sample.design import SampleDesign


class CPUSampleBackend:
    """
    Draws identifiers from the alphabet and values from Beta(alpha, beta).

    Identifiers are drawn before values so a given seed always pairs the
    same letters with the same values.
    """

    @property
    def name(self) -> str:
        return 'cpu_beta_sample'

    def solve(self, design: SampleDesign, rng: np.random.Generator) -> Result[SampleParams]:
        """Draw the sample and return Result[SampleParams]."""
        timer = Timer()
        timer.start()

        with timer.section('identifiers'):
            picked = rng.choice(
                len(IDENTIFIER_ALPHABET),
                size=design.n,
                replace=design.replace_names,
            )
            names = tuple(IDENTIFIER_ALPHABET[i] for i in picked)

        with timer.section('values'):
            values = rng.beta(design.alpha, design.beta, size=design.n)
            values.setflags(write=False)

        timer.stop()

        return Result(
            params=SampleParams(names=names, values=values),
            info={
                'n': design.n,
                'alpha': design.alpha,
                'beta': design.beta,
                'replace_names': design.replace_names,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
