"""
CPU backend for point-null bootstrap resampling.

The sample is shifted so its statistic equals the hypothesized value,
then resampled with replacement reps times.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from bootsim.core.result import Result
from bootsim.core.compute.timing import Timer
from bootsim.infer._common import NullDistributionParams
from bootsim.infer.design import NullBootstrapDesign
from bootsim.sample._stats import STATISTICS


class CPUNullBootstrapBackend:
    """
    CPU backend for the point-null bootstrap.

    One replicate per loop iteration; every draw comes from the supplied
    generator so a fixed seed reproduces the distribution bit for bit.
    """

    @property
    def name(self) -> str:
        return 'cpu_null_bootstrap'

    def solve(
        self,
        design: NullBootstrapDesign,
        rng: np.random.Generator,
    ) -> Result[NullDistributionParams]:
        """Run the bootstrap and return Result[NullDistributionParams]."""
        timer = Timer()
        timer.start()

        statistic = STATISTICS[design.stat]
        n = design.n
        reps = design.reps

        with timer.section('shift'):
            observed = statistic(design.values)
            shift = design.null_value - observed
            shifted = design.values + shift

        stats = np.empty(reps, dtype=np.float64)
        with timer.section('bootstrap_replicates'):
            self._resample(shifted, statistic, reps, n, rng, stats)
        stats.setflags(write=False)

        warnings_list: list[str] = []
        if reps > 1 and np.ptp(stats) == 0.0:
            warnings_list.append(
                f"null distribution is degenerate: all {reps} replicates "
                f"equal {stats[0]:.6g}"
            )

        timer.stop()

        params = NullDistributionParams(
            stats=stats,
            observed=observed,
            null_value=design.null_value,
            shift=shift,
            stat=design.stat,
            reps=reps,
            n=n,
        )

        return Result(
            params=params,
            info={
                'n': n,
                'reps': reps,
                'stat': design.stat,
                'null_value': design.null_value,
                'shift': shift,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _resample(
        self,
        values: NDArray,
        statistic,
        reps: int,
        n: int,
        rng: np.random.Generator,
        out: NDArray,
    ) -> None:
        """Ordinary nonparametric bootstrap (sampling with replacement)."""
        for b in range(reps):
            indices = rng.choice(n, size=n, replace=True)
            out[b] = statistic(values[indices])
