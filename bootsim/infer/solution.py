"""
Solution wrapper for bootstrap null distributions.

NullDistributionSolution wraps Result[NullDistributionParams] and
provides convenient accessors, histogram binning and summary output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from bootsim.core.result import Result
from bootsim.core.validation import check_positive_int
from bootsim.infer._common import (
    DEFAULT_BINS,
    ConfidenceInterval,
    HistogramData,
    NullDistributionParams,
)
from bootsim.infer._histogram import bin_distribution

if TYPE_CHECKING:
    from bootsim.infer.design import NullBootstrapDesign


@dataclass
class NullDistributionSolution:
    """
    User-facing bootstrap null distribution.

    The replicate statistics are exposed as a read-only array so any
    interval, p-value or plotting code can consume them directly.
    """
    _result: Result[NullDistributionParams]
    _design: 'NullBootstrapDesign'

    # --- Core fields ---

    @property
    def stats(self) -> NDArray[np.floating[Any]]:
        """Replicate statistics, shape (reps,)."""
        return self._result.params.stats

    @property
    def observed(self) -> float:
        """Statistic of the original, unshifted sample."""
        return self._result.params.observed

    @property
    def null_value(self) -> float:
        return self._result.params.null_value

    @property
    def shift(self) -> float:
        """Amount added to every sample value before resampling."""
        return self._result.params.shift

    @property
    def stat(self) -> str:
        return self._result.params.stat

    @property
    def reps(self) -> int:
        return self._result.params.reps

    @property
    def n(self) -> int:
        """Size of the sample (and of every resample)."""
        return self._result.params.n

    def __len__(self) -> int:
        return self.reps

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Rendering data ---

    def histogram(
        self,
        bins: int = DEFAULT_BINS,
        interval: ConfidenceInterval | None = None,
    ) -> HistogramData:
        """Bin the replicate statistics, shading bins inside interval."""
        bins = check_positive_int(bins, "bins")
        return bin_distribution(self.stats, bins, interval)

    # --- Display ---

    def summary(self) -> str:
        """
        Distribution summary.

        Produces:
            POINT-NULL BOOTSTRAP DISTRIBUTION

            Hypothesis: mean = 0.5
            Observed mean: 0.23456 (shift +0.26544)
            Replicates: 1000 of size 25
            ...
        """
        stats = self.stats
        q = np.quantile(stats, [0.0, 0.25, 0.5, 0.75, 1.0])
        lines = [
            "\nPOINT-NULL BOOTSTRAP DISTRIBUTION",
            "",
            f"Hypothesis: {self.stat} = {self.null_value:.6g}",
            f"Observed {self.stat}: {self.observed:.5f} (shift {self.shift:+.5f})",
            f"Replicates: {self.reps} of size {self.n}",
            "",
            f"{'Min':>10s} {'1Q':>10s} {'Median':>10s} {'3Q':>10s} {'Max':>10s}",
            " ".join(f"{v:10.5f}" for v in q),
        ]
        if self.reps > 1:
            lines.append(f"Std. error: {np.std(stats, ddof=1):.5f}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"NullDistributionSolution(reps={self.reps}, n={self.n}, "
            f"stat={self.stat!r}, null_value={self.null_value:.6g}, "
            f"backend={self.backend_name!r})"
        )
