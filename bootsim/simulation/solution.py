"""
Solution type for the end-to-end simulator.

SimulationSolution bundles every stage's output: the sample, the null
distribution, the interval and the histogram data for rendering.
"""

from __future__ import annotations

from dataclasses import dataclass

from bootsim.infer._common import ConfidenceInterval, HistogramData
from bootsim.infer.solution import NullDistributionSolution
from bootsim.sample.solution import Sample


@dataclass(frozen=True)
class SimulationSolution:
    """
    User-facing simulator output.

    Attributes:
        sample: Generated sample
        distribution: Bootstrap null distribution
        interval: Confidence interval from the distribution
        histogram: Binned distribution with interval shading
        seed: Seed the run was started from
        timing: Seconds per stage plus 'total_seconds'
    """
    sample: Sample
    distribution: NullDistributionSolution
    interval: ConfidenceInterval
    histogram: HistogramData
    seed: int | None
    timing: dict[str, float]

    @property
    def observed(self) -> float:
        """Statistic of the generated sample."""
        return self.distribution.observed

    @property
    def null_value(self) -> float:
        return self.distribution.null_value

    @property
    def warnings(self) -> tuple[str, ...]:
        return self.distribution.warnings

    def summary(self) -> str:
        """Text report of the whole run."""
        ci = self.interval
        conf_pct = round(ci.level * 100, 4)
        lines = [
            "\nBOOTSTRAP CONFIDENCE INTERVAL SIMULATION",
            "",
            f"Sample size: {self.sample.n}    Seed: {self.seed}",
            self.distribution.summary().lstrip("\n"),
            "",
            f"{conf_pct:g}% {ci.type} CI: ({ci.lower:.5f}, {ci.upper:.5f})",
            f"Histogram: {self.histogram.bins} bins, "
            f"{int(self.histogram.shaded.sum())} inside the interval",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SimulationSolution(n={self.sample.n}, reps={self.distribution.reps}, "
            f"interval=({self.interval.lower:.4g}, {self.interval.upper:.4g}))"
        )
