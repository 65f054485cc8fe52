"""
Design class for point-null bootstrap resampling.

NullBootstrapDesign holds the sample values, the number of replicates,
the hypothesized value and the statistic. Immutable, validated at
construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from bootsim.core.validation import (
    check_choice,
    check_finite_scalar,
    check_not_empty,
    check_positive_int,
)
from bootsim.infer._common import NULL_STATS
from bootsim.sample._stats import sample_values

if TYPE_CHECKING:
    from bootsim.sample.solution import Sample


@dataclass(frozen=True)
class NullBootstrapDesign:
    """
    Frozen design for a point-null bootstrap.

    Attributes:
        values: Sample values, shape (n,), read-only.
        reps: Number of bootstrap replicates.
        null_value: Hypothesized population value of the statistic.
        stat: Statistic recomputed on each resample, "mean" or "median".
    """
    values: NDArray[np.floating[Any]]
    reps: int
    null_value: float
    stat: str

    @classmethod
    def for_point_null(
        cls,
        sample: 'Sample | ArrayLike',
        reps: int,
        null_value: float,
        *,
        stat: str = "mean",
    ) -> NullBootstrapDesign:
        """
        Create a point-null bootstrap design with validation.

        Args:
            sample: Sample or 1D finite values. Must not be empty.
            reps: Number of replicates, >= 1.
            null_value: Hypothesized value. Required, finite.
            stat: "mean" (default) or "median".

        Returns:
            Validated NullBootstrapDesign.

        Raises:
            EmptyInputError: If the sample is empty.
            InvalidParameterError: If reps, null_value or stat is invalid.
        """
        values = np.array(sample_values(sample), dtype=np.float64)
        check_not_empty(values, "sample")
        values.setflags(write=False)

        return cls(
            values=values,
            reps=check_positive_int(reps, "reps"),
            null_value=check_finite_scalar(null_value, "null_value"),
            stat=check_choice(stat, NULL_STATS, "stat"),
        )

    @property
    def n(self) -> int:
        return self.values.shape[0]
