"""
Sample solution type.

Sample wraps Result[SampleParams] and is the object every later stage
consumes: the point estimator, the bootstrap resampler and the simulator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from bootsim.core.exceptions import DimensionError, ValidationError
from bootsim.core.result import Result
from bootsim.core.validation import check_1d, check_array, check_finite
from bootsim.sample._common import SampleParams

if TYPE_CHECKING:
    from bootsim.sample.design import SampleDesign


@dataclass
class Sample:
    """
    An ordered, labeled sample of scalar observations.

    Build with generate_sample() for synthetic Beta data or
    Sample.from_values() for observed data.
    """
    _result: Result[SampleParams]
    _design: 'SampleDesign | None'

    @classmethod
    def from_values(
        cls,
        values: ArrayLike,
        names: Sequence[str] | None = None,
    ) -> Sample:
        """
        Wrap observed values as a Sample.

        Args:
            values: 1D finite numeric values. May be empty.
            names: One identifier per value. Defaults to 'x1', 'x2', ...

        Raises:
            ValidationError: Non-numeric or non-finite values, or names of
                the wrong length.
        """
        arr = check_array(values, "values").copy()
        check_1d(arr, "values")
        check_finite(arr, "values")
        arr.setflags(write=False)

        if names is None:
            labels = tuple(f"x{i + 1}" for i in range(arr.shape[0]))
        else:
            labels = tuple(names)
            if len(labels) != arr.shape[0]:
                raise DimensionError(
                    f"Inconsistent lengths: names={len(labels)}, values={arr.shape[0]}"
                )
            if not all(isinstance(label, str) for label in labels):
                raise ValidationError("names: every identifier must be a str")

        result = Result(
            params=SampleParams(names=labels, values=arr),
            info={'n': arr.shape[0]},
            timing=None,
            backend_name='observed',
        )
        return cls(_result=result, _design=None)

    # --- Core fields ---

    @property
    def names(self) -> tuple[str, ...]:
        """Observation identifiers, in sample order."""
        return self._result.params.names

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Observation values (read-only), shape (n,)."""
        return self._result.params.values

    @property
    def n(self) -> int:
        return len(self.names)

    def to_records(self) -> list[tuple[str, float]]:
        """(identifier, value) pairs in sample order."""
        return [(name, float(v)) for name, v in zip(self.names, self.values)]

    def __len__(self) -> int:
        return self.n

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

    # --- Display ---

    def summary(self) -> str:
        """Tabular listing of the sample with its mean."""
        lines = [f"\nSAMPLE (n = {self.n})", ""]
        lines.append(f"{'name':>6s} {'value':>12s}")
        for name, value in self.to_records():
            lines.append(f"{name:>6s} {value:12.5f}")
        if self.n > 0:
            lines.append("")
            lines.append(f"mean: {float(np.mean(self.values)):.5f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Sample(n={self.n}, backend={self.backend_name!r})"
