"""
Generic result container for all bootsim computations.

Every backend returns a Result envelope around its own parameter payload
(a sample, a null distribution, ...). Shared tooling reads timing,
diagnostics and warnings from the envelope without knowing the payload.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (n, reps, stat, shift)
    - timing is optional so unit tests can build results by hand
    - Immutable (frozen=True) so a finished result cannot drift
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain payload (SampleParams, NullDistributionParams, ...)
        info: Structured metadata about the run
        timing: Seconds per named section plus 'total_seconds', or None
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=NullDistributionParams(...),
        ...     info={'n': 25, 'reps': 1000, 'stat': 'mean'},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_null_bootstrap',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
