"""
Design class for synthetic sample generation.

SampleDesign encapsulates everything the backend needs to draw a
labeled Beta sample. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from bootsim.core.exceptions import InvalidParameterError
from bootsim.core.validation import check_positive_int, check_positive_scalar
from bootsim.sample._common import (
    DEFAULT_ALPHA,
    DEFAULT_BETA,
    DEFAULT_SAMPLE_SIZE,
    IDENTIFIER_ALPHABET,
)


@dataclass(frozen=True)
class SampleDesign:
    """
    Frozen design for drawing a synthetic sample.

    Attributes:
        n: Number of observations.
        alpha: First Beta shape parameter.
        beta: Second Beta shape parameter.
        replace_names: If False, identifiers are distinct letters and n is
            capped by the alphabet size. If True, identifiers are drawn
            with replacement and may repeat.
    """
    n: int
    alpha: float
    beta: float
    replace_names: bool

    @classmethod
    def for_generation(
        cls,
        n: int = DEFAULT_SAMPLE_SIZE,
        *,
        alpha: float = DEFAULT_ALPHA,
        beta: float = DEFAULT_BETA,
        replace_names: bool = False,
    ) -> SampleDesign:
        """
        Create a sample design with validation.

        Args:
            n: Sample size. Must be >= 1, and <= 26 unless replace_names.
            alpha: Beta shape parameter, > 0.
            beta: Beta shape parameter, > 0.
            replace_names: Allow repeated identifiers.

        Returns:
            Validated SampleDesign.

        Raises:
            InvalidParameterError: If any parameter is out of range.
        """
        n = check_positive_int(n, "n")
        alpha = check_positive_scalar(alpha, "alpha")
        beta = check_positive_scalar(beta, "beta")

        pool = len(IDENTIFIER_ALPHABET)
        if not replace_names and n > pool:
            raise InvalidParameterError(
                f"n ({n}) exceeds the {pool} distinct identifiers available; "
                f"pass replace_names=True to allow repeated identifiers",
                parameter="n",
                value=n,
            )

        return cls(
            n=n,
            alpha=alpha,
            beta=beta,
            replace_names=bool(replace_names),
        )
