"""
Common data structures for samples.

SampleParams is the payload wrapped by Result[P] and exposed through
the Sample solution class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


IDENTIFIER_ALPHABET = tuple("abcdefghijklmnopqrstuvwxyz")

DEFAULT_SAMPLE_SIZE = 25
DEFAULT_ALPHA = 1.0
DEFAULT_BETA = 3.0


@dataclass(frozen=True)
class SampleParams:
    """
    Parameter payload for a labeled sample.

    - names: one identifier per observation
    - values: observed values, read-only, same order as names
    """
    names: tuple[str, ...]
    values: NDArray[np.floating[Any]]          # shape (n,)
