"""
Input validation utilities for bootsim.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Each function validates ONE thing
    - Parameter names and received values included in all error messages
"""

import math
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from bootsim.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    InvalidParameterError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object or other non-numeric dtypes
    (mixed types, strings).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        EmptyInputError: If array is empty
    """
    if array.shape[0] == 0:
        raise EmptyInputError(f"{name}: is empty", name=name)


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} values, got {n}",
            required=min_samples,
            actual=n,
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1 and return it as a Python int.

    Booleans are rejected even though they subclass int.

    Raises:
        InvalidParameterError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidParameterError(
            f"{name} must be an integer, got {type(value).__name__}",
            parameter=name,
            value=value,
        )
    if value < 1:
        raise InvalidParameterError(
            f"{name} must be >= 1, got {value}",
            parameter=name,
            value=value,
        )
    return int(value)


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number and return it as a float.

    Raises:
        InvalidParameterError: If value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise InvalidParameterError(
            f"{name} must be a real number, got {type(value).__name__}",
            parameter=name,
            value=value,
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(
            f"{name} must be finite, got {value}",
            parameter=name,
            value=value,
        )
    return value


def check_positive_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number > 0.

    Raises:
        InvalidParameterError: If value is not finite or not positive
    """
    value = check_finite_scalar(value, name)
    if value <= 0:
        raise InvalidParameterError(
            f"{name} must be > 0, got {value}",
            parameter=name,
            value=value,
        )
    return value


def check_level(value: Any, name: str = "level") -> float:
    """
    Verify a confidence level lies strictly between 0 and 1.

    Raises:
        InvalidParameterError: If value is outside (0, 1)
    """
    value = check_finite_scalar(value, name)
    if not 0.0 < value < 1.0:
        raise InvalidParameterError(
            f"{name} must be strictly between 0 and 1, got {value}",
            parameter=name,
            value=value,
        )
    return value


def check_choice(value: Any, choices: Iterable[str], name: str) -> str:
    """
    Verify value is one of a fixed set of option strings.

    Raises:
        InvalidParameterError: If value is not among choices
    """
    choices = tuple(choices)
    if value not in choices:
        options = ", ".join(repr(c) for c in choices)
        raise InvalidParameterError(
            f"{name} must be one of {options}, got {value!r}",
            parameter=name,
            value=value,
        )
    return value
