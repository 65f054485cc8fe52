"""
Exception hierarchy for bootsim.

All exceptions inherit from BootSimError so callers can catch any
library-specific error in one place. Every precondition failure is a
ValidationError: the computations here are deterministic and cheap, so a
failure always means the inputs were wrong, never a transient fault.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the parameter and the value actually received
    - Never catch and re-raise with less information
"""

from typing import Any


class BootSimError(Exception):
    """Base exception for all bootsim errors."""
    pass


class ValidationError(BootSimError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when values that must form a 1D vector arrive with another shape.
    """
    pass


class InvalidParameterError(ValidationError):
    """
    A scalar parameter is outside its allowed range or set.

    Raised for bad sample sizes, replicate counts, confidence levels,
    distribution shape parameters, bin counts and unknown method names.

    Attributes:
        parameter: Name of the offending parameter
        value: The value that was received
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class EmptyInputError(ValidationError):
    """
    A statistic was requested on an empty collection.

    Attributes:
        name: Name of the empty input
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class InsufficientDataError(ValidationError):
    """
    Too few observations for the requested computation.

    Raised e.g. when an interval is requested from fewer than two
    bootstrap statistics, or a standard deviation from one observation.

    Attributes:
        required: Minimum number of observations needed
        actual: Number of observations received
    """

    def __init__(
        self,
        message: str,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.required = required
        self.actual = actual
