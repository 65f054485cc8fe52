"""
Core infrastructure for bootsim.

Shared abstractions used by every domain subpackage (sample, infer,
simulation).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from bootsim.core.protocols import Backend
from bootsim.core.result import Result
from bootsim.core.exceptions import (
    BootSimError,
    ValidationError,
    DimensionError,
    InvalidParameterError,
    EmptyInputError,
    InsufficientDataError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "BootSimError",
    "ValidationError",
    "DimensionError",
    "InvalidParameterError",
    "EmptyInputError",
    "InsufficientDataError",
]
