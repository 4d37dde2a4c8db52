"""
Core infrastructure for pymatrix.

This module provides shared abstractions used by the dense matrix
implementation.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and ResultCode
    validation: Input validators
    compute: Tolerances and timing
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    ResultCode,
    PyMatrixError,
    ValidationError,
    InvalidDimensionsError,
    CalculationError,
    ShapeMismatchError,
    NumericalOverflowError,
    SingularMatrixError,
    OutOfMemoryError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "ResultCode",
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionsError",
    "CalculationError",
    "ShapeMismatchError",
    "NumericalOverflowError",
    "SingularMatrixError",
    "OutOfMemoryError",
]
