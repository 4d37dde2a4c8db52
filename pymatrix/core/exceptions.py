"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Every exception class carries a ResultCode so that
callers ported from status-code APIs can map failures back to the classic
OK / INCORRECT_MATRIX / CALCULATION_ERROR triple.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import IntEnum


class ResultCode(IntEnum):
    """Numeric status codes of the classic matrix API."""
    OK = 0
    INCORRECT_MATRIX = 1
    CALCULATION_ERROR = 2


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    code: ResultCode = ResultCode.INCORRECT_MATRIX


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    code = ResultCode.INCORRECT_MATRIX


class InvalidDimensionsError(ValidationError):
    """
    Matrix is missing or its dimensions are invalid.

    Raised for non-positive row/column counts, a None or released matrix,
    a result matrix of the wrong size, out-of-range minor indices, and
    non-square input where squareness is a structural requirement
    (cofactor matrix).
    """
    pass


class CalculationError(PyMatrixError):
    """
    The requested calculation cannot be performed.

    Base class for operand shape mismatches, arithmetic overflow and
    operations undefined for the given input (e.g. the determinant of a
    non-square matrix).
    """
    code = ResultCode.CALCULATION_ERROR


class ShapeMismatchError(CalculationError):
    """
    Operand shapes are incompatible for the operation.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NumericalOverflowError(CalculationError):
    """
    A computed value overflowed to infinity.

    Attributes:
        operation: Name of the operation that overflowed
        cell: (row, column) of the first infinite output cell, if known
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        cell: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.cell = cell


class SingularMatrixError(CalculationError):
    """
    Matrix is singular within tolerance.

    Attributes:
        determinant: The determinant that was found, if computed
        tolerance: Absolute tolerance the determinant was compared against
    """

    def __init__(
        self,
        message: str,
        determinant: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.determinant = determinant
        self.tolerance = tolerance


class OutOfMemoryError(PyMatrixError):
    """
    Storage for a matrix could not be allocated.

    Attributes:
        rows: Requested row count
        columns: Requested column count
    """
    code = ResultCode.INCORRECT_MATRIX

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        columns: int | None = None,
    ):
        super().__init__(message)
        self.rows = rows
        self.columns = columns
