"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent resizing of result matrices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import (
    CalculationError,
    InvalidDimensionsError,
    NumericalOverflowError,
    PyMatrixError,
    ShapeMismatchError,
    ValidationError,
)

if TYPE_CHECKING:
    from pymatrix.dense.storage import Matrix


PIVOTING_STRATEGIES = ('magnitude', 'value')


def _is_count(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_dimensions(rows: Any, columns: Any) -> None:
    """
    Verify a requested matrix shape is positive in both dimensions.

    Args:
        rows: Requested number of rows
        columns: Requested number of columns

    Raises:
        InvalidDimensionsError: If either value is not a positive integer
    """
    for name, value in (('rows', rows), ('columns', columns)):
        if not _is_count(value):
            raise InvalidDimensionsError(
                f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
            )
        if value <= 0:
            raise InvalidDimensionsError(
                f"{name}: must be positive, got {value}"
            )


def check_matrix(matrix: Matrix | None, name: str) -> None:
    """
    Verify a matrix reference is usable.

    Args:
        matrix: Matrix to check
        name: Parameter name for error messages

    Raises:
        InvalidDimensionsError: If matrix is None or has been released
    """
    if matrix is None:
        raise InvalidDimensionsError(f"{name}: matrix is None")
    if not hasattr(matrix, 'is_released'):
        raise InvalidDimensionsError(
            f"{name}: expected Matrix, got {type(matrix).__name__}"
        )
    if matrix.is_released:
        raise InvalidDimensionsError(f"{name}: matrix has been released")


def check_square(
    matrix: Matrix,
    name: str,
    error: type[PyMatrixError] = CalculationError,
) -> None:
    """
    Verify a matrix is square.

    The error class depends on the caller: determinant() treats a
    non-square input as a calculation that cannot be performed, while
    cofactor_matrix() treats it as an invalid matrix.

    Args:
        matrix: Matrix to check
        name: Parameter name for error messages
        error: Exception class to raise

    Raises:
        error: If rows != columns
    """
    if matrix.rows != matrix.columns:
        raise error(
            f"{name}: expected a square matrix, got shape {matrix.shape}"
        )


def check_same_shape(left: Matrix, right: Matrix, operation: str) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        ShapeMismatchError: If rows or columns differ
    """
    if left.shape != right.shape:
        raise ShapeMismatchError(
            f"{operation}: operand shapes differ: {left.shape} vs {right.shape}",
            operation=operation,
            left_shape=left.shape,
            right_shape=right.shape,
        )


def check_result_shape(
    result: Matrix,
    shape: tuple[int, int],
    name: str,
) -> None:
    """
    Verify a caller-supplied result matrix is pre-sized correctly.

    The library never resizes a result matrix.

    Raises:
        InvalidDimensionsError: If result is unusable or has the wrong shape
    """
    check_matrix(result, name)
    if result.shape != shape:
        raise InvalidDimensionsError(
            f"{name}: expected shape {shape}, got {result.shape}"
        )


def check_index(index: Any, bound: int, name: str) -> None:
    """
    Verify an index lies in [0, bound).

    Negative indices are rejected; they have no meaning for minors.

    Raises:
        InvalidDimensionsError: If index is not an integer in range
    """
    if not _is_count(index):
        raise InvalidDimensionsError(
            f"{name}: expected an integer index, got {type(index).__name__} {index!r}"
        )
    if not 0 <= index < bound:
        raise InvalidDimensionsError(
            f"{name}: index {index} out of range [0, {bound})"
        )


def check_finite_output(
    values: NDArray[np.floating[Any]],
    operation: str,
) -> None:
    """
    Verify an output array contains no infinite values.

    NaN is not treated as overflow.

    Raises:
        NumericalOverflowError: At the first infinite cell (row-major order)
    """
    infinite = np.isinf(values)
    if np.any(infinite):
        flat = int(np.argmax(infinite))
        cell = tuple(int(k) for k in np.unravel_index(flat, values.shape))
        raise NumericalOverflowError(
            f"{operation}: result overflowed to infinity at cell {cell}",
            operation=operation,
            cell=cell,
        )


def check_pivoting(pivoting: Any) -> None:
    """
    Verify a pivoting strategy name.

    Raises:
        ValidationError: If pivoting is not a known strategy
    """
    if pivoting not in PIVOTING_STRATEGIES:
        raise ValidationError(
            f"pivoting: expected one of {PIVOTING_STRATEGIES}, got {pivoting!r}"
        )
