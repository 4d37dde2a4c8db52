"""
Elementwise matrix arithmetic.

Every operation validates its operands, then maps over cells. Operations
that produce a matrix write into an optional caller-supplied result, which
must already have the output shape; when omitted a fresh matrix is
allocated. The result is zero-filled first and stays zero-filled if the
operation fails.

All arithmetic is overflow-checked: an infinite output cell raises
NumericalOverflowError.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import EQUALITY
from pymatrix.core.exceptions import OutOfMemoryError, ShapeMismatchError
from pymatrix.core.validation import (
    check_finite_output,
    check_matrix,
    check_same_shape,
)
from pymatrix.dense.storage import Matrix, prepare_result


def _store(
    values: NDArray[np.floating[Any]],
    result: Matrix | None,
    operation: str,
) -> Matrix:
    """Overflow-check computed values, then write them into the result."""
    out = prepare_result(result, values.shape)
    check_finite_output(values, operation)
    out.data[:, :] = values
    return out


def equals(A: Matrix, B: Matrix) -> bool:
    """
    Tolerance-based matrix equality.

    Two matrices are equal iff they have the same shape and every pair
    of cells differs by strictly less than 1e-7. NaN never compares equal.
    """
    check_matrix(A, 'A')
    check_matrix(B, 'B')
    if A.shape != B.shape:
        return False
    with np.errstate(invalid='ignore', over='ignore'):
        return bool(np.all(np.abs(A.data - B.data) < EQUALITY.atol))


def add(A: Matrix, B: Matrix, result: Matrix | None = None) -> Matrix:
    """result[i][j] = A[i][j] + B[i][j]."""
    check_matrix(A, 'A')
    check_matrix(B, 'B')
    check_same_shape(A, B, 'add')
    with np.errstate(over='ignore', invalid='ignore'):
        values = A.data + B.data
    return _store(values, result, 'add')


def sub(A: Matrix, B: Matrix, result: Matrix | None = None) -> Matrix:
    """result[i][j] = A[i][j] - B[i][j]."""
    check_matrix(A, 'A')
    check_matrix(B, 'B')
    check_same_shape(A, B, 'sub')
    with np.errstate(over='ignore', invalid='ignore'):
        values = A.data - B.data
    return _store(values, result, 'sub')


def scalar_multiply(
    A: Matrix,
    number: float,
    result: Matrix | None = None,
) -> Matrix:
    """result[i][j] = A[i][j] * number."""
    check_matrix(A, 'A')
    with np.errstate(over='ignore', invalid='ignore'):
        values = A.data * float(number)
    return _store(values, result, 'scalar_multiply')


def transpose(A: Matrix, result: Matrix | None = None) -> Matrix:
    """result[j][i] = A[i][j]; result is columns(A) x rows(A)."""
    check_matrix(A, 'A')
    values = A.data.T.copy()
    out = prepare_result(result, values.shape)
    out.data[:, :] = values
    return out


def multiply(A: Matrix, B: Matrix, result: Matrix | None = None) -> Matrix:
    """
    Matrix product C = A x B.

    C(i,j) = A(i,0) x B(0,j) + A(i,1) x B(1,j) + ... + A(i,k-1) x B(k-1,j)

    Overflow is checked on every partial sum of the accumulation, so an
    intermediate infinity is reported even if later terms would turn the
    final sum into NaN.

    Raises:
        ShapeMismatchError: If columns(A) != rows(B)
        NumericalOverflowError: If any partial sum is infinite
    """
    check_matrix(A, 'A')
    check_matrix(B, 'B')
    if A.columns != B.rows:
        raise ShapeMismatchError(
            f"multiply: columns of A ({A.columns}) must equal rows of B ({B.rows})",
            operation='multiply',
            left_shape=A.shape,
            right_shape=B.shape,
        )

    rows, shared, columns = A.rows, A.columns, B.columns
    with Matrix.create(rows, columns) as accumulator:
        try:
            overflowed = np.zeros((rows, columns), dtype=bool)
            with np.errstate(over='ignore', invalid='ignore'):
                # partial sums in accumulation order, one rank-1 update per k
                for k in range(shared):
                    accumulator.data[:, :] += np.outer(A.data[:, k], B.data[k, :])
                    overflowed |= np.isinf(accumulator.data)
        except MemoryError as e:
            raise OutOfMemoryError(
                f"multiply: cannot allocate {rows}x{columns} partial sums",
                rows=rows,
                columns=columns,
            ) from e

        out = prepare_result(result, (rows, columns))
        check_finite_output(np.where(overflowed, np.inf, 0.0), 'multiply')
        out.data[:, :] = accumulator.data
    return out
