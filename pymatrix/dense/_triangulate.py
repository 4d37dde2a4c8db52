"""
In-place triangulation by Gaussian elimination with row pivoting.

To zero the entries of column i below the diagonal, row i multiplied by
a[j][i] / a[i][i] is subtracted from every row j = i+1, ..., n-1:

    {{10, 2, 3},        {{10, 2,   3  },        {{10, 2,   3       },
     { 4, 5, 6},   ->    { 0, 4.2, 4.8},   ->    { 0, 6.6, 6.9     },
     { 7, 8, 9}}         { 0, 6.6, 6.9}}         { 0, 0,   0.409091}}

(the second step swapped rows 1 and 2 to put 6.6 on the diagonal), so
det = -(10 * 6.6 * 0.409091) = -27.

A zero on the diagonal would make the multiplier infinite, so before each
column is eliminated the rows are permuted to bring a better pivot onto
the diagonal. Each permutation flips the sign of the determinant; the
returned Triangulation records the accumulated sign.

Two pivot rules are available:
    'magnitude'  row with the largest |a[r][i]| (partial pivoting)
    'value'      row with the largest raw a[r][i], the classic rule of
                 the original matrix library; a negative-dominated column
                 can leave a zero on the diagonal, which is then recovered
                 by a second swap and reported as a RuntimeWarning
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import CalculationError


@dataclass(frozen=True)
class Triangulation:
    """
    Bookkeeping of one triangulation pass.

    Attributes:
        sign: +1 or -1, parity of the row swaps performed
        swaps: Number of row swaps performed
        singular_columns: Columns with no non-zero pivot candidate; the
            determinant of the matrix is zero if this is non-empty
        warnings: Zero-pivot recoveries that were needed
    """
    sign: int
    swaps: int
    singular_columns: tuple[int, ...]
    warnings: tuple[str, ...]

    @property
    def is_singular(self) -> bool:
        return bool(self.singular_columns)


def _select_pivot(column: NDArray[np.floating[Any]], start: int, pivoting: str) -> int:
    if pivoting == 'magnitude':
        return start + int(np.argmax(np.abs(column[start:])))

    best_row = start
    best_value = column[start]
    for row in range(start + 1, column.shape[0]):
        if column[row] > best_value:
            best_value = column[row]
            best_row = row
    return best_row


def _swap_rows(data: NDArray[np.floating[Any]], a: int, b: int) -> None:
    data[[a, b]] = data[[b, a]]


def triangulate_in_place(
    data: NDArray[np.floating[Any]],
    pivoting: str = 'magnitude',
    stacklevel: int = 2,
) -> Triangulation:
    """
    Reduce a square array to upper-triangular form in place.

    Never divides by an exact zero pivot: when the diagonal entry is zero
    and a non-zero candidate exists below it, that row is swapped in; when
    the whole column below is zero, the column is recorded as singular
    and skipped.

    Args:
        data: Square float64 array, overwritten with the upper-triangular factor
        pivoting: 'magnitude' or 'value'
        stacklevel: Frame the zero-pivot warning is attributed to, counted
            as in warnings.warn from this function

    Returns:
        Triangulation with the swap sign and singularity diagnostics

    Raises:
        CalculationError: If data is not a square 2D array
    """
    if data.ndim != 2 or data.shape[0] != data.shape[1]:
        raise CalculationError(
            f"triangulation requires a square 2D array, got shape {data.shape}"
        )

    n = data.shape[0]
    sign = 1
    swaps = 0
    singular_columns: list[int] = []
    notes: list[str] = []

    for i in range(n):
        pivot_row = _select_pivot(data[:, i], i, pivoting)
        if pivot_row != i:
            _swap_rows(data, i, pivot_row)
            sign = -sign
            swaps += 1

        if data[i, i] == 0.0:
            below = np.abs(data[i + 1:, i])
            if not np.any(below > 0.0):
                singular_columns.append(i)
                continue

            recovery_row = i + 1 + int(np.argmax(below))
            _swap_rows(data, i, recovery_row)
            sign = -sign
            swaps += 1

            message = (
                f"zero pivot in column {i} after {pivoting!r} pivoting; "
                f"recovered by swapping in row {recovery_row}"
            )
            notes.append(message)
            warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)

        if i + 1 < n:
            with np.errstate(over='ignore', invalid='ignore'):
                multipliers = data[i + 1:, i] / data[i, i]
                data[i + 1:, i:] -= np.outer(multipliers, data[i, i:])
            data[i + 1:, i] = 0.0

    return Triangulation(
        sign=sign,
        swaps=swaps,
        singular_columns=tuple(singular_columns),
        warnings=tuple(notes),
    )
