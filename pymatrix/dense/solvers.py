"""
Determinant, cofactor matrix and inverse.

Hierarchy of the computation:

    inverse()
        determinant()
        cofactor_matrix()
            minor()
            determinant()
                triangulate_in_place()

Public API:
    triangulate(A)       - Upper-triangular factor in a Result envelope
    determinant(A)       - Determinant by Gaussian elimination
    cofactor_matrix(A)   - Matrix of algebraic complements
    inverse(A)           - adj(A) / det(A)
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Literal
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import SINGULARITY
from pymatrix.core.exceptions import (
    CalculationError,
    InvalidDimensionsError,
    NumericalOverflowError,
    PyMatrixError,
    SingularMatrixError,
)
from pymatrix.core.result import Result
from pymatrix.core.validation import (
    check_matrix,
    check_pivoting,
    check_result_shape,
    check_square,
)
from pymatrix.dense._minor import minor
from pymatrix.dense._triangulate import triangulate_in_place
from pymatrix.dense.elementwise import scalar_multiply, transpose
from pymatrix.dense.storage import Matrix, prepare_result


Pivoting = Literal['magnitude', 'value']


@dataclass(frozen=True)
class TriangulationParams:
    """
    Payload of triangulate().

    Attributes:
        upper: Upper-triangular factor (a fresh matrix owned by the caller)
        sign: +1 or -1, parity of the row swaps
        swaps: Number of row swaps performed
        singular_columns: Columns where no non-zero pivot existed
    """
    upper: Matrix
    sign: int
    swaps: int
    singular_columns: tuple[int, ...]


def triangulate(
    A: Matrix,
    *,
    pivoting: Pivoting = 'magnitude',
) -> Result[TriangulationParams]:
    """
    Upper-triangular form of a square matrix by Gaussian elimination.

    A is left untouched; the elimination runs on a copy.

    Parameters
    ----------
    A : Matrix
        Square matrix.
    pivoting : str
        'magnitude' (largest |value| in the column, default) or 'value'
        (largest raw value, the classic rule).

    Returns
    -------
    Result[TriangulationParams]
        warnings lists any zero-pivot recoveries.

    Raises
    ------
    CalculationError
        If A is not square.
    """
    check_matrix(A, 'A')
    check_pivoting(pivoting)
    check_square(A, 'A', CalculationError)

    timer = Timer()
    timer.start()

    with timer.section('copy'):
        upper = A.copy()

    with timer.section('elimination'):
        triangulation = triangulate_in_place(upper.data, pivoting, stacklevel=3)

    timer.stop()

    return Result(
        params=TriangulationParams(
            upper=upper,
            sign=triangulation.sign,
            swaps=triangulation.swaps,
            singular_columns=triangulation.singular_columns,
        ),
        info={
            'method': 'gauss',
            'pivoting': pivoting,
            'swaps': triangulation.swaps,
            'singular': triangulation.is_singular,
        },
        timing=timer.result(),
        backend_name='cpu_gauss',
        warnings=triangulation.warnings,
    )


def _determinant(A: Matrix, pivoting: str, stacklevel: int) -> float:
    if A.rows == 1:
        return float(A.data[0, 0])

    with A.copy() as scratch:
        triangulation = triangulate_in_place(scratch.data, pivoting, stacklevel + 1)
        if triangulation.is_singular:
            return 0.0
        with np.errstate(over='ignore', invalid='ignore'):
            value = triangulation.sign * float(np.prod(np.diag(scratch.data)))

    if np.isinf(value):
        raise NumericalOverflowError(
            f"determinant: overflowed to infinity for {A.rows}x{A.columns} matrix",
            operation='determinant',
        )
    # normalise -0.0
    return value + 0.0


def _cofactors(A: Matrix, pivoting: str, stacklevel: int) -> NDArray[np.float64]:
    n = A.rows
    values = np.ones((n, n), dtype=np.float64)
    if n > 1:
        for i, j in np.ndindex(n, n):
            with minor(A, i, j) as m:
                sign = 1.0 if (i + j) % 2 == 0 else -1.0
                values[i, j] = sign * _determinant(m, pivoting, stacklevel + 1)
    return values


@contextmanager
def _cleared_on_failure(
    result: Matrix | None,
    shape: tuple[int, int],
) -> Iterator[None]:
    """Check a caller-supplied result up front; zero-fill it if the body raises."""
    if result is not None:
        check_result_shape(result, shape, 'result')
    try:
        yield
    except PyMatrixError:
        if result is not None and not result.is_released:
            result.zero_fill()
        raise


def determinant(A: Matrix, *, pivoting: Pivoting = 'magnitude') -> float:
    """
    Determinant by Gaussian elimination.

    The matrix is copied, triangulated while tracking row swaps, and the
    determinant is sign * product of the diagonal. A singular matrix gives
    exactly 0.0.

    Raises:
        CalculationError: If A is not square
        NumericalOverflowError: If the determinant overflows to infinity
    """
    check_matrix(A, 'A')
    check_pivoting(pivoting)
    check_square(A, 'A', CalculationError)
    return _determinant(A, pivoting, stacklevel=3)


def cofactor_matrix(
    A: Matrix,
    result: Matrix | None = None,
    *,
    pivoting: Pivoting = 'magnitude',
) -> Matrix:
    """
    Matrix of algebraic complements.

    result[i][j] = (-1)^(i+j) * det(M(i, j)), where M(i, j) is the minor
    obtained by deleting row i and column j. The cofactor matrix of a
    1x1 matrix is [[1.0]]. A caller-supplied result is left zero-filled
    if any minor determinant fails.

    Raises:
        InvalidDimensionsError: If A is not square, or result is mis-sized
        NumericalOverflowError: If a minor determinant overflows
    """
    check_matrix(A, 'A')
    check_pivoting(pivoting)
    check_square(A, 'A', InvalidDimensionsError)

    n = A.rows
    with _cleared_on_failure(result, (n, n)):
        values = _cofactors(A, pivoting, stacklevel=3)

    out = prepare_result(result, (n, n))
    out.data[:, :] = values
    return out


def inverse(
    A: Matrix,
    result: Matrix | None = None,
    *,
    pivoting: Pivoting = 'magnitude',
) -> Matrix:
    """
    Inverse via the adjugate: A^-1 = transpose(cofactor_matrix(A)) / det(A).

    A caller-supplied result is left zero-filled on failure.

    Raises:
        CalculationError: If A is not square
        InvalidDimensionsError: If result is mis-sized
        SingularMatrixError: If |det(A)| < 1e-7
        NumericalOverflowError: If the determinant or a cell of the inverse overflows
    """
    check_matrix(A, 'A')
    check_pivoting(pivoting)
    check_square(A, 'A', CalculationError)

    n = A.rows
    with _cleared_on_failure(result, (n, n)):
        det = _determinant(A, pivoting, stacklevel=3)
        if abs(det) < SINGULARITY.atol:
            raise SingularMatrixError(
                f"inverse: matrix is singular (determinant {det!r}, "
                f"tolerance {SINGULARITY.atol})",
                determinant=det,
                tolerance=SINGULARITY.atol,
            )

        with Matrix.create(n, n) as cofactors:
            cofactors.data[:, :] = _cofactors(A, pivoting, stacklevel=3)
            with transpose(cofactors) as adjugate:
                return scalar_multiply(adjugate, 1.0 / det, result)
