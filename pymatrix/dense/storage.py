"""
Matrix: owned dense storage for double-precision matrices.

A Matrix owns a single contiguous, C-ordered float64 buffer of shape
(rows, columns). Result and minor matrices are always freshly allocated;
no Matrix is ever a view into another's buffer.

Construction:
    Matrix.create(rows, columns)     zero-filled
    Matrix.from_rows([[1, 2], [3, 4]])
    Matrix.identity(n)

Lifecycle:
    Each Matrix has exactly one owner, who calls release() once it is no
    longer needed (or uses it as a context manager). Any use after
    release raises InvalidDimensionsError.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import InvalidDimensionsError, OutOfMemoryError
from pymatrix.core.validation import check_dimensions, check_result_shape


def _allocate(rows: int, columns: int) -> NDArray[np.float64]:
    """Zero-filled contiguous buffer, or OutOfMemoryError."""
    try:
        return np.zeros((rows, columns), dtype=np.float64, order='C')
    except MemoryError as e:
        raise OutOfMemoryError(
            f"cannot allocate {rows}x{columns} matrix",
            rows=rows,
            columns=columns,
        ) from e
    except ValueError as e:
        # numpy refuses sizes that overflow its index type
        raise OutOfMemoryError(
            f"cannot allocate {rows}x{columns} matrix: {e}",
            rows=rows,
            columns=columns,
        ) from e


class Matrix:
    """
    Dense rows x columns matrix of float64 values.

    Invariants:
        rows > 0 and columns > 0 while the matrix is alive
        the buffer is never shared with another Matrix
    """

    __slots__ = ('_data',)

    def __init__(self, data: NDArray[np.float64]):
        """
        Take ownership of a 2D, C-contiguous float64 array.

        Prefer create(), from_rows() or identity(); the array must not be
        shared with anything else afterwards.

        Raises:
            InvalidDimensionsError: If data is not a 2D C-contiguous float64
                array with positive dimensions
        """
        if not isinstance(data, np.ndarray) or data.ndim != 2:
            raise InvalidDimensionsError(
                f"data: expected a 2D ndarray, got {type(data).__name__} "
                f"with ndim={getattr(data, 'ndim', None)}"
            )
        if data.dtype != np.float64:
            raise InvalidDimensionsError(f"data: expected float64, got {data.dtype}")
        if not data.flags.c_contiguous:
            raise InvalidDimensionsError("data: expected a C-contiguous array")
        check_dimensions(*data.shape)
        self._data: NDArray[np.float64] | None = data

    # --- Construction ---

    @classmethod
    def create(cls, rows: int, columns: int) -> Matrix:
        """
        Allocate a zero-filled rows x columns matrix.

        Raises:
            InvalidDimensionsError: If rows or columns is not a positive integer
            OutOfMemoryError: If the buffer cannot be allocated
        """
        check_dimensions(rows, columns)
        return cls(_allocate(int(rows), int(columns)))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> Matrix:
        """
        Build a matrix from literal row data.

        Parameters
        ----------
        rows : iterable of sequences
            One sequence of real numbers per row, all of equal length.

        Raises
        ------
        InvalidDimensionsError
            If the data is empty, ragged, or not numeric.
        """
        try:
            row_list = [list(row) for row in rows]
        except TypeError as e:
            raise InvalidDimensionsError(f"rows: expected a sequence of rows: {e}") from e
        if not row_list:
            raise InvalidDimensionsError("rows: no row data given")

        widths = {len(row) for row in row_list}
        if len(widths) != 1:
            raise InvalidDimensionsError(
                f"rows: ragged row data, row lengths {sorted(widths)}"
            )

        matrix = cls.create(len(row_list), len(row_list[0]))
        try:
            matrix._data[:, :] = np.asarray(row_list, dtype=np.float64)
        except (ValueError, TypeError) as e:
            matrix.release()
            raise InvalidDimensionsError(f"rows: non-numeric row data: {e}") from e
        return matrix

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        matrix = cls.create(n, n)
        np.fill_diagonal(matrix._data, 1.0)
        return matrix

    def copy(self) -> Matrix:
        """Deep copy with a freshly allocated buffer."""
        return Matrix(np.array(self.data, dtype=np.float64, order='C', copy=True))

    # --- Lifecycle ---

    def release(self) -> None:
        """Drop the buffer. Safe to call more than once."""
        self._data = None

    @property
    def is_released(self) -> bool:
        """Whether release() has been called."""
        return self._data is None

    def __enter__(self) -> Matrix:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    # --- Storage access ---

    @property
    def data(self) -> NDArray[np.float64]:
        """The live (rows, columns) buffer. Writes go straight to the matrix."""
        if self._data is None:
            raise InvalidDimensionsError("matrix has been released")
        return self._data

    @property
    def rows(self) -> int:
        """Number of rows."""
        return int(self.data.shape[0])

    @property
    def columns(self) -> int:
        """Number of columns."""
        return int(self.data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self.rows, self.columns

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    def zero_fill(self) -> None:
        """Set every cell to 0.0."""
        self.data.fill(0.0)

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return float(self.data[i, j])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self.data[i, j] = value

    def tolist(self) -> list[list[float]]:
        return self.data.tolist()

    # --- Display ---

    def format(self, precision: int = 6) -> str:
        """One line per row, cells fixed-point formatted and space separated."""
        return "\n".join(
            " ".join(f"{value:.{precision}f}" for value in row)
            for row in self.data
        )

    def __str__(self) -> str:
        if self.is_released:
            return "<released matrix>"
        return self.format()

    def __repr__(self) -> str:
        if self.is_released:
            return "Matrix(released)"
        return f"Matrix(rows={self.rows}, columns={self.columns})"


def prepare_result(result: Matrix | None, shape: tuple[int, int]) -> Matrix:
    """
    Zero-filled output matrix for an operation.

    A caller-supplied result must already have the output shape; it is
    zero-filled and returned. Without one, a new matrix is allocated.

    Raises:
        InvalidDimensionsError: If result is released or mis-sized
    """
    if result is None:
        return Matrix.create(*shape)
    check_result_shape(result, shape, 'result')
    result.zero_fill()
    return result
