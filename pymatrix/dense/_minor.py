"""
Minor extraction.

The minor M(i, j) is the submatrix left after deleting row i and column j.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.exceptions import InvalidDimensionsError
from pymatrix.core.validation import check_index, check_matrix
from pymatrix.dense.storage import Matrix


def minor(A: Matrix, i: int, j: int) -> Matrix:
    """
    Fresh (rows-1) x (columns-1) matrix without row i and column j.

    Cell (k, l) of the minor is A[k if k < i else k + 1][l if l < j else l + 1].
    A does not have to be square.

    Raises:
        InvalidDimensionsError: If A has a single row or column, or if
            i / j are not valid indices into A
    """
    check_matrix(A, 'A')
    if A.rows < 2 or A.columns < 2:
        raise InvalidDimensionsError(
            f"A: a minor needs at least 2 rows and 2 columns, got shape {A.shape}"
        )
    check_index(i, A.rows, 'i')
    check_index(j, A.columns, 'j')

    keep_rows = np.arange(A.rows) != i
    keep_columns = np.arange(A.columns) != j
    result = Matrix.create(A.rows - 1, A.columns - 1)
    result.data[:, :] = A.data[np.ix_(keep_rows, keep_columns)]
    return result
