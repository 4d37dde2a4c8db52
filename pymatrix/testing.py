"""
Assertion helpers for code that tests against pymatrix.

assert_matrix_equal uses the same 1e-7 absolute tolerance as equals(), so
fixtures written for the classic matrix API keep passing.
"""

from __future__ import annotations

from typing import Sequence

from pymatrix.core.compute.tolerances import EQUALITY
from pymatrix.dense.elementwise import equals
from pymatrix.dense.storage import Matrix


def _as_matrix(value: Matrix | Sequence[Sequence[float]]) -> Matrix:
    if isinstance(value, Matrix):
        return value
    return Matrix.from_rows(value)


def assert_matrix_equal(
    actual: Matrix | Sequence[Sequence[float]],
    expected: Matrix | Sequence[Sequence[float]],
) -> None:
    """
    Assert two matrices are equal within the 1e-7 equality tolerance.

    Either side may be given as literal row data. On failure the message
    shows both matrices, one row per line.

    Raises:
        AssertionError: On shape mismatch or any cell differing by >= 1e-7
    """
    actual_m = _as_matrix(actual)
    expected_m = _as_matrix(expected)

    if actual_m.shape != expected_m.shape:
        raise AssertionError(
            f"shape mismatch: actual {actual_m.shape}, expected {expected_m.shape}"
        )

    if not equals(actual_m, expected_m):
        raise AssertionError(
            f"matrices differ (atol={EQUALITY.atol}).\n"
            f"actual:\n{actual_m.format()}\n"
            f"expected:\n{expected_m.format()}"
        )
