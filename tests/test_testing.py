"""
Tests for pymatrix.testing helpers.
"""

import pytest

from pymatrix import Matrix
from pymatrix.testing import assert_matrix_equal


class TestAssertMatrixEqual:

    def test_equal_within_tolerance(self):
        assert_matrix_equal(
            Matrix.from_rows([[1, 2], [3, 4]]),
            [[1, 2], [3, 4.00000001]],
        )

    def test_literal_rows_on_both_sides(self):
        assert_matrix_equal([[1.0]], [[1.0]])

    def test_shape_mismatch(self):
        with pytest.raises(AssertionError, match="shape mismatch"):
            assert_matrix_equal([[1, 2]], [[1], [2]])

    def test_failure_prints_both_matrices(self):
        with pytest.raises(AssertionError) as exc_info:
            assert_matrix_equal([[1, 2], [3, 4]], [[1, 2], [3, 4.001]])
        message = str(exc_info.value)
        assert "actual:\n1.000000 2.000000\n3.000000 4.000000" in message
        assert "expected:\n1.000000 2.000000\n3.000000 4.001000" in message
