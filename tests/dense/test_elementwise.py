"""
Tests for equality, add, sub, scalar_multiply, transpose and multiply.
"""

import tracemalloc

import numpy as np
import pytest

from pymatrix import (
    InvalidDimensionsError,
    Matrix,
    NumericalOverflowError,
    OutOfMemoryError,
    ShapeMismatchError,
    add,
    equals,
    multiply,
    scalar_multiply,
    sub,
    transpose,
)
from pymatrix.core.exceptions import CalculationError, ResultCode
from pymatrix.testing import assert_matrix_equal


BIG = 1e308


class TestEquals:
    """Tolerance-based equality with atol 1e-7."""

    def test_within_tolerance(self, square_2x2):
        other = Matrix.from_rows([[1, 2], [3, 4.00000001]])
        assert equals(square_2x2, other)

    def test_outside_tolerance(self, square_2x2):
        other = Matrix.from_rows([[1, 2], [3, 4.001]])
        assert not equals(square_2x2, other)

    def test_exact_tolerance_is_unequal(self):
        a = Matrix.from_rows([[0.0]])
        b = Matrix.from_rows([[2e-7]])
        assert not equals(a, b)

    def test_shape_mismatch_is_false(self):
        assert not equals(Matrix.create(2, 2), Matrix.create(2, 3))

    def test_classic_fixtures(self):
        left = Matrix.from_rows([[5, 6], [7, 8]])
        assert equals(left, Matrix.from_rows([[5, 6], [7, 8]]))
        assert not equals(left, Matrix.from_rows([[5, 5], [7, 8]]))

    def test_nan_is_unequal(self):
        a = Matrix.from_rows([[np.nan]])
        assert not equals(a, a)

    def test_none_operand_raises(self, square_2x2):
        with pytest.raises(InvalidDimensionsError):
            equals(square_2x2, None)


class TestAddSub:

    def test_add(self, square_2x2):
        assert_matrix_equal(add(square_2x2, square_2x2), [[2, 4], [6, 8]])

    def test_sub(self, square_2x2):
        other = Matrix.from_rows([[1, 1], [1, 1]])
        assert_matrix_equal(sub(square_2x2, other), [[0, 1], [2, 3]])

    def test_writes_into_result(self, square_2x2):
        out = Matrix.from_rows([[9, 9], [9, 9]])
        returned = add(square_2x2, square_2x2, out)
        assert returned is out
        assert_matrix_equal(out, [[2, 4], [6, 8]])

    def test_result_may_be_an_operand(self, square_2x2):
        add(square_2x2, square_2x2, square_2x2)
        assert_matrix_equal(square_2x2, [[2, 4], [6, 8]])

    @pytest.mark.parametrize("op", [add, sub])
    def test_shape_mismatch(self, op):
        with pytest.raises(ShapeMismatchError) as exc_info:
            op(Matrix.create(2, 2), Matrix.create(3, 2))
        assert exc_info.value.code is ResultCode.CALCULATION_ERROR

    def test_mis_sized_result_rejected(self, square_2x2):
        with pytest.raises(InvalidDimensionsError):
            add(square_2x2, square_2x2, Matrix.create(3, 3))

    def test_add_overflow(self):
        big = Matrix.from_rows([[1.0, BIG]])
        with pytest.raises(NumericalOverflowError) as exc_info:
            add(big, big)
        assert exc_info.value.cell == (0, 1)
        assert exc_info.value.operation == "add"

    def test_sub_overflow(self):
        a = Matrix.from_rows([[BIG]])
        b = Matrix.from_rows([[-BIG]])
        with pytest.raises(NumericalOverflowError):
            sub(a, b)

    def test_result_zeroed_on_overflow(self):
        big = Matrix.from_rows([[BIG, 1.0]])
        out = Matrix.from_rows([[7.0, 7.0]])
        with pytest.raises(CalculationError):
            add(big, big, out)
        np.testing.assert_array_equal(out.data, [[0.0, 0.0]])

    def test_additive_inverse(self, rng):
        for shape in [(1, 1), (2, 5), (4, 4)]:
            a = Matrix.from_rows(rng.standard_normal(shape) * 100)
            total = add(a, scalar_multiply(a, -1))
            assert equals(total, Matrix.create(*shape))


class TestScalarMultiply:

    def test_values(self, square_2x2):
        assert_matrix_equal(scalar_multiply(square_2x2, 2.5), [[2.5, 5], [7.5, 10]])

    def test_zero(self, square_2x2):
        assert_matrix_equal(scalar_multiply(square_2x2, 0), [[0, 0], [0, 0]])

    def test_overflow(self):
        with pytest.raises(NumericalOverflowError):
            scalar_multiply(Matrix.from_rows([[BIG]]), 10.0)


class TestTranspose:

    def test_rectangular(self):
        a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        t = transpose(a)
        assert t.shape == (3, 2)
        assert_matrix_equal(t, [[1, 4], [2, 5], [3, 6]])

    def test_result_must_be_transposed_shape(self):
        a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(InvalidDimensionsError):
            transpose(a, Matrix.create(2, 3))

    def test_in_place_square(self, square_2x2):
        transpose(square_2x2, square_2x2)
        assert_matrix_equal(square_2x2, [[1, 3], [2, 4]])

    def test_involution(self, rng):
        for shape in [(1, 1), (1, 4), (3, 2), (5, 5)]:
            a = Matrix.from_rows(rng.standard_normal(shape))
            assert equals(transpose(transpose(a)), a)


class TestMultiply:

    def test_square(self, square_2x2):
        assert_matrix_equal(multiply(square_2x2, square_2x2), [[7, 10], [15, 22]])

    def test_rectangular_shapes(self):
        a = Matrix.from_rows([[1, 4], [2, 5], [3, 6]])
        b = Matrix.from_rows([[1, -1, 1], [2, 3, 4]])
        c = multiply(a, b)
        assert c.shape == (3, 3)
        assert_matrix_equal(c, [[9, 11, 17], [12, 13, 22], [15, 15, 27]])

    def test_matches_numpy(self, rng):
        a_arr = rng.standard_normal((4, 6))
        b_arr = rng.standard_normal((6, 3))
        c = multiply(Matrix.from_rows(a_arr), Matrix.from_rows(b_arr))
        np.testing.assert_allclose(c.data, a_arr @ b_arr, rtol=1e-12, atol=1e-12)

    def test_identity_is_neutral(self, square_3x3):
        assert equals(multiply(square_3x3, Matrix.identity(3)), square_3x3)
        assert equals(multiply(Matrix.identity(3), square_3x3), square_3x3)

    def test_shape_contract(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            multiply(Matrix.create(2, 3), Matrix.create(2, 3))
        assert isinstance(exc_info.value, CalculationError)
        assert exc_info.value.left_shape == (2, 3)

    def test_mis_sized_result_rejected(self):
        with pytest.raises(InvalidDimensionsError):
            multiply(Matrix.create(2, 3), Matrix.create(3, 4), Matrix.create(2, 3))

    def test_overflow_in_final_sum(self):
        a = Matrix.from_rows([[BIG, BIG]])
        b = Matrix.from_rows([[1.0], [1.0]])
        with pytest.raises(NumericalOverflowError) as exc_info:
            multiply(a, b)
        assert exc_info.value.cell == (0, 0)

    def test_overflow_in_partial_sum_detected(self):
        # BIG + BIG overflows to inf, then + (-inf) gives NaN; only a check on
        # every partial sum catches it
        a = Matrix.from_rows([[BIG, BIG, 1.0]])
        b = Matrix.from_rows([[1.0], [1.0], [-np.inf]])
        with pytest.raises(NumericalOverflowError):
            multiply(a, b)

    def test_overflow_reports_first_cell(self):
        a = Matrix.from_rows([[1.0, 1.0], [BIG, BIG]])
        b = Matrix.from_rows([[1.0, 0.0], [1.0, 0.0]])
        with pytest.raises(NumericalOverflowError) as exc_info:
            multiply(a, b)
        assert exc_info.value.cell == (1, 0)

    def test_memory_is_quadratic(self):
        # 300x300 product: output is 0.72 MB; a per-k buffer of all partial
        # sums would need hundreds of MB
        a = Matrix.from_rows(np.ones((300, 300)))
        b = Matrix.from_rows(np.ones((300, 300)))
        tracemalloc.start()
        try:
            c = multiply(a, b)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        assert peak < 16 * 1024 * 1024
        assert c[0, 0] == 300.0
        assert c[299, 299] == 300.0

    def test_allocation_failure_is_out_of_memory(self, monkeypatch):
        def fail(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(np, 'outer', fail)
        with pytest.raises(OutOfMemoryError) as exc_info:
            multiply(Matrix.create(2, 3), Matrix.create(3, 4))
        assert exc_info.value.rows == 2
        assert exc_info.value.columns == 4
        assert exc_info.value.code == ResultCode.INCORRECT_MATRIX
