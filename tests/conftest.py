"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """[[1, 2], [3, 4]]: det -2, cofactors [[4, -3], [-2, 1]]."""
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def square_3x3():
    """[[2, 5, 7], [6, 3, 4], [5, -2, -3]]: det -1."""
    return Matrix.from_rows([
        [2.0, 5.0, 7.0],
        [6.0, 3.0, 4.0],
        [5.0, -2.0, -3.0],
    ])


@pytest.fixture
def random_square(rng):
    """Factory for well-scaled random n x n matrices."""
    def build(n):
        return Matrix.from_rows(rng.standard_normal((n, n)))
    return build
