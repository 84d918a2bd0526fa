"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_4x4():
    """Invertible 4 x 4 integer matrix with determinant -376."""
    return Matrix.from_rows([
        [1, 3, 5, 9],
        [1, 3, 1, 7],
        [4, 3, 9, 7],
        [5, 2, 0, 9],
    ])


@pytest.fixture
def singular_3x3():
    """Rank-2 matrix: third column = 2 * second - first."""
    return Matrix.from_rows([[1, 4, 7], [2, 5, 8], [3, 6, 9]])


@pytest.fixture
def random_integer_matrix(rng):
    """Factory for small integer matrices (exact in the decimal domain)."""
    def make(rows, columns, low=-9, high=10):
        return Matrix.from_array(rng.integers(low, high, size=(rows, columns)))
    return make


@pytest.fixture
def regression_data():
    """Intercept + slope design with an exact least squares answer [5, -3]."""
    A = Matrix.from_rows([[1, 0], [1, 1], [1, 2]])
    b = Vector.from_values([6, 0, 0])
    return A, b


@pytest.fixture
def low_rank_matrix(rng):
    """Factory for integer matrices of rank at most ``rank`` (base @ coefficients)."""
    def make(rows, columns, rank, low=-9, high=10):
        base = rng.integers(low, high, size=(rows, rank))
        coefficients = rng.integers(low, high, size=(rank, columns))
        return Matrix.from_array(base @ coefficients)
    return make


@pytest.fixture
def residue_rank_2():
    """Rank-2 3 x 3 integer matrices whose elimination leaves rounding residue."""
    return [
        Matrix.from_rows([[35, -51, 23], [-56, 75, -17], [63, -66, -36]]),
        Matrix.from_rows([[12, 6, -18], [33, 84, -72], [9, 27, -21]]),
    ]
