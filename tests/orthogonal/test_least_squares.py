"""
Tests for least_squares().

Validates the normal-equations solution on exact cases, agreement with
NumPy's lstsq, the rank-deficient diagnostic and argument validation.
"""

import numpy as np
import pytest

from pylinalg import Matrix, Vector, least_squares
from pylinalg.core.exceptions import (
    DimensionError,
    MissingArgumentError,
    ValidationError,
)


class TestLeastSquaresBasic:

    def test_line_fit(self, regression_data):
        A, b = regression_data
        assert least_squares(A, b) == Vector.from_values([5, -3])

    def test_consistent_square_system(self):
        # x + y = 3, x - y = 1
        A = Matrix.from_rows([[1, 1], [1, -1]])
        b = Vector.from_values([3, 1])
        assert least_squares(A, b) == Vector.from_values([2, 1])

    def test_exact_fit_recovers_coefficients(self):
        A = Matrix.from_rows([[1, 1], [1, 2], [1, 3], [1, 4]])
        b = Vector.from_values([3, 5, 7, 9])
        assert least_squares(A, b) == Vector.from_values([1, 2])

    def test_matches_numpy(self, random_integer_matrix, rng):
        A = random_integer_matrix(8, 3)
        b_arr = rng.integers(-20, 20, size=8)
        x = least_squares(A, Vector.from_array(b_arr))
        expected, *_ = np.linalg.lstsq(A.to_numpy(), b_arr.astype(np.float64), rcond=None)
        np.testing.assert_allclose(x.to_numpy(), expected, rtol=1e-9, atol=1e-12)

    def test_residual_orthogonal_to_columns(self, regression_data):
        A, b = regression_data
        residual = b - A * least_squares(A, b)
        for column in A.iter_columns():
            assert column.is_orthogonal_to(residual)

    def test_inputs_not_mutated(self, regression_data):
        A, b = regression_data
        A_before, b_before = A.copy(), b.copy()
        least_squares(A, b)
        assert A == A_before
        assert b == b_before


class TestLeastSquaresRankDeficient:

    def test_warns_and_sets_free_variable_to_zero(self):
        A = Matrix.from_rows([[1, 2], [2, 4], [3, 6]])
        b = Vector.from_values([1, 2, 3])
        with pytest.warns(RuntimeWarning, match="rank-deficient"):
            x = least_squares(A, b)
        assert x == Vector.from_values([1, 0])

    def test_full_rank_does_not_warn(self, regression_data, recwarn):
        A, b = regression_data
        least_squares(A, b)
        assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]

    def test_rounding_residue_still_warns(self, residue_rank_2):
        for A in residue_rank_2:
            with pytest.warns(RuntimeWarning, match=r"rank=2, expected=3"):
                least_squares(A, Vector.from_values([1, 2, 3]))

    def test_random_low_rank_solves_normal_equations(self, low_rank_matrix, rng):
        for _ in range(20):
            A = low_rank_matrix(6, 3, 2)
            b = Vector.from_array(rng.integers(-20, 20, size=6))
            with pytest.warns(RuntimeWarning, match="rank-deficient"):
                x = least_squares(A, b)
            A_np = A.to_numpy()
            np.testing.assert_allclose(
                A_np.T @ A_np @ x.to_numpy(),
                A_np.T @ b.to_numpy(),
                rtol=1e-9,
                atol=1e-6,
            )


class TestLeastSquaresValidation:

    def test_height_mismatch(self):
        A = Matrix.from_rows([[1, 0], [1, 1], [1, 2]])
        with pytest.raises(DimensionError, match="3 rows.*height 2"):
            least_squares(A, Vector.from_values([1, 2]))

    def test_none_matrix(self):
        with pytest.raises(MissingArgumentError):
            least_squares(None, Vector(2))

    def test_none_vector(self):
        with pytest.raises(MissingArgumentError):
            least_squares(Matrix(2, 2), None)

    def test_empty_matrix(self):
        with pytest.raises(ValidationError):
            least_squares(Matrix(0, 2), Vector(0))
