"""
Tests for the RREF engine.

Validates the reduced row-echelon form on known cases, its structural
properties on random integer matrices, idempotence, integral cleanup of
elimination results, flushing of rounding residue under the RANK tier
and that the input is never mutated.
"""

from decimal import Decimal

import numpy as np
import pytest

from pylinalg import Matrix, Vector, rref
from pylinalg.core.exceptions import MissingArgumentError
from pylinalg.core.precision import RANK


def _assert_reduced_row_echelon(m: Matrix) -> None:
    """Leading 1s move strictly right and are alone in their columns."""
    last_lead = -1
    seen_zero_row = False
    for i in range(m.rows):
        row = m.row(i)
        lead = next((j for j in range(m.columns) if row[j] != 0), None)
        if lead is None:
            seen_zero_row = True
            continue
        assert not seen_zero_row, "nonzero row below a zero row"
        assert lead > last_lead
        assert row[lead] == 1
        for k in range(m.rows):
            if k != i:
                assert m[k, lead] == 0
        last_lead = lead


# ═══════════════════════════════════════════════════════════════════════
# Known results
# ═══════════════════════════════════════════════════════════════════════


class TestRREFKnownCases:

    def test_2x2_identity(self):
        a = Matrix.from_rows([[2, 1], [1, 2]])
        assert rref(a) == Matrix.from_rows([[1, 0], [0, 1]])

    def test_requires_row_swap(self):
        a = Matrix.from_rows([[0, 1], [1, 0]])
        assert rref(a) == Matrix.from_rows([[1, 0], [0, 1]])

    def test_skips_zero_column(self):
        a = Matrix.from_rows([[0, 2, 4], [0, 1, 3]])
        assert rref(a) == Matrix.from_rows([[0, 1, 0], [0, 0, 1]])

    def test_rank_deficient(self):
        a = Matrix.from_rows([[1, 2, 3], [2, 4, 6], [1, 1, 1]])
        assert rref(a) == Matrix.from_rows([[1, 0, -1], [0, 1, 2], [0, 0, 0]])

    def test_more_rows_than_columns(self):
        a = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
        assert rref(a) == Matrix.from_rows([[1, 0], [0, 1], [0, 0]])

    def test_wide_augmented_system(self):
        # x + y = 3, x - y = 1
        a = Matrix.from_rows([[1, 1, 3], [1, -1, 1]])
        assert rref(a) == Matrix.from_rows([[1, 0, 2], [0, 1, 1]])

    def test_fractional_entries(self):
        a = Matrix.from_rows([[4, 7, 1, 0], [2, 6, 0, 1]])
        expected = Matrix.from_rows([
            [1, 0, "0.6", "-0.7"],
            [0, 1, "-0.2", "0.4"],
        ])
        assert rref(a) == expected

    def test_zero_matrix(self):
        assert rref(Matrix(2, 3)) == Matrix(2, 3)

    def test_empty_matrices(self):
        assert rref(Matrix(0, 3)) == Matrix(0, 3)
        assert rref(Matrix(3, 0)) == Matrix(3, 0)


# ═══════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════


class TestRREFProperties:

    @pytest.mark.parametrize("shape", [(3, 3), (3, 5), (5, 3), (4, 4)])
    def test_is_reduced_row_echelon(self, random_integer_matrix, shape):
        _assert_reduced_row_echelon(rref(random_integer_matrix(*shape)))

    @pytest.mark.parametrize("shape", [(3, 3), (2, 4), (4, 2)])
    def test_idempotent(self, random_integer_matrix, shape):
        reduced = rref(random_integer_matrix(*shape))
        assert rref(reduced) == reduced

    def test_input_not_mutated(self):
        a = Matrix.from_rows([[2, 1], [1, 2]])
        before = a.copy()
        rref(a)
        assert a == before

    def test_result_is_new_object(self):
        a = Matrix.from_rows([[1, 0], [0, 1]])
        result = rref(a)
        assert result == a
        assert result is not a

    def test_integral_results_are_plain_integers(self):
        a = Matrix.from_rows([["0.5", "1.5"], ["1.5", "0.5"]])
        result = rref(a)
        for i in range(result.rows):
            for j in range(result.columns):
                assert "." not in str(result[i, j])

    def test_entries_are_decimal(self):
        result = rref(Matrix.from_rows([[3, 1], [1, 3]]))
        assert all(isinstance(v, Decimal) for row in result.to_rows() for v in row)

    def test_nonsingular_reduces_to_identity_like_numpy(self, random_integer_matrix):
        a = random_integer_matrix(4, 4)
        if abs(np.linalg.det(a.to_numpy())) < 1e-9:
            pytest.skip("random matrix is singular")
        np.testing.assert_allclose(rref(a).to_numpy(), np.eye(4), atol=1e-20)


class TestRREFRankTolerance:

    def test_residue_row_flushed_to_zero(self, residue_rank_2):
        for a in residue_rank_2:
            reduced = rref(a, tol=RANK)
            _assert_reduced_row_echelon(reduced)
            assert reduced.row(2) == Vector(3)

    def test_exact_reduction_unchanged(self, singular_3x3):
        assert rref(singular_3x3, tol=RANK) == rref(singular_3x3)

    @pytest.mark.parametrize("shape, r", [((4, 5), 2), ((5, 3), 1), ((3, 3), 2)])
    def test_nonzero_rows_match_numpy_rank(self, low_rank_matrix, shape, r):
        for _ in range(20):
            a = low_rank_matrix(*shape, r)
            reduced = rref(a, tol=RANK)
            _assert_reduced_row_echelon(reduced)
            nonzero = sum(1 for row in reduced.to_rows() if any(v != 0 for v in row))
            assert nonzero == np.linalg.matrix_rank(a.to_numpy())


class TestRREFErrors:

    def test_none(self):
        with pytest.raises(MissingArgumentError):
            rref(None)
