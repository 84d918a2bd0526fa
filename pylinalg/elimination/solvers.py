"""
Row-reduction algorithms.

This module provides the reduced row-echelon form (RREF) engine and the
algorithms derived from it or from cofactor expansion: determinant,
submatrix, rank, inverse, identity, transpose and linear independence.

Every function validates its arguments at the boundary, works on a
private copy, and returns a newly allocated result. The input matrix is
never mutated.
"""

from __future__ import annotations

from decimal import Decimal

from pylinalg.core.matrix import Matrix
from pylinalg.core.precision import (
    EXACT,
    ONE,
    RANK,
    ZERO,
    ToleranceTier,
    decimal_context,
)
from pylinalg.core.validation import (
    check_index,
    check_non_empty,
    check_positive,
    check_square,
    check_type,
)
from pylinalg.elimination._common import (
    Grid,
    divide_row,
    eliminate,
    find_pivot_row,
    flush_residue,
    from_grid,
    remove_row_and_column,
    row_magnitude,
    swap_rows,
    to_grid,
)


@decimal_context
def rref(matrix: Matrix, tol: ToleranceTier = EXACT) -> Matrix:
    """
    Reduced row-echelon form by Gauss-Jordan elimination.

    The pivot for each row is the first nonzero entry found scanning down
    the current lead column; columns with no candidate pivot are skipped.
    The pivot row is divided by its pivot (making it exactly 1) and the
    lead column is zeroed in every other row. Entries produced by
    elimination that are exactly integral are stored as plain integers,
    so ``1.000000`` comes out as ``1``.

    With the default EXACT tier only entries that are exactly zero are
    treated as zero. Division rounds to DECIMAL_PRECISION digits, so a row
    that cancels in exact arithmetic can keep residue such as ``2E-26``,
    which would then be chosen as a pivot. Passing ``tol=RANK`` flushes an
    eliminated entry to zero when ``|value| <= tol.atol * scale``, where
    scale is the largest magnitude that row has held during elimination.

    Args:
        matrix: m x n Matrix
        tol: Tolerance tier deciding when an eliminated entry is zero

    Returns:
        New m x n Matrix in reduced row-echelon form

    Raises:
        MissingArgumentError: If matrix is None
    """
    check_type(matrix, Matrix, 'matrix')
    grid = to_grid(matrix)
    _reduce(grid, matrix.columns, tol.atol)
    return from_grid(grid, matrix.columns)


def _reduce(grid: Grid, n_columns: int, rtol: Decimal) -> None:
    """Row-reduce a working grid in place."""
    n_rows = len(grid)
    scales = [row_magnitude(row) for row in grid]
    lead = 0
    for r in range(n_rows):
        if lead >= n_columns:
            return

        pivot = find_pivot_row(grid, r, lead)
        while pivot is None:
            lead += 1
            if lead >= n_columns:
                return
            pivot = find_pivot_row(grid, r, lead)

        swap_rows(grid, pivot, r)
        scales[pivot], scales[r] = scales[r], scales[pivot]

        divisor = grid[r][lead]
        if divisor != 0:
            divide_row(grid, r, divisor)
            scales[r] = scales[r] / abs(divisor)

        for j in range(n_rows):
            if j == r:
                continue
            multiplier = eliminate(grid, j, r, lead)
            if rtol and multiplier != 0:
                scales[j] = max(scales[j], abs(multiplier) * scales[r])
                flush_residue(grid, j, rtol * scales[j])

        lead += 1


@decimal_context
def determinant(matrix: Matrix) -> Decimal:
    """
    Determinant by recursive cofactor (Laplace) expansion.

    Expansion runs along the second row (index 1):

        det(A) = sum_j (-1)^(1+j) * A[1, j] * det(A without row 1, column j)

    A 1 x 1 matrix returns its sole entry. Recursion depth is bounded by n.

    Args:
        matrix: n x n Matrix, n >= 1

    Returns:
        Decimal determinant

    Raises:
        MissingArgumentError: If matrix is None
        ValidationError: If matrix is empty
        DimensionError: If matrix is not square
    """
    check_type(matrix, Matrix, 'matrix')
    check_non_empty(matrix, 'matrix')
    check_square(matrix, 'matrix')
    return _cofactor_expansion(to_grid(matrix))


def _cofactor_expansion(grid: Grid) -> Decimal:
    n = len(grid)
    if n == 1:
        return grid[0][0]

    det = ZERO
    for j in range(n):
        entry = grid[1][j]
        # Zero entries contribute nothing; skip their subtree
        if entry == 0:
            continue
        sign = ONE if (1 + j) % 2 == 0 else -ONE
        det += sign * entry * _cofactor_expansion(remove_row_and_column(grid, 1, j))
    return det


def submatrix(parent: Matrix, row: int, column: int) -> Matrix:
    """
    Copy of ``parent`` without one row and one column.

    Args:
        parent: m x n Matrix
        row: Row to exclude
        column: Column to exclude

    Returns:
        New (m-1) x (n-1) Matrix; a 1 x 1 parent gives a 0 x 0 matrix

    Raises:
        MissingArgumentError: If parent is None
        ValidationError: If parent is empty or an index is out of bounds
    """
    check_type(parent, Matrix, 'parent')
    check_non_empty(parent, 'parent')
    check_index(row, parent.rows, 'row')
    check_index(column, parent.columns, 'column')
    grid = remove_row_and_column(to_grid(parent), row, column)
    return from_grid(grid, parent.columns - 1)


def identity(n: int) -> Matrix:
    """
    n x n identity matrix.

    Raises:
        ValidationError: If n < 1
    """
    check_positive(n, 'n')
    result = Matrix(n, n)
    for i in range(n):
        result[i, i] = ONE
    return result


def transpose(matrix: Matrix) -> Matrix:
    """
    Transpose: ``result[i, j] == matrix[j, i]``.

    Raises:
        MissingArgumentError: If matrix is None
        ValidationError: If matrix has a zero dimension
    """
    check_type(matrix, Matrix, 'matrix')
    check_non_empty(matrix, 'matrix')
    return Matrix.from_columns(matrix.row(i) for i in range(matrix.rows))


@decimal_context
def inverse(matrix: Matrix) -> Matrix | None:
    """
    Inverse by row-reducing the augmented matrix ``[A | I]``.

    The determinant is checked first. A singular matrix has no inverse,
    which is an expected outcome rather than an error.

    Args:
        matrix: n x n Matrix

    Returns:
        New n x n inverse, or None if the determinant is exactly zero

    Raises:
        MissingArgumentError: If matrix is None
        ValidationError: If matrix is empty
        DimensionError: If matrix is not square
    """
    check_type(matrix, Matrix, 'matrix')
    check_non_empty(matrix, 'matrix')
    check_square(matrix, 'matrix')

    if determinant(matrix) == 0:
        return None

    n = matrix.rows
    reduced = rref(matrix.augment(identity(n)))
    return reduced.block(0, n, n, 2 * n)


def rank(matrix: Matrix) -> int:
    """
    Number of nonzero rows in the reduced row-echelon form.

    The reduction runs with the RANK tolerance tier, so rounding residue
    left by cancellation is not counted as an independent row.

    Raises:
        MissingArgumentError: If matrix is None
    """
    check_type(matrix, Matrix, 'matrix')
    grid = to_grid(rref(matrix, tol=RANK))
    return sum(1 for row in grid if any(value != 0 for value in row))


def is_linearly_independent(matrix: Matrix) -> bool:
    """
    True if the columns of ``matrix`` are linearly independent.

    More columns than rows is always dependent.

    Raises:
        MissingArgumentError: If matrix is None
    """
    check_type(matrix, Matrix, 'matrix')
    if matrix.columns > matrix.rows:
        return False
    return rank(matrix) == matrix.columns
