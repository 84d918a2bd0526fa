"""
Orthogonalization algorithms.

This module provides classical Gram-Schmidt, column normalization, QR
decomposition and least squares via the normal equations. All of them are
built on Vector/Matrix arithmetic and the RREF engine.
"""

from __future__ import annotations

import warnings

from pylinalg.core.exceptions import DimensionError, SingularMatrixError
from pylinalg.core.matrix import Matrix
from pylinalg.core.precision import RANK, ZERO, decimal_context
from pylinalg.core.validation import check_non_empty, check_type
from pylinalg.core.vector import Vector
from pylinalg.elimination.solvers import rref, transpose
from pylinalg.orthogonal.solution import QRResult


@decimal_context
def gram_schmidt(matrix: Matrix) -> Matrix:
    """
    Orthogonal (not normalized) basis for the column space of ``matrix``.

    Classical Gram-Schmidt: for each column i >= 1 and each already
    orthogonalized column j = i-1 down to 0,

        result[i] -= (A[:, i] . result[j] / ||result[j]||^2) * result[j]

    Projection coefficients use the original column A[:, i] and the
    orthogonalized columns result[j].

    A column that depends linearly on earlier columns orthogonalizes to
    zero, up to the RANK tolerance tier relative to its original length.
    It is kept as a zero column, contributes no projection to later
    columns, and a RuntimeWarning is issued.

    Args:
        matrix: m x n Matrix whose columns are the input vectors

    Returns:
        New m x n Matrix with pairwise orthogonal columns

    Raises:
        MissingArgumentError: If matrix is None
    """
    check_type(matrix, Matrix, 'matrix')
    if matrix.columns == 0:
        return matrix.copy()

    original = list(matrix.iter_columns())
    result: list[Vector] = [original[0].copy()]
    squared_norms = [result[0].dot(result[0])]

    for i in range(1, len(original)):
        column = original[i].copy()
        for j in range(i - 1, -1, -1):
            if squared_norms[j] == 0:
                continue
            coefficient = original[i].dot(result[j]) / squared_norms[j]
            column = column.subtract(result[j].scale(coefficient))
        squared_norm = column.dot(column)
        # Rounding residue of a dependent column
        if squared_norm <= RANK.atol ** 2 * original[i].dot(original[i]):
            column = Vector(matrix.rows)
            squared_norm = ZERO
        result.append(column)
        squared_norms.append(squared_norm)

    dependent = [j for j, norm in enumerate(squared_norms) if norm == 0]
    if dependent and matrix.rows > 0:
        warnings.warn(
            f"Columns {dependent} are linearly dependent on earlier columns; "
            f"their orthogonalized columns are zero.",
            RuntimeWarning,
            stacklevel=3,
        )

    return Matrix.from_columns(result)


@decimal_context
def normalize(matrix: Matrix) -> Matrix:
    """
    Scale every column to unit Euclidean length.

    Raises:
        MissingArgumentError: If matrix is None
        SingularMatrixError: If a column has zero length
    """
    check_type(matrix, Matrix, 'matrix')
    columns = []
    for j, column in enumerate(matrix.iter_columns()):
        length = column.magnitude()
        if length == 0:
            raise SingularMatrixError(
                f"Cannot normalize column {j}: it has zero length.",
                matrix_name='matrix',
            )
        columns.append(column.scale(1 / length))
    if not columns:
        return matrix.copy()
    return Matrix.from_columns(columns)


@decimal_context
def qr_decomposition(matrix: Matrix) -> QRResult:
    """
    QR decomposition by Gram-Schmidt.

    Computes:
        Q = normalize(gram_schmidt(A))
        R = transpose(Q) @ A

    Q has orthonormal columns and R is upper triangular, so that
    ``Q @ R`` reproduces A. Square roots are rounded to the decimal
    precision, so compare results with the QR tolerance tier.

    Args:
        matrix: m x n Matrix with linearly independent columns

    Returns:
        QRResult(Q, R)

    Raises:
        MissingArgumentError: If matrix is None
        ValidationError: If matrix is empty
        SingularMatrixError: If the columns are linearly dependent
    """
    check_type(matrix, Matrix, 'matrix')
    check_non_empty(matrix, 'matrix')

    orthogonal = gram_schmidt(matrix)
    independent = sum(
        1 for column in orthogonal.iter_columns() if column.dot(column) != 0
    )
    if independent < matrix.columns:
        raise SingularMatrixError(
            f"QR decomposition requires linearly independent columns: "
            f"rank {independent}, expected {matrix.columns}",
            matrix_name='matrix',
            rank=independent,
            expected_rank=matrix.columns,
        )

    Q = normalize(orthogonal)
    R = transpose(Q).multiply(matrix)
    return QRResult(Q=Q, R=R)


@decimal_context
def least_squares(A: Matrix, b: Vector) -> Vector:
    """
    Least squares solution of ``A x = b`` via the normal equations.

    Solves (A'A) x = A'b by row-reducing the augmented matrix
    ``[A'A | A'b]`` and reading x from its last column. Each nonzero row of
    the reduced matrix assigns its pivot variable.

    When A'A is singular the minimizer is not unique. The returned x is
    the solution with every free variable set to 0, and a RuntimeWarning
    is issued. Singularity is judged with the RANK tolerance tier, so
    rounding residue does not hide a dependent column.

    Args:
        A: m x n Matrix
        b: Vector of height m

    Returns:
        Vector x of height n

    Raises:
        MissingArgumentError: If A or b is None
        ValidationError: If A is empty
        DimensionError: If A.rows != b.height
    """
    check_type(A, Matrix, 'A')
    check_type(b, Vector, 'b')
    if A.rows != b.height:
        raise DimensionError(
            f"A has {A.rows} rows but b has height {b.height}"
        )
    check_non_empty(A, 'A')

    At = transpose(A)
    AtA = At.multiply(A)
    Atb = At.multiply(b)
    reduced = rref(AtA.augment(Atb), tol=RANK)

    n = A.columns
    x = Vector(n)
    n_pivots = 0
    for r in range(reduced.rows):
        row = reduced.row(r)
        lead = next((k for k in range(n) if row[k] != 0), None)
        if lead is None:
            continue
        x[lead] = row[n]
        n_pivots += 1

    if n_pivots < n:
        warnings.warn(
            f"Normal equations are rank-deficient (rank={n_pivots}, expected={n}); "
            f"free variables were set to 0.",
            RuntimeWarning,
            stacklevel=3,
        )

    return x
