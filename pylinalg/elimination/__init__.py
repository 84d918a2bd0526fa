"""
Row reduction and the algorithms derived from it.

Public API:
    rref(A) -> Matrix
    determinant(A) -> Decimal
    submatrix(A, row, column) -> Matrix
    identity(n) -> Matrix
    transpose(A) -> Matrix
    inverse(A) -> Matrix | None
    rank(A) -> int
    is_linearly_independent(A) -> bool

Example:
    >>> from pylinalg import Matrix
    >>> from pylinalg.elimination import inverse
    >>> A_inv = inverse(Matrix.from_rows([[4, 7], [2, 6]]))
    >>> A_inv == Matrix.from_rows([[0.6, -0.7], [-0.2, 0.4]])
    True
"""

from pylinalg.elimination.solvers import (
    rref,
    determinant,
    submatrix,
    identity,
    transpose,
    inverse,
    rank,
    is_linearly_independent,
)

__all__ = [
    "rref",
    "determinant",
    "submatrix",
    "identity",
    "transpose",
    "inverse",
    "rank",
    "is_linearly_independent",
]
