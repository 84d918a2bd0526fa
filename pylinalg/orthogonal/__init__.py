"""
Orthogonalization: Gram-Schmidt, QR decomposition and least squares.

Public API:
    gram_schmidt(A) -> Matrix
    normalize(A) -> Matrix
    qr_decomposition(A) -> QRResult
    least_squares(A, b) -> Vector

Example:
    >>> from pylinalg import Matrix, Vector
    >>> from pylinalg.orthogonal import least_squares
    >>> A = Matrix.from_rows([[1, 0], [1, 1], [1, 2]])
    >>> least_squares(A, Vector.from_values([6, 0, 0]))
    Vector([5, -3])
"""

from pylinalg.orthogonal.solution import QRResult
from pylinalg.orthogonal.solvers import (
    gram_schmidt,
    normalize,
    qr_decomposition,
    least_squares,
)

__all__ = [
    "gram_schmidt",
    "normalize",
    "qr_decomposition",
    "least_squares",
    "QRResult",
]
