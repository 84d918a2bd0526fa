"""
PyLinalg: dense linear algebra over exact decimals.

Value-typed matrices and vectors of ``decimal.Decimal`` scalars, plus the
classical algorithms built on row reduction.

Submodules:
    core: Vector and Matrix value types, exceptions, precision settings
    elimination: RREF, determinant, inverse, rank, transpose, identity
    orthogonal: Gram-Schmidt, QR decomposition, least squares
"""

__version__ = "0.1.0"

from pylinalg.core import (
    Matrix,
    Vector,
    print_matrix,
    PyLinalgError,
    ValidationError,
    MissingArgumentError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)
from pylinalg.elimination import (
    rref,
    determinant,
    submatrix,
    identity,
    transpose,
    inverse,
    rank,
    is_linearly_independent,
)
from pylinalg.orthogonal import (
    QRResult,
    gram_schmidt,
    normalize,
    qr_decomposition,
    least_squares,
)

__all__ = [
    "__version__",
    # Value types
    "Matrix",
    "Vector",
    "print_matrix",
    # Elimination
    "rref",
    "determinant",
    "submatrix",
    "identity",
    "transpose",
    "inverse",
    "rank",
    "is_linearly_independent",
    # Orthogonalization
    "QRResult",
    "gram_schmidt",
    "normalize",
    "qr_decomposition",
    "least_squares",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "MissingArgumentError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
