"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - A singular matrix passed to inverse() is an expected outcome and is
      reported as None, never as an exception
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class MissingArgumentError(ValidationError):
    """
    A required Matrix or Vector argument is absent (None).

    Raised before any computation begins.

    Attributes:
        name: Name of the missing parameter
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class DimensionError(ValidationError):
    """
    Matrix or vector dimensions are incorrect or inconsistent.

    Raised when shapes don't match for elementwise operations, inner
    dimensions disagree for multiplication, or a square matrix is required.
    """
    pass


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix (or vector) is degenerate for the requested operation.

    Raised when an operation cannot produce any result, such as scaling a
    zero-length column to unit length or factoring a matrix whose columns
    are linearly dependent.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Rank, if computed
        expected_rank: Rank the operation required
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
