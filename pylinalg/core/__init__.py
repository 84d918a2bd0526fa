"""
Core infrastructure for PyLinalg.

This module provides the value types and shared utilities used by the
algorithm subpackages (elimination, orthogonal).

Key components:
    vector: Vector value type
    matrix: Matrix value type
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Decimal context, tolerance tiers, scalar coercion
"""

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    MissingArgumentError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)
from pylinalg.core.vector import Vector
from pylinalg.core.matrix import Matrix, print_matrix

__all__ = [
    # Value types
    "Vector",
    "Matrix",
    "print_matrix",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "MissingArgumentError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
