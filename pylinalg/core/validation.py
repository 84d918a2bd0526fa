"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Actual values reported next to expected values
"""

from __future__ import annotations

from typing import Any

from pylinalg.core.exceptions import (
    DimensionError,
    MissingArgumentError,
    ValidationError,
)


def check_present(value: Any, name: str) -> None:
    """
    Verify a required argument was supplied.

    Args:
        value: Argument to check
        name: Parameter name for error messages

    Raises:
        MissingArgumentError: If value is None
    """
    if value is None:
        raise MissingArgumentError(f"{name}: required argument is None", name=name)


def check_type(value: Any, expected: type, name: str) -> None:
    """
    Verify an argument is present and of the expected type.

    Raises:
        MissingArgumentError: If value is None
        ValidationError: If value is not an instance of expected
    """
    check_present(value, name)
    if not isinstance(value, expected):
        raise ValidationError(
            f"{name}: expected {expected.__name__}, got {type(value).__name__}"
        )


def check_same_shape(a: Any, b: Any, names: tuple[str, str], operation: str) -> None:
    """
    Verify two matrices or vectors have identical shape.

    Args:
        a, b: Objects exposing ``shape``
        names: Parameter names for error messages
        operation: Operation name for error messages

    Raises:
        DimensionError: If shapes differ
    """
    if a.shape != b.shape:
        raise DimensionError(
            f"cannot {operation}: {names[0]} has shape {a.shape}, "
            f"{names[1]} has shape {b.shape}"
        )


def check_square(matrix: Any, name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != columns
    """
    if matrix.rows != matrix.columns:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {matrix.shape}"
        )


def check_non_empty(matrix: Any, name: str) -> None:
    """
    Verify a matrix has at least one row and one column.

    Raises:
        ValidationError: If either dimension is zero
    """
    if matrix.rows == 0 or matrix.columns == 0:
        raise ValidationError(
            f"{name}: matrix cannot be empty, got shape {matrix.shape}"
        )


def check_positive(value: int, name: str) -> None:
    """
    Verify an integer parameter is at least 1.

    Raises:
        ValidationError: If value < 1
    """
    if value < 1:
        raise ValidationError(f"{name}: must be at least 1, got {value}")


def check_non_negative(value: int, name: str) -> None:
    """
    Verify an integer parameter is at least 0.

    Raises:
        ValidationError: If value < 0
    """
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")


def check_index(index: int, size: int, name: str) -> None:
    """
    Verify ``0 <= index < size``.

    Raises:
        ValidationError: If index is out of bounds
    """
    if not 0 <= index < size:
        raise ValidationError(
            f"{name}: index {index} out of bounds for size {size}"
        )
