"""
Vector value type.

A Vector is an ordered, fixed-length sequence of Decimal scalars. Every
arithmetic method allocates and returns a new Vector; operands are never
mutated. The only in-place mutation is indexed assignment.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError, SingularMatrixError
from pylinalg.core.precision import SCALAR_TYPES, ZERO, decimal_context, to_decimal
from pylinalg.core.validation import (
    check_non_negative,
    check_present,
    check_same_shape,
    check_type,
)


class Vector:
    """
    Column vector of Decimal scalars.

    Construction:
        Vector(3)                          # zero-filled, height 3
        Vector.from_values([1, 2, 3])      # deep copy, coerced to Decimal
        Vector.from_array(np.arange(3))    # from a 1-D NumPy array
        v.copy()

    Operators ``+``, ``-`` and ``==`` are elementwise/structural.
    ``v * w`` is the dot product; ``k * v`` and ``v * k`` scale.
    """

    __slots__ = ('_values',)

    def __init__(self, height: int):
        check_non_negative(height, 'height')
        self._values: list[Decimal] = [ZERO] * height

    # === Construction ===

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> Vector:
        """Build a Vector from any iterable of numbers."""
        check_present(values, 'values')
        vector = cls(0)
        vector._values = [
            to_decimal(value, f'values[{i}]') for i, value in enumerate(values)
        ]
        return vector

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        """Build a Vector from a 1-D array-like."""
        arr = np.asarray(array)
        if arr.ndim != 1:
            raise DimensionError(
                f"array: expected 1D array, got {arr.ndim}D with shape {arr.shape}"
            )
        return cls.from_values(arr.tolist())

    def copy(self) -> Vector:
        """Independent copy of this vector."""
        vector = Vector(0)
        vector._values = list(self._values)
        return vector

    # === Access ===

    @property
    def height(self) -> int:
        """Number of entries."""
        return len(self._values)

    @property
    def shape(self) -> tuple[int]:
        return (len(self._values),)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self._values)

    def __getitem__(self, i: int) -> Decimal:
        return self._values[i]

    def __setitem__(self, i: int, value: Any) -> None:
        self._values[i] = to_decimal(value, f'vector[{i}]')

    def to_list(self) -> list[Decimal]:
        return list(self._values)

    def to_numpy(self) -> NDArray[np.float64]:
        """Entries as a float64 array (lossy)."""
        return np.array([float(value) for value in self._values], dtype=np.float64)

    # === Arithmetic ===

    def _elementwise(self, other: Vector, operation: str) -> None:
        check_type(other, Vector, 'other')
        check_same_shape(self, other, ('self', 'other'), operation)

    @decimal_context
    def add(self, other: Vector) -> Vector:
        """Elementwise sum."""
        self._elementwise(other, 'add vectors')
        return _from_decimals([a + b for a, b in zip(self._values, other._values)])

    @decimal_context
    def subtract(self, other: Vector) -> Vector:
        """Elementwise difference ``self - other``."""
        self._elementwise(other, 'subtract vectors')
        return _from_decimals([a - b for a, b in zip(self._values, other._values)])

    def negate(self) -> Vector:
        return _from_decimals([-value for value in self._values])

    @decimal_context
    def scale(self, scalar: Any) -> Vector:
        """Multiply every entry by ``scalar``."""
        k = to_decimal(scalar, 'scalar')
        if k == 0:
            return Vector(self.height)
        return _from_decimals([k * value for value in self._values])

    @decimal_context
    def dot(self, other: Vector) -> Decimal:
        """Dot product."""
        self._elementwise(other, 'take dot product of vectors')
        total = ZERO
        for a, b in zip(self._values, other._values):
            total += a * b
        return total

    @decimal_context
    def magnitude(self) -> Decimal:
        """Euclidean norm."""
        return self.dot(self).sqrt()

    @decimal_context
    def normalize(self) -> Vector:
        """
        Unit vector in the direction of this vector.

        Raises:
            SingularMatrixError: If the vector has zero length
        """
        length = self.magnitude()
        if length == 0:
            raise SingularMatrixError(
                "cannot normalize a zero-length vector", matrix_name='vector'
            )
        return _from_decimals([value / length for value in self._values])

    def is_orthogonal_to(self, other: Vector) -> bool:
        """True if the dot product with ``other`` is exactly zero."""
        return self.dot(other) == 0

    # === Operators ===

    def __pos__(self) -> Vector:
        return self

    def __neg__(self) -> Vector:
        return self.negate()

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, SCALAR_TYPES):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        if isinstance(other, SCALAR_TYPES):
            return self.scale(other)
        return NotImplemented

    # === Equality ===

    def equals(self, other: Any) -> bool:
        """Structural equality: same height and every entry equal."""
        if self is other:
            return True
        if not isinstance(other, Vector):
            return False
        return self._values == other._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    # Mutable through indexing
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector([{', '.join(str(value) for value in self._values)}])"


def _from_decimals(values: list[Decimal]) -> Vector:
    """Wrap an already-coerced list without copying or re-validating."""
    vector = Vector(0)
    vector._values = values
    return vector
