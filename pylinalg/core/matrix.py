"""
Matrix value type.

A Matrix stores an ordered list of equal-height column Vectors
(column-major) and is indexed row-major: ``m[i, j]`` is row ``i`` of
column ``j``. Like Vector, every arithmetic method returns a newly
allocated Matrix and never mutates its operands.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Any, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.precision import (
    DECIMAL_CONTEXT,
    DECIMAL_PRECISION,
    SCALAR_TYPES,
    ZERO,
    decimal_context,
    to_decimal,
)
from pylinalg.core.validation import (
    check_non_negative,
    check_present,
    check_same_shape,
    check_type,
)
from pylinalg.core.vector import Vector, _from_decimals


class Matrix:
    """
    Dense matrix of Decimal scalars.

    Construction:
        Matrix(2, 3)                                # zero-filled 2 x 3
        Matrix.from_rows([[1, 2, 3], [4, 5, 6]])    # row-major literal
        Matrix.from_columns([v1, v2])               # column vectors
        Matrix.from_array(np.eye(3))                # 2-D NumPy array
        m.copy()                                    # deep copy

    Operators: ``a + b``, ``a - b``, ``-a``, ``a * b`` (matrix product, or
    matrix-vector product when b is a Vector), ``k * a`` (scale), and
    structural ``a == b``.
    """

    __slots__ = ('_columns', '_rows')

    def __init__(self, rows: int, columns: int):
        check_non_negative(rows, 'rows')
        check_non_negative(columns, 'columns')
        self._rows = rows
        self._columns: list[Vector] = [Vector(rows) for _ in range(columns)]

    # === Construction ===

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> Matrix:
        """
        Build a Matrix from a row-major 2-D literal.

        Raises:
            MissingArgumentError: If rows is None
            DimensionError: If rows have different lengths
        """
        check_present(rows, 'rows')
        rows = [list(row) for row in rows]
        n_columns = len(rows[0]) if rows else 0
        for i, row in enumerate(rows):
            if len(row) != n_columns:
                raise DimensionError(
                    f"rows: row {i} has {len(row)} entries, expected {n_columns}"
                )

        matrix = cls(len(rows), 0)
        matrix._columns = [
            Vector.from_values(row[j] for row in rows) for j in range(n_columns)
        ]
        return matrix

    @classmethod
    def from_columns(cls, columns: Iterable[Vector]) -> Matrix:
        """
        Build a Matrix whose columns are copies of the given vectors.

        Raises:
            MissingArgumentError: If columns (or any column) is None
            DimensionError: If columns have different heights
        """
        check_present(columns, 'columns')
        copies = []
        for j, column in enumerate(columns):
            check_type(column, Vector, f'columns[{j}]')
            copies.append(column.copy())

        height = copies[0].height if copies else 0
        for j, column in enumerate(copies):
            if column.height != height:
                raise DimensionError(
                    f"columns: column {j} has height {column.height}, expected {height}"
                )

        matrix = cls(height, 0)
        matrix._columns = copies
        return matrix

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Build a Matrix from a 2-D array-like."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
            )
        matrix = cls.from_rows(arr.tolist())
        # tolist() loses the row count of an (n, 0) array
        matrix._rows = arr.shape[0]
        return matrix

    def copy(self) -> Matrix:
        """Deep copy: every column is duplicated independently."""
        matrix = Matrix(self._rows, 0)
        matrix._columns = [column.copy() for column in self._columns]
        return matrix

    # === Shape ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return len(self._columns)

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, len(self._columns))

    @property
    def is_square(self) -> bool:
        return self._rows == len(self._columns)

    # === Access ===

    def __getitem__(self, key: tuple[int, int]) -> Decimal:
        i, j = key
        return self._columns[j][i]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = key
        self._columns[j][i] = value

    def row(self, i: int) -> Vector:
        """Copy of row ``i`` as a Vector."""
        return _from_decimals([column[i] for column in self._columns])

    def column(self, j: int) -> Vector:
        """Copy of column ``j``."""
        return self._columns[j].copy()

    def iter_columns(self) -> Iterator[Vector]:
        """Iterate over copies of the columns, left to right."""
        for column in self._columns:
            yield column.copy()

    def to_rows(self) -> list[list[Decimal]]:
        return [
            [column[i] for column in self._columns] for i in range(self._rows)
        ]

    def to_numpy(self) -> NDArray[np.float64]:
        """Entries as a float64 array (lossy)."""
        return np.array(
            [[float(value) for value in row] for row in self.to_rows()],
            dtype=np.float64,
        ).reshape(self.shape)

    # === Arithmetic ===

    @decimal_context
    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum."""
        check_type(other, Matrix, 'other')
        check_same_shape(self, other, ('self', 'other'), 'add matrices')
        return _from_column_list(
            self._rows,
            [a.add(b) for a, b in zip(self._columns, other._columns)],
        )

    @decimal_context
    def subtract(self, other: Matrix) -> Matrix:
        """Elementwise difference ``self - other``."""
        check_type(other, Matrix, 'other')
        check_same_shape(self, other, ('self', 'other'), 'subtract matrices')
        return _from_column_list(
            self._rows,
            [a.subtract(b) for a, b in zip(self._columns, other._columns)],
        )

    def negate(self) -> Matrix:
        return _from_column_list(
            self._rows, [column.negate() for column in self._columns]
        )

    @decimal_context
    def scale(self, scalar: Any) -> Matrix:
        """Multiply every entry by ``scalar``."""
        k = to_decimal(scalar, 'scalar')
        return _from_column_list(
            self._rows, [column.scale(k) for column in self._columns]
        )

    @decimal_context
    def multiply(self, other: Matrix | Vector) -> Matrix | Vector:
        """
        Matrix product ``self @ other``.

        Args:
            other: Matrix with ``other.rows == self.columns``, or Vector with
                ``other.height == self.columns``

        Returns:
            Matrix of shape (self.rows, other.columns), or a Vector of
            height self.rows when other is a Vector

        Raises:
            MissingArgumentError: If other is None
            DimensionError: If inner dimensions disagree
        """
        check_present(other, 'other')
        if isinstance(other, Vector):
            if other.height != self.columns:
                raise DimensionError(
                    f"cannot multiply matrix of shape {self.shape} "
                    f"by vector of height {other.height}"
                )
            return self._apply(other)

        check_type(other, Matrix, 'other')
        if self.columns != other.rows:
            raise DimensionError(
                f"cannot multiply matrices of shape {self.shape} and {other.shape}: "
                f"inner dimensions {self.columns} and {other.rows} differ"
            )
        return _from_column_list(
            self._rows, [self._apply(column) for column in other._columns]
        )

    def _apply(self, vector: Vector) -> Vector:
        # Linear combination of columns weighted by the vector entries
        result = [ZERO] * self._rows
        for column, weight in zip(self._columns, vector):
            if weight == 0:
                continue
            for i in range(self._rows):
                result[i] += column[i] * weight
        return _from_decimals(result)

    def augment(self, other: Matrix | Vector) -> Matrix:
        """
        Horizontal concatenation ``[self | other]``.

        A Vector is appended as one extra column.

        Raises:
            DimensionError: If row counts differ
        """
        check_present(other, 'other')
        if isinstance(other, Vector):
            extra, height = [other], other.height
        else:
            check_type(other, Matrix, 'other')
            extra, height = other._columns, other.rows
        if height != self._rows:
            raise DimensionError(
                f"cannot augment matrix with {self._rows} rows by {height} rows"
            )
        return _from_column_list(
            self._rows,
            [column.copy() for column in self._columns]
            + [column.copy() for column in extra],
        )

    def block(self, row_start: int, row_stop: int, col_start: int, col_stop: int) -> Matrix:
        """Copy of rows ``row_start:row_stop`` and columns ``col_start:col_stop``."""
        if not (0 <= row_start <= row_stop <= self._rows
                and 0 <= col_start <= col_stop <= self.columns):
            raise ValidationError(
                f"block [{row_start}:{row_stop}, {col_start}:{col_stop}] "
                f"out of bounds for shape {self.shape}"
            )
        return _from_column_list(
            row_stop - row_start,
            [
                _from_decimals(list(column)[row_start:row_stop])
                for column in self._columns[col_start:col_stop]
            ],
        )

    # === Operators ===

    def __pos__(self) -> Matrix:
        return self

    def __neg__(self) -> Matrix:
        return self.negate()

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, (Matrix, Vector)):
            return self.multiply(other)
        if isinstance(other, SCALAR_TYPES):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, SCALAR_TYPES):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.multiply(other)

    # === Equality ===

    def equals(self, other: Any) -> bool:
        """Structural equality: same shape and every entry equal."""
        if self is other:
            return True
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        return all(a.equals(b) for a, b in zip(self._columns, other._columns))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # === Display ===

    @decimal_context
    def format(self, places: int = 2) -> str:
        """
        Render entries rounded to ``places`` decimal places.

        Entries are followed by a tab and rows by a newline.
        """
        check_non_negative(places, 'places')
        lines = []
        for row in self.to_rows():
            cells = []
            for value in row:
                # Integer digits beyond DECIMAL_PRECISION - places need more room
                with localcontext(DECIMAL_CONTEXT) as ctx:
                    ctx.prec = max(DECIMAL_PRECISION, value.adjusted() + places + 2)
                    rounded = round(value, places)
                # no "-0.00"
                if rounded == 0:
                    rounded = abs(rounded)
                cells.append(f"{rounded}\t")
            lines.append("".join(cells))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        body = ", ".join(
            "[" + ", ".join(str(value) for value in row) + "]"
            for row in self.to_rows()
        )
        return f"Matrix.from_rows([{body}])"


def _from_column_list(rows: int, columns: list[Vector]) -> Matrix:
    """Wrap freshly built columns without copying them again."""
    matrix = Matrix(rows, 0)
    matrix._columns = columns
    return matrix


def print_matrix(matrix: Matrix, places: int = 2) -> None:
    """Print a matrix to stdout, entries rounded to ``places`` decimals."""
    check_type(matrix, Matrix, 'matrix')
    print(matrix.format(places))
