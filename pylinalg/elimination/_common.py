"""
Row operations shared by the elimination solvers.

The solvers never touch a caller's Matrix. They copy it into a private
row-major working grid (a list of Decimal lists), operate on the grid in
place, and wrap the grid into a new Matrix at the end.
"""

from __future__ import annotations

from decimal import Decimal

from pylinalg.core.matrix import Matrix
from pylinalg.core.precision import ZERO, snap_integral

Grid = list[list[Decimal]]


def to_grid(matrix: Matrix) -> Grid:
    """Row-major working copy of a matrix."""
    return matrix.to_rows()


def from_grid(grid: Grid, n_columns: int) -> Matrix:
    """Wrap a working grid into a new Matrix."""
    if not grid:
        return Matrix(0, n_columns)
    return Matrix.from_rows(grid)


def swap_rows(grid: Grid, a: int, b: int) -> None:
    grid[a], grid[b] = grid[b], grid[a]


def divide_row(grid: Grid, r: int, divisor: Decimal) -> None:
    grid[r] = [value / divisor for value in grid[r]]


def eliminate(grid: Grid, target: int, pivot: int, lead: int) -> Decimal:
    """
    Subtract ``grid[target][lead]`` times the pivot row from the target row.

    Every entry produced is passed through snap_integral. Returns the
    multiplier used; zero means the row was left untouched.
    """
    multiplier = grid[target][lead]
    if multiplier == 0:
        return multiplier
    pivot_row = grid[pivot]
    grid[target] = [
        snap_integral(value - multiplier * pivot_value)
        for value, pivot_value in zip(grid[target], pivot_row)
    ]
    return multiplier


def row_magnitude(row: list[Decimal]) -> Decimal:
    """Largest absolute entry of a row (zero for an empty row)."""
    return max((abs(value) for value in row), default=ZERO)


def flush_residue(grid: Grid, r: int, threshold: Decimal) -> None:
    """Set entries of row ``r`` with ``|value| <= threshold`` to exactly zero."""
    grid[r] = [ZERO if abs(value) <= threshold else value for value in grid[r]]


def find_pivot_row(grid: Grid, start: int, lead: int) -> int | None:
    """First row at or below ``start`` with a nonzero entry in column ``lead``."""
    for i in range(start, len(grid)):
        if grid[i][lead] != 0:
            return i
    return None


def remove_row_and_column(grid: Grid, row: int, column: int) -> Grid:
    """Copy of the grid without one row and one column."""
    return [
        values[:column] + values[column + 1:]
        for i, values in enumerate(grid)
        if i != row
    ]
