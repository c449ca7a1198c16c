"""
Gaussian elimination kernels.

Three in-place transformations of a dense float64 grid:
    upper_triangularize: zeros below the diagonal, returns the swap sign
    to_staircase: row-echelon form with unit leading entries
    to_canonical: reduced row-echelon form (back-substitution)

The grid is treated as an augmented matrix: the last column holds the
constants and is never searched for a leading entry. Zero tests are exact
comparisons; there is no pivoting for magnitude.

All functions mutate their argument. Callers that need the original must
pass a copy.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def leading_column(grid: NDArray[np.floating[Any]], row: int) -> int:
    """
    Column of the first nonzero coefficient in ``row``.

    Only the coefficient columns (all but the last) are searched.

    Returns:
        The column index, or ``columns - 1`` if every coefficient is zero.
    """
    n_cols = grid.shape[1]
    column = 0
    while column < n_cols - 1 and grid[row, column] == 0:
        column += 1
    return column


def swap_rows(grid: NDArray[np.floating[Any]], first: int, second: int) -> None:
    """Exchange two rows in place; all other rows are untouched."""
    if first != second:
        grid[[first, second]] = grid[[second, first]]


def upper_triangularize(grid: NDArray[np.floating[Any]]) -> float:
    """
    Eliminate entries below the diagonal, in place.

    Diagonal positions (r, r) are visited in increasing order. At each one:

    - nonzero pivot: every row below gets a multiple of row r added so
      that its entry in column r becomes zero;
    - zero pivot, nonzero entry further down the column: the first such
      row is swapped into position r, the sign flips, and elimination
      proceeds at the same position;
    - zero pivot, nothing below: the column is degenerate and both
      indices advance without eliminating.

    For square full-rank input the result is upper triangular. Otherwise
    it is a row-echelon-like partial result that may contain zero rows.

    Args:
        grid: 2D float array, modified in place

    Returns:
        Sign accumulator: 1.0 times -1.0 per row interchange.
    """
    n_rows, n_cols = grid.shape
    sign = 1.0

    for r in range(min(n_rows, n_cols)):
        if grid[r, r] == 0:
            below = np.flatnonzero(grid[r + 1:, r])
            if below.size == 0:
                # Degenerate column: no pivot here.
                continue
            swap_rows(grid, r, r + 1 + int(below[0]))
            sign *= -1.0

        pivot = grid[r, r]
        for k in range(r + 1, n_rows):
            if grid[k, r] == 0:
                continue
            multiple = -grid[k, r] / pivot
            grid[k, r:] += multiple * grid[r, r:]
            grid[k, r] = 0.0

    return sign


def to_staircase(grid: NDArray[np.floating[Any]]) -> None:
    """
    Reduce to row-echelon ("staircase") form, in place.

    Triangularizes, then divides every row by its leading coefficient so
    the leading entry becomes 1. Stops at the first row without a nonzero
    coefficient: elimination leaves rows ordered by leading position, so
    everything below it is zero as well.
    """
    upper_triangularize(grid)
    n_rows, n_cols = grid.shape

    for row in range(n_rows):
        column = leading_column(grid, row)
        if column == n_cols - 1:
            return
        grid[row, column:] /= grid[row, column]
        grid[row, column] = 1.0


def _last_pivot_row(grid: NDArray[np.floating[Any]]) -> int:
    """
    Lowest row with a nonzero entry outside the first column.

    Falls back to the bottom row when no row qualifies.
    """
    n_rows = grid.shape[0]
    for row in range(n_rows - 1, -1, -1):
        if np.any(grid[row, 1:] != 0):
            return row
    return n_rows - 1


def to_canonical(grid: NDArray[np.floating[Any]]) -> None:
    """
    Reduce to reduced row-echelon ("canonical") form, in place.

    Computes the staircase form, then walks from the last pivot row up to
    row 1. For each row r with leading column c, every row above it has
    ``grid[u, c] * row r`` subtracted over columns 1 onward, clearing
    column c above the pivot. Used on an augmented system this leaves the
    solution values in the last column.
    """
    to_staircase(grid)

    for row in range(_last_pivot_row(grid), 0, -1):
        column = leading_column(grid, row)
        for upper in range(row - 1, -1, -1):
            coefficient = grid[upper, column]
            if coefficient == 0:
                continue
            grid[upper, 1:] -= grid[row, 1:] * coefficient


def contains_unsolvable_rows(grid: NDArray[np.floating[Any]]) -> int | None:
    """
    Find a contradictory row (0 = b with b != 0) in a canonical form.

    Rows are scanned from the bottom. The scan stops at the first row
    with a nonzero coefficient: rows above it are taken as solvable.

    Returns:
        Index of the contradictory row, or None if the system is solvable.
    """
    n_rows, n_cols = grid.shape
    for row in range(n_rows - 1, -1, -1):
        column = leading_column(grid, row)
        if column < n_cols - 1:
            return None
        if grid[row, n_cols - 1] != 0:
            return row
    return None


def pivot_rank(grid: NDArray[np.floating[Any]]) -> int:
    """Number of rows whose leading entry is a coefficient."""
    n_cols = grid.shape[1]
    return sum(
        1 for row in range(grid.shape[0])
        if leading_column(grid, row) < n_cols - 1
    )
