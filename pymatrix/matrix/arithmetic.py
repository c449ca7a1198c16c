"""
Matrix arithmetic.

Binary operations return a new Matrix. multiply_scalar() and transpose()
mutate their operand and return it; scaled() is the copying alternative.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.exceptions import SizeMismatchError, NotSquareError
from pymatrix.matrix._matrix import Matrix


def _check_same_shape(left: Matrix, right: Matrix, operation: str, verb: str) -> None:
    """Rows and columns are checked separately; both raise the same error."""
    if left.rows != right.rows:
        raise SizeMismatchError(
            f"Cannot {verb} matrices of different sizes: "
            f"{left.rows} rows vs {right.rows} rows",
            operation=operation,
            left_shape=left.shape,
            right_shape=right.shape,
        )
    if left.columns != right.columns:
        raise SizeMismatchError(
            f"Cannot {verb} matrices of different sizes: "
            f"{left.columns} columns vs {right.columns} columns",
            operation=operation,
            left_shape=left.shape,
            right_shape=right.shape,
        )


def add(left: Matrix, right: Matrix) -> Matrix:
    """Elementwise sum."""
    _check_same_shape(left, right, 'add', 'add')
    return Matrix._wrap(left.elements + right.elements)


def subtract(left: Matrix, right: Matrix) -> Matrix:
    """Elementwise difference ``left - right``."""
    _check_same_shape(left, right, 'subtract', 'subtract')
    return Matrix._wrap(left.elements - right.elements)


def multiply_scalar(matrix: Matrix, scalar: float) -> Matrix:
    """
    Multiply every entry by ``scalar`` IN PLACE.

    Returns:
        ``matrix`` itself, for chaining
    """
    matrix.fill(matrix.elements * float(scalar))
    return matrix


def scaled(matrix: Matrix, scalar: float) -> Matrix:
    """New matrix equal to ``matrix`` times ``scalar``; the operand is untouched."""
    return Matrix._wrap(matrix.elements * float(scalar))


def matmul(left: Matrix, right: Matrix) -> Matrix:
    """
    Matrix product.

    Entry (i, j) is the plain floating-point sum of left[i, k] * right[k, j].

    Raises:
        SizeMismatchError: If left.columns != right.rows
    """
    if left.columns != right.rows:
        raise SizeMismatchError(
            f"Cannot multiply matrices with such dimensions: "
            f"{left.rows}x{left.columns} times {right.rows}x{right.columns}",
            operation='matmul',
            left_shape=left.shape,
            right_shape=right.shape,
        )
    return Matrix._wrap(np.ascontiguousarray(left.elements @ right.elements))


def transpose(matrix: Matrix) -> Matrix:
    """Transpose IN PLACE and return the same matrix."""
    matrix.transpose()
    return matrix


def trace(matrix: Matrix) -> float:
    """
    Sum of the main diagonal.

    Raises:
        NotSquareError: If the matrix is not square
    """
    if not matrix.is_square():
        raise NotSquareError(
            f"Non-square matrices do not have a trace "
            f"(shape {matrix.rows}x{matrix.columns})",
            operation='trace',
            shape=matrix.shape,
        )
    return float(np.trace(matrix.elements))


def swap_rows(matrix: Matrix, first: int, second: int) -> Matrix:
    """Exchange two rows IN PLACE and return the same matrix."""
    matrix.swap_rows(first, second)
    return matrix
