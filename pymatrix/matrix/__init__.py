"""
Matrix value type and arithmetic.

Public API:
    Matrix            - dense real matrix (in-place row operations)
    add, subtract     - elementwise, new matrix
    multiply_scalar   - scales IN PLACE, returns the operand
    scaled            - scales into a new matrix
    matmul            - matrix product
    transpose         - IN PLACE
    trace             - diagonal sum (square only)
    swap_rows         - IN PLACE
    format_matrix     - plain-text rendering
"""

from pymatrix.matrix._matrix import Matrix
from pymatrix.matrix.arithmetic import (
    add,
    subtract,
    multiply_scalar,
    scaled,
    matmul,
    transpose,
    trace,
    swap_rows,
)
from pymatrix.matrix.formatting import format_matrix, format_value

__all__ = [
    "Matrix",
    "add",
    "subtract",
    "multiply_scalar",
    "scaled",
    "matmul",
    "transpose",
    "trace",
    "swap_rows",
    "format_matrix",
    "format_value",
]
