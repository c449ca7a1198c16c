"""
Row-reduction engine for PyMatrix.

All kernels work in place on a float64 grid. The Matrix methods
to_upper_triangular(), to_staircase() and to_canonical() wrap them for
Matrix instances.

Submodules:
    elimination: triangular, staircase and canonical forms
    determinant: determinant via triangularization
"""

from pymatrix.reduction.elimination import (
    leading_column,
    swap_rows,
    upper_triangularize,
    to_staircase,
    to_canonical,
    contains_unsolvable_rows,
    pivot_rank,
)
from pymatrix.reduction.determinant import determinant

__all__ = [
    "leading_column",
    "swap_rows",
    "upper_triangularize",
    "to_staircase",
    "to_canonical",
    "contains_unsolvable_rows",
    "pivot_rank",
    "determinant",
]
