"""
PyMatrix: dense matrix algebra with Gaussian elimination.

Stores rectangular grids of real numbers and provides arithmetic,
transpose, trace, determinants and the solution of square linear
systems by row reduction.

Submodules:
    matrix: Matrix value type and arithmetic
    reduction: triangular, staircase and canonical forms; determinant
    linsys: linear systems of equations
    core: exceptions, validation, input sources
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    SizeMismatchError,
    NotSquareError,
    IndeterminateSystemError,
    NumericalError,
    UnsolvableSystemError,
)
from pymatrix.core.datasource import MatrixSource
from pymatrix.matrix import Matrix, format_matrix
from pymatrix.linsys import solve, determinant, SystemSolution

__all__ = [
    "__version__",
    "Matrix",
    "MatrixSource",
    "format_matrix",
    "solve",
    "determinant",
    "SystemSolution",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "SizeMismatchError",
    "NotSquareError",
    "IndeterminateSystemError",
    "NumericalError",
    "UnsolvableSystemError",
]
