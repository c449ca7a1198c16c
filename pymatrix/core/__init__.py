"""
Core infrastructure for PyMatrix.

Shared abstractions used by the matrix, reduction and linsys modules.

Key components:
    exceptions: Exception hierarchy
    result: Generic Result[P] envelope
    validation: Input validators
    limits: Input bounds and display settings
    datasource: Input collaborators (text, files, random)
    compute: Timing and tolerances
"""

from pymatrix.core.result import Result
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

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "SizeMismatchError",
    "NotSquareError",
    "IndeterminateSystemError",
    "NumericalError",
    "UnsolvableSystemError",
]
