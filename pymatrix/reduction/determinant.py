"""
Determinant by Gaussian elimination.

The input is copied, triangularized, and the diagonal product is
corrected for the row interchanges made along the way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from pymatrix.core.exceptions import NotSquareError
from pymatrix.reduction.elimination import upper_triangularize

if TYPE_CHECKING:
    from pymatrix.matrix import Matrix


def determinant(matrix: 'Matrix') -> float:
    """
    Determinant of a square matrix.

    The caller's matrix is not modified. No magnitude pivoting is done,
    so ill-conditioned input can lose precision to cancellation.

    Args:
        matrix: Square Matrix

    Returns:
        The determinant as a float

    Raises:
        NotSquareError: If the matrix is not square
    """
    if not matrix.is_square():
        raise NotSquareError(
            f"Cannot get a determinant of a non-square matrix "
            f"(shape {matrix.rows}x{matrix.columns})",
            operation='determinant',
            shape=matrix.shape,
        )

    work = matrix.to_array()
    sign = upper_triangularize(work)
    det = float(np.prod(np.diag(work))) * (1.0 / sign)
    # Normalise -0.0 from a singular matrix with an odd swap count
    return det + 0.0
