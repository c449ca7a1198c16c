"""
Solver dispatch for linear systems and determinants.

Provides solve() for augmented systems and determinant() for square
matrices.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import ValidationError
from pymatrix.matrix import Matrix
from pymatrix.linsys.design import SystemDesign
from pymatrix.linsys.solution import SystemSolution
from pymatrix.linsys.backends.cpu import CPUGaussBackend
from pymatrix.reduction.determinant import determinant as _determinant


BackendChoice = Literal['auto', 'cpu']


def _ensure_design(system: Matrix | ArrayLike | SystemDesign) -> SystemDesign:
    """Convert a Matrix or raw array to SystemDesign if needed."""
    if isinstance(system, SystemDesign):
        return system
    if isinstance(system, Matrix):
        return SystemDesign.from_matrix(system)
    return SystemDesign.from_array(system)


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUGaussBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def solve(
    system: Matrix | ArrayLike | SystemDesign,
    *,
    backend: BackendChoice = 'auto',
) -> SystemSolution:
    """
    Solve a square linear system given as an augmented matrix.

    Parameters
    ----------
    system : Matrix, array-like or SystemDesign
        n x (n + 1) augmented matrix; the last column holds the constants.
        A Matrix argument is copied, never reduced in place.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    SystemSolution with the value of every unknown.

    Raises
    ------
    IndeterminateSystemError
        If the shape is not n x (n + 1). Checked before any reduction.
    UnsolvableSystemError
        If the system is inconsistent.

    Examples
    --------
    >>> solve([[1, 2, 3], [4, 5, 6]]).values
    array([-1.,  2.])
    """
    design = _ensure_design(system)
    be = _get_backend(backend)
    result = be.solve(design)
    return SystemSolution(_result=result, _design=design)


def determinant(matrix: Matrix | ArrayLike) -> float:
    """
    Determinant of a square matrix.

    Accepts a Matrix or any 2D array-like; the input is never modified.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    """
    if not isinstance(matrix, Matrix):
        matrix = Matrix.from_array(matrix)
    return _determinant(matrix)
