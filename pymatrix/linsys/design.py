"""
SystemDesign: augmented-matrix wrapper for linear systems.

A system of n equations in n unknowns is written as an n x (n + 1)
augmented matrix: coefficient columns followed by one column of
constants. The shape is checked here, before any reduction work.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import IndeterminateSystemError
from pymatrix.matrix import Matrix


@dataclass(frozen=True)
class SystemDesign:
    """
    Design for a square linear system.

    Immutable after construction; holds its own copy of the augmented
    matrix.

    Construction:
        SystemDesign.from_matrix(matrix)
        SystemDesign.from_array([[1, 2, 3], [4, 5, 6]])
    """
    _augmented: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> SystemDesign:
        """
        Build SystemDesign from an augmented Matrix.

        Raises
        ------
        IndeterminateSystemError
            If columns != rows + 1.
        """
        rows, columns = matrix.shape
        if columns != rows + 1:
            raise IndeterminateSystemError(
                f"The system is indeterminate: {rows} equations need "
                f"{rows + 1} columns (coefficients plus constants), got {columns}",
                rows=rows,
                columns=columns,
            )
        augmented = matrix.to_array()
        augmented.flags.writeable = False
        return cls(_augmented=augmented, _n=rows)

    @classmethod
    def from_array(cls, grid: ArrayLike) -> SystemDesign:
        """Build SystemDesign from a 2D array-like augmented matrix."""
        return cls.from_matrix(Matrix.from_array(grid))

    @property
    def augmented(self) -> NDArray[np.floating[Any]]:
        """Augmented matrix (n x (n + 1)), read-only."""
        return self._augmented

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficient block (n x n)."""
        return self._augmented[:, :-1]

    @property
    def constants(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,)."""
        return self._augmented[:, -1]

    @property
    def n_equations(self) -> int:
        return self._n

    @property
    def n_unknowns(self) -> int:
        return self._n

    def to_matrix(self) -> Matrix:
        """Fresh Matrix copy of the augmented system."""
        return Matrix.from_array(self._augmented)

    def __repr__(self) -> str:
        return f"SystemDesign(n={self._n})"
