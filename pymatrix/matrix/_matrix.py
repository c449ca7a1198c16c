"""
Matrix: dense grid of real numbers.

A Matrix owns a C-contiguous float64 array of shape (rows, columns) with
rows, columns >= 1. Constructors copy their input, so no two live
instances share storage.

Mutation contract:
    - In place: transpose(), swap_rows(), fill(), multiply by a scalar
      (``A * s``), and the three reductions (to_upper_triangular(),
      to_staircase(), to_canonical()). Copy first to keep the original.
    - New matrix: ``A + B``, ``A - B``, ``A @ B``, scaled(), copy().
    - Observe only: trace(), determinant().
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import CPU_FP64
from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_positive_shape,
)
from pymatrix.reduction import elimination
from pymatrix.reduction.determinant import determinant as _determinant


class Matrix:
    """
    Dense real matrix with in-place row operations.

    Construction:
        Matrix()                  # 1x1 zero matrix
        Matrix(rows, columns)     # zero-filled
        Matrix.from_array(grid)   # copy of a 2D array-like
        Matrix.identity(n)
    """

    __slots__ = ('_elements',)

    def __init__(self, rows: int = 1, columns: int = 1):
        check_positive_shape(rows, columns, 'Matrix')
        self._elements = np.zeros((rows, columns), dtype=np.float64)

    @classmethod
    def from_array(cls, grid: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Parameters
        ----------
        grid : array-like
            Nested sequence or numpy array of finite real numbers with at
            least one row and one column. The data is copied.
        """
        data = check_array(grid, 'grid')
        check_2d(data, 'grid')
        check_positive_shape(data.shape[0], data.shape[1], 'grid')
        check_finite(data, 'grid')
        return cls._wrap(np.array(data, dtype=np.float64, order='C'))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        check_positive_shape(n, n, 'identity')
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Matrix:
        """Adopt an array the caller no longer references."""
        matrix = cls.__new__(cls)
        matrix._elements = data
        return matrix

    # === Dimensions and access ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._elements.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._elements.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def elements(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the grid."""
        view = self._elements.view()
        view.flags.writeable = False
        return view

    def is_square(self) -> bool:
        return self.rows == self.columns

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Copy of the grid as a numpy array."""
        return self._elements.copy()

    def copy(self) -> Matrix:
        return Matrix._wrap(self._elements.copy())

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return float(self._elements[row, column])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, column = index
        self._elements[row, column] = value

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        """Rows in order, each as a copy."""
        for row in self._elements:
            yield row.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._elements, other._elements)
        )

    __hash__ = None  # mutable

    def allclose(
        self,
        other: Matrix,
        rtol: float = CPU_FP64.rtol,
        atol: float = CPU_FP64.atol,
    ) -> bool:
        """Same shape and entries equal within tolerance."""
        return self.shape == other.shape and bool(
            np.allclose(self._elements, other._elements, rtol=rtol, atol=atol)
        )

    def __repr__(self) -> str:
        return f"Matrix({self._elements.tolist()!r})"

    def __str__(self) -> str:
        from pymatrix.matrix.formatting import format_matrix
        return format_matrix(self)

    # === Arithmetic operators ===

    def __add__(self, other: Matrix) -> Matrix:
        from pymatrix.matrix.arithmetic import add
        if not isinstance(other, Matrix):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Matrix) -> Matrix:
        from pymatrix.matrix.arithmetic import subtract
        if not isinstance(other, Matrix):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other: Matrix | float) -> Matrix:
        """
        ``A * B`` is the matrix product; ``A * s`` scales A IN PLACE.

        The scalar form mutates and returns the receiver. Use scaled()
        for a fresh matrix.
        """
        from pymatrix.matrix.arithmetic import matmul, multiply_scalar
        if isinstance(other, Matrix):
            return matmul(self, other)
        if isinstance(other, Real):
            return multiply_scalar(self, other)
        return NotImplemented

    def __matmul__(self, other: Matrix) -> Matrix:
        from pymatrix.matrix.arithmetic import matmul
        if not isinstance(other, Matrix):
            return NotImplemented
        return matmul(self, other)

    def scaled(self, scalar: float) -> Matrix:
        """New matrix with every entry multiplied by ``scalar``."""
        from pymatrix.matrix.arithmetic import scaled
        return scaled(self, scalar)

    # === In-place operations ===

    def transpose(self) -> None:
        """Replace the grid with its transpose (shape becomes columns x rows)."""
        self._elements = np.ascontiguousarray(self._elements.T)

    def swap_rows(self, first: int, second: int) -> None:
        """Exchange two rows; all other rows are unchanged."""
        for index in (first, second):
            if not 0 <= index < self.rows:
                raise IndexError(
                    f"row index {index} out of range for {self.rows} rows"
                )
        elimination.swap_rows(self._elements, first, second)

    def fill(self, values: ArrayLike) -> None:
        """
        Overwrite every entry.

        Args:
            values: A scalar (broadcast) or an array of this matrix's shape
        """
        data = check_array(values, 'values')
        if data.ndim != 0 and data.shape != self.shape:
            raise DimensionError(
                f"values: expected scalar or shape {self.shape}, got {data.shape}"
            )
        check_finite(data, 'values')
        self._elements[...] = data

    def to_upper_triangular(self) -> float:
        """
        Gaussian elimination below the diagonal, in place.

        Returns:
            Sign accumulator (-1.0 per row interchange).
        """
        return elimination.upper_triangularize(self._elements)

    def to_staircase(self) -> None:
        """Row-echelon form with unit leading entries, in place."""
        elimination.to_staircase(self._elements)

    def to_canonical(self) -> None:
        """Reduced row-echelon form, in place."""
        elimination.to_canonical(self._elements)

    # === Observers ===

    def trace(self) -> float:
        from pymatrix.matrix.arithmetic import trace
        return trace(self)

    def determinant(self) -> float:
        """Determinant; the matrix itself is left untouched."""
        return _determinant(self)
