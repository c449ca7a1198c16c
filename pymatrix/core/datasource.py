"""
MatrixSource: input collaborators for PyMatrix.

MatrixSource is the "I have numbers" side of the library. It reads or
generates a grid, checks it against the input limits, and hands back a
Matrix. The algebra engine never reads files or draws random numbers.

Usage:
    from pymatrix import MatrixSource

    A = MatrixSource.from_text("1 2 3\n4 5 6")
    A = MatrixSource.from_file("system.txt")
    A = MatrixSource.from_file("system.csv")
    A = MatrixSource.random_integers(3, 4, -10, 10, rng=np.random.default_rng(0))
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ValidationError, DimensionError
from pymatrix.core.limits import MAX_DIMENSION, ELEMENT_BOUND
from pymatrix.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_positive_shape,
    check_max_dimension,
    check_element_bound,
)

if TYPE_CHECKING:
    from pymatrix.matrix import Matrix


class MatrixSource:
    """
    Factory for validated matrices. Construct via classmethods only.

    Every factory enforces MAX_DIMENSION and ELEMENT_BOUND; pass
    ``max_dimension`` / ``bound`` to override them.
    """

    @classmethod
    def from_grid(
        cls,
        grid: Any,
        *,
        name: str = 'grid',
        max_dimension: int = MAX_DIMENSION,
        bound: float = ELEMENT_BOUND,
    ) -> 'Matrix':
        """Validate an in-memory grid against the input limits."""
        from pymatrix.matrix import Matrix

        data = check_array(grid, name)
        check_2d(data, name)
        check_positive_shape(data.shape[0], data.shape[1], name)
        check_max_dimension(data.shape[0], data.shape[1], name, limit=max_dimension)
        check_finite(data, name)
        check_element_bound(data, name, bound=bound)
        return Matrix.from_array(data)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        max_dimension: int = MAX_DIMENSION,
        bound: float = ELEMENT_BOUND,
    ) -> 'Matrix':
        """
        Parse whitespace-separated rows, one row per line.

        Blank lines are ignored. Every row must have the same number of
        entries.

        Raises:
            ValidationError: On an unparsable entry or an empty input
            DimensionError: On ragged rows or a size over the limit
        """
        rows = [line.split() for line in text.splitlines() if line.strip()]
        if not rows:
            raise ValidationError("text: no matrix rows found")

        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise DimensionError(
                    f"text: row {i + 1} has {len(row)} entries, expected {width}"
                )

        grid = np.empty((len(rows), width), dtype=np.float64)
        for i, row in enumerate(rows):
            for j, token in enumerate(row):
                try:
                    grid[i, j] = float(token)
                except ValueError as e:
                    raise ValidationError(
                        f"text: cannot parse {token!r} at row {i + 1}, col {j + 1}"
                    ) from e

        return cls.from_grid(
            grid, name='text', max_dimension=max_dimension, bound=bound
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        max_dimension: int = MAX_DIMENSION,
        bound: float = ELEMENT_BOUND,
    ) -> 'Matrix':
        """
        Read a matrix from disk.

        Supported formats:
            .txt  whitespace-separated rows (see from_text)
            .csv  comma-separated, no header (pandas)
            .tsv  tab-separated, no header (pandas)
            .npy  numpy array
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix == '.txt':
            text = path.read_text()
            return cls.from_text(text, max_dimension=max_dimension, bound=bound)
        elif suffix in ('.csv', '.tsv'):
            import pandas as pd
            sep = '\t' if suffix == '.tsv' else ','
            df = pd.read_csv(path, sep=sep, header=None)
            grid = df.to_numpy(dtype=np.float64)
        elif suffix == '.npy':
            grid = np.load(path)
        else:
            raise ValidationError(f"Unknown file format: {suffix}")

        return cls.from_grid(
            grid, name=str(path), max_dimension=max_dimension, bound=bound
        )

    @classmethod
    def random_integers(
        cls,
        rows: int,
        columns: int,
        low: int,
        high: int,
        *,
        rng: np.random.Generator | None = None,
    ) -> 'Matrix':
        """Random integers in [low, high], both ends inclusive."""
        cls._check_range(low, high)
        rng = rng if rng is not None else np.random.default_rng()
        grid = cls._shaped(rows, columns)
        grid[...] = rng.integers(low, high, size=grid.shape, endpoint=True)
        return cls.from_grid(grid, name='random')

    @classmethod
    def random_floats(
        cls,
        rows: int,
        columns: int,
        low: float,
        high: float,
        *,
        rng: np.random.Generator | None = None,
    ) -> 'Matrix':
        """Uniform random floats in [low, high)."""
        cls._check_range(low, high)
        rng = rng if rng is not None else np.random.default_rng()
        grid = cls._shaped(rows, columns)
        grid[...] = rng.uniform(low, high, size=grid.shape)
        return cls.from_grid(grid, name='random')

    @staticmethod
    def _check_range(low: float, high: float) -> None:
        if low > high:
            raise ValidationError(
                f"random range: lower bound {low} exceeds upper bound {high}"
            )
        for value in (low, high):
            if abs(value) >= ELEMENT_BOUND:
                raise ValidationError(
                    f"random range: bounds must be smaller than "
                    f"{ELEMENT_BOUND:g} in absolute value, got {value}"
                )

    @staticmethod
    def _shaped(rows: int, columns: int) -> NDArray[np.floating[Any]]:
        check_positive_shape(rows, columns, 'random')
        check_max_dimension(rows, columns, 'random')
        return np.empty((rows, columns), dtype=np.float64)
