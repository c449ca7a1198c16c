"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import warnings
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.limits import DISPLAY_DECIMALS
from pymatrix.core.result import Result
from pymatrix.matrix import Matrix
from pymatrix.matrix.formatting import format_value

if TYPE_CHECKING:
    from pymatrix.linsys.design import SystemDesign


@dataclass(frozen=True)
class SystemParams:
    """
    Parameter payload for a solved linear system.

    Attributes:
        values: Value of each unknown, shape (n,)
        canonical: Reduced row-echelon form of the augmented matrix
        rank: Number of rows with a leading coefficient
    """
    values: NDArray[np.floating[Any]]
    canonical: NDArray[np.floating[Any]]
    rank: int


@dataclass
class SystemSolution:
    """
    User-facing linear system result.

    Wraps Result[SystemParams] and provides convenient accessors.
    """
    _result: Result[SystemParams]
    _design: 'SystemDesign'

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Unknowns x1..xn, full precision."""
        return self._result.params.values

    @property
    def canonical(self) -> Matrix:
        """Canonical form of the augmented matrix (a fresh copy)."""
        return Matrix.from_array(self._result.params.canonical)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def is_unique(self) -> bool:
        """Whether the coefficient block reduced to the identity."""
        return bool(self._result.info.get('unique', False))

    @property
    def design(self) -> 'SystemDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def rounded(self, decimals: int = DISPLAY_DECIMALS) -> NDArray[np.floating[Any]]:
        """Values rounded for display. The stored values are not changed."""
        return np.round(self.values, decimals) + 0.0

    def summary(self, decimals: int = DISPLAY_DECIMALS) -> str:
        """One ``xi = value`` line per unknown."""
        if not self.is_unique:
            warnings.warn(
                "System has no unique solution; the listed values are one "
                "reading of the canonical form.",
                UserWarning,
                stacklevel=2,
            )
        return "\n".join(
            f"x{i + 1} = {format_value(v, decimals)}"
            for i, v in enumerate(self.values)
        )

    def __repr__(self) -> str:
        return (
            f"SystemSolution(n={len(self.values)}, rank={self.rank}, "
            f"unique={self.is_unique})"
        )
