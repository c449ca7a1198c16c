"""
Plain-text rendering of matrices.

Each row is printed on its own line, prefixed by a tab, with every entry
rounded and left-aligned in a fixed-width cell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from pymatrix.core.limits import DISPLAY_DECIMALS, DISPLAY_CELL_WIDTH

if TYPE_CHECKING:
    from pymatrix.matrix._matrix import Matrix


def format_value(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """Round for display, dropping trailing zeros (2.0 -> '2')."""
    rounded = round(float(value), decimals) + 0.0
    return np.format_float_positional(rounded, trim='-')


def format_matrix(
    matrix: 'Matrix',
    decimals: int = DISPLAY_DECIMALS,
    width: int = DISPLAY_CELL_WIDTH,
) -> str:
    """
    Render ``matrix`` row by row.

    Values are rounded for display only; the matrix is not modified.
    """
    lines = []
    for row in matrix:
        cells = "".join(f"{format_value(v, decimals):<{width}}" for v in row)
        lines.append("\t" + cells)
    return "\n".join(lines)
