"""
Linear systems of equations.

Public API:
    solve(system)        - solve an n x (n + 1) augmented system
    determinant(matrix)  - determinant of a square matrix
"""

from pymatrix.linsys.design import SystemDesign
from pymatrix.linsys.solution import SystemParams, SystemSolution
from pymatrix.linsys.solvers import solve, determinant

__all__ = [
    "solve",
    "determinant",
    "SystemDesign",
    "SystemParams",
    "SystemSolution",
]
