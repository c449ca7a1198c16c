"""
Shared compute infrastructure for PyMatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Comparison tolerances for results
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import ToleranceTier, CPU_FP64, SOLUTION_ATOL

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "SOLUTION_ATOL",
]
