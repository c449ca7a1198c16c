"""
Tolerance tiers for numerical comparison.

The engine itself compares against exact zero (no magnitude pivoting);
these values are for callers and tests that compare results.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Absolute tolerance for solution values of small systems
SOLUTION_ATOL = 1e-9
