"""
CPU Gauss-Jordan backend for linear systems.

Reduces a copy of the augmented matrix to canonical form, rejects
inconsistent systems, and reads the solution from the last column.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import UnsolvableSystemError
from pymatrix.core.result import Result
from pymatrix.linsys.design import SystemDesign
from pymatrix.linsys.solution import SystemParams
from pymatrix.reduction.elimination import (
    to_canonical,
    contains_unsolvable_rows,
    pivot_rank,
)


class CPUGaussBackend:
    """Gauss-Jordan elimination on a dense float64 grid."""

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def solve(self, design: SystemDesign) -> Result[SystemParams]:
        """
        Solve the system described by ``design``.

        Raises:
            UnsolvableSystemError: If the canonical form contains a row
                0 = b with b != 0.
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        work = np.array(design.augmented, dtype=np.float64)
        n = design.n_unknowns

        with timer.section('canonical'):
            to_canonical(work)

        with timer.section('consistency_check'):
            bad_row = contains_unsolvable_rows(work)
        if bad_row is not None:
            raise UnsolvableSystemError(
                f"The system cannot be solved: row {bad_row + 1} of the "
                f"canonical form reads 0 = {work[bad_row, -1]:g}",
                row=bad_row,
                constant=float(work[bad_row, -1]),
            )

        rank = pivot_rank(work)
        unique = bool(np.array_equal(work[:, :n], np.eye(n)))
        if not unique:
            warnings_list.append(
                "System has no unique solution; values are read from the "
                "canonical form as-is"
            )

        values = work[:, n].copy()
        work.flags.writeable = False

        timer.stop()

        return Result(
            params=SystemParams(values=values, canonical=work, rank=rank),
            info={
                'method': 'gauss_jordan',
                'n_unknowns': n,
                'rank': rank,
                'unique': unique,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
