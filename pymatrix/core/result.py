"""
Generic result container for PyMatrix computations.

The Result class provides a standardized envelope for everything the
linear-system pipeline produces. This enables shared tooling for timing
and diagnostics while letting each computation define its own parameter
structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, uniqueness)
    - timing is optional (don't burden unit tests)
    - warnings carry non-fatal diagnostics instead of log records
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.
    
    Type Parameters:
        P: The computation-specific parameter payload type
        
    Attributes:
        params: Computation-specific payload (solution values, reduced form)
        info: Structured metadata (method, rank, uniqueness)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=SystemParams(values=x, canonical=rref, rank=3),
        ...     info={'method': 'gauss_jordan', 'unique': True},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_gauss'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
