"""
Generic result container for pymatrix solvers.

Solvers that produce more than a single number (triangulation, for
instance) return their payload inside a Result envelope so that metadata,
timing and non-fatal warnings travel with it.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivoting strategy, swaps)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The solver-specific parameter payload type

    Attributes:
        params: Solver-specific payload (upper-triangular factor, sign, ...)
        info: Structured metadata (method, pivoting, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=TriangulationParams(upper=U, sign=-1, swaps=1,
        ...                                singular_columns=()),
        ...     info={'method': 'gauss', 'pivoting': 'magnitude'},
        ...     timing={'total_seconds': 0.0002},
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
