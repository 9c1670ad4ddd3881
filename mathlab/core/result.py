"""
Generic result container for all MathLab computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing domains to define their own parameter structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, failure flags, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, statistics, series)
        info: Structured metadata (method, failed, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SimpleOLSParams(...),
        ...     info={'method': 'closed_form', 'n': 200},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_closed_form'
        ... )

        >>> # Lenient unit-root test that fell back to its sentinel
        >>> Result(
        ...     params=ADFParams(statistic=0.0, ...),
        ...     info={'method': 'adf', 'failed': True},
        ...     timing=None,
        ...     backend_name='cpu_adf',
        ...     warnings=('regressor y_lag has zero variance',),
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
