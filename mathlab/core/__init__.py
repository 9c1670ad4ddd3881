"""
Core infrastructure for MathLab.

This module provides shared abstractions and utilities used by all
domain-specific submodules (rng, linalg, regression, labs, ...).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerances
"""

from mathlab.core.protocols import Backend
from mathlab.core.result import Result
from mathlab.core.exceptions import (
    MathLabError,
    ValidationError,
    DimensionError,
    UnsupportedDistributionError,
    NumericalError,
    SingularMatrixError,
    DegenerateRegressorError,
    LabStateError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "MathLabError",
    "ValidationError",
    "DimensionError",
    "UnsupportedDistributionError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateRegressorError",
    "LabStateError",
]
