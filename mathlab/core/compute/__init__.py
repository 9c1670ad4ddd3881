"""
Shared compute infrastructure for MathLab.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical thresholds
"""

from mathlab.core.compute.timing import Timer
from mathlab.core.compute.tolerances import (
    PIVOT_TOLERANCE,
    DEGENERATE_TOLERANCE,
    STUDENT_T_CHI_FLOOR,
    ADF_CRITICAL_VALUE,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "PIVOT_TOLERANCE",
    "DEGENERATE_TOLERANCE",
    "STUDENT_T_CHI_FLOOR",
    "ADF_CRITICAL_VALUE",
]
