"""
Descriptive statistics module.

Public API:
    mean(x)
    variance(x, *, mean=None)   - n - 1 divisor, 0.0 for n < 2
    skewness(x, *, mean=None)   - 0.0 for n < 3
    kurtosis(x, *, mean=None)   - excess, 0.0 for n < 4
    describe(x)                 - all of the above plus sd, min, max
"""

from mathlab.descriptive.solution import DescriptiveParams, DescriptiveSolution
from mathlab.descriptive.solvers import (
    mean,
    variance,
    skewness,
    kurtosis,
    describe,
)

__all__ = [
    "mean",
    "variance",
    "skewness",
    "kurtosis",
    "describe",
    "DescriptiveParams",
    "DescriptiveSolution",
]
