"""
Time-series tests.

Public API:
    adf_test(series, *, lags=0, mode='strict'|'lenient') -> ADFSolution
"""

from mathlab.timeseries.solution import ADFParams, ADFSolution
from mathlab.timeseries.solvers import ADFMode, adf_test

__all__ = [
    "adf_test",
    "ADFMode",
    "ADFParams",
    "ADFSolution",
]
