"""
Linear regression estimators.

Public API:
    ols(x, y)          -> OLSSolution        single regressor with intercept
    ols_multi(y, X)    -> MultiOLSSolution   normal equations, no implicit intercept
    iv2sls(y, x, z)    -> IVSolution         two-stage least squares

Example:
    >>> from mathlab.regression import ols
    >>> fit = ols(x, y)
    >>> print(fit.slope, fit.t_statistic)
    >>> print(fit.summary())
"""

from mathlab.regression.design import SimpleDesign, MultiDesign
from mathlab.regression.solution import (
    SimpleOLSParams,
    MultiOLSParams,
    OLSSolution,
    MultiOLSSolution,
    IVSolution,
)
from mathlab.regression.solvers import ols, ols_multi, iv2sls

__all__ = [
    "ols",
    "ols_multi",
    "iv2sls",
    "SimpleDesign",
    "MultiDesign",
    "SimpleOLSParams",
    "MultiOLSParams",
    "OLSSolution",
    "MultiOLSSolution",
    "IVSolution",
]
