"""
MathLab: seeded statistical simulation and estimation.

A small engine of random-number generation, dense linear algebra and
econometric estimators behind a set of interactive simulation labs.

Submodules:
    rng: SFC32 generator and distribution sampler
    linalg: transpose, multiply, Gauss-Jordan invert, solve
    regression: OLS, normal-equation OLS, 2SLS
    timeseries: ADF-style unit-root test
    descriptive: mean, variance, skewness, kurtosis
    labs: IV, VAR, VECM, ARDL, OU, MCMC, RISK and GBM simulators
"""

__version__ = "0.1.0"

from mathlab import rng
from mathlab import linalg
from mathlab import regression
from mathlab import timeseries
from mathlab import descriptive
from mathlab import labs

__all__ = [
    "__version__",
    "rng",
    "linalg",
    "regression",
    "timeseries",
    "descriptive",
    "labs",
]
