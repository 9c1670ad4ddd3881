"""
Instrumental variables lab.

Data generating process, per observation:
    u  ~ N(0, 1)                            structural error
    v  = e u + sqrt(1 - e²) N(0, 1)          first-stage error, corr(u, v) = e
    z  ~ N(0, 1)                            instrument
    x  = π z + v
    y  = a + b x + u

With e != 0 the regressor x is correlated with u, so naive OLS of y on x
is biased; 2SLS through z is consistent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from mathlab.core.compute.timing import Timer
from mathlab.core.exceptions import ValidationError
from mathlab.core.validation import check_min_count
from mathlab.labs._common import LabId
from mathlab.labs.base import Lab, Series, Statistics
from mathlab.regression import iv2sls
from mathlab.rng.distributions import Normal, sample

_STANDARD_NORMAL = Normal()


@dataclass(frozen=True)
class IVParams:
    n: int = 200
    endogeneity: float = 0.5
    instrument_strength: float = 0.8
    true_intercept: float = 1.0
    true_slope: float = 1.5

    def __post_init__(self):
        check_min_count(self.n, 3, 'n')
        if not (math.isfinite(self.endogeneity) and -1.0 <= self.endogeneity <= 1.0):
            raise ValidationError(
                f"endogeneity: must lie in [-1, 1], got {self.endogeneity!r}"
            )
        for name in ('instrument_strength', 'true_intercept', 'true_slope'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name}: must be finite, got {value!r}")


class IVLab(Lab[IVParams]):
    """Bias of OLS versus 2SLS under an endogenous regressor."""

    lab_id = LabId.IV
    params_type = IVParams

    def _run(self, params: IVParams, timer: Timer) -> tuple[Series, Statistics, list[str]]:
        n = params.n
        e = params.endogeneity
        spread = math.sqrt(1.0 - e * e)
        x = np.empty(n)
        y = np.empty(n)
        z = np.empty(n)

        with timer.section('draws'):
            for i in range(n):
                u = sample(self.rng, _STANDARD_NORMAL)
                v = e * u + spread * sample(self.rng, _STANDARD_NORMAL)
                zi = sample(self.rng, _STANDARD_NORMAL)
                xi = params.instrument_strength * zi + v
                x[i] = xi
                y[i] = params.true_intercept + params.true_slope * xi + u
                z[i] = zi

        with timer.section('estimation'):
            fit = iv2sls(y, x, z)

        series = {'x': x, 'y': y, 'z': z, 'x_hat': fit.x_hat}
        statistics = {
            'ols_slope': fit.ols_slope,
            'ols_intercept': fit.ols_intercept,
            'iv_slope': fit.iv_slope,
            'iv_intercept': fit.iv_intercept,
            'first_stage_t': fit.instrument_t_statistic,
            'ols_bias': fit.ols_slope - params.true_slope,
            'iv_bias': fit.iv_slope - params.true_slope,
        }
        return series, statistics, []
