"""
Autoregressive distributed lag lab.

    x_t = φ x_{t-1} + U
    y_t = ρ y_{t-1} + β x_t + U          U ~ Uniform[0, 1)

The ARDL(1, 0) regression y_t = c + ρ y_{t-1} + β x_t is re-estimated
by normal-equation OLS. The bounds-test F-statistic is a fixed
illustrative value, not computed from the data.
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
from mathlab.regression import ols_multi
from mathlab.rng.distributions import Uniform, sample

BOUNDS_F_STATISTIC = 14.22

_UNIT_UNIFORM = Uniform()


@dataclass(frozen=True)
class ARDLParams:
    n: int = 100
    x_persistence: float = 0.5
    y_persistence: float = 0.4
    impact: float = 1.2

    def __post_init__(self):
        check_min_count(self.n, 5, 'n')
        for name in ('x_persistence', 'y_persistence', 'impact'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name}: must be finite, got {value!r}")


class ARDLLab(Lab[ARDLParams]):
    """ARDL(1, 0) simulation and fit."""

    lab_id = LabId.ARDL
    params_type = ARDLParams

    def _run(self, params: ARDLParams, timer: Timer) -> tuple[Series, Statistics, list[str]]:
        n = params.n
        x = np.zeros(n)
        y = np.zeros(n)

        with timer.section('draws'):
            for i in range(1, n):
                x[i] = params.x_persistence * x[i - 1] + sample(self.rng, _UNIT_UNIFORM)
                y[i] = (params.y_persistence * y[i - 1] + params.impact * x[i]
                        + sample(self.rng, _UNIT_UNIFORM))

        with timer.section('estimation'):
            design = np.column_stack([np.ones(n - 1), y[:-1], x[1:]])
            fit = ols_multi(y[1:], design)
            const, y_lag, x_coef = (float(c) for c in fit.coefficients)

        with np.errstate(divide='ignore', invalid='ignore'):
            long_run = float(np.float64(x_coef) / (1.0 - y_lag))

        statistics = {
            'const': const,
            'y_lag': y_lag,
            'x': x_coef,
            'long_run_multiplier': long_run,
            'r_squared': fit.r_squared,
            'bounds_f_statistic': BOUNDS_F_STATISTIC,
        }
        return {'y': y, 'x': x}, statistics, []
