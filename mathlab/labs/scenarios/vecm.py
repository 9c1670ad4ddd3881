"""
Cointegration / VECM lab.

    y1_t = y1_{t-1} + s (U - 0.5)       random walk
    y2_t = λ y1_t   + s (U - 0.5)       shares y1's stochastic trend

Engle-Granger: regress y2 on y1, then run the unit-root test on the
residual. The test is run in lenient mode so an unlucky draw yields a
0.0 statistic with a warning instead of aborting the lab. The
error-correction speed is the slope of Δy2_t on the lagged residual.

No estimation step aborts the lab. A step that fails is reported as a
warning and the statistics it would have produced are left as NaN
(adf_statistic falls back to 0.0, cointegrated to 0.0).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from mathlab.core.compute.timing import Timer
from mathlab.core.compute.tolerances import ADF_CRITICAL_VALUE
from mathlab.core.exceptions import MathLabError, ValidationError
from mathlab.core.validation import check_min_count, check_positive
from mathlab.labs._common import LabId
from mathlab.labs.base import Lab, Series, Statistics
from mathlab.regression import ols
from mathlab.rng.distributions import Uniform, sample
from mathlab.timeseries import adf_test

_CENTERED_UNIFORM = Uniform(-0.5, 0.5)


@dataclass(frozen=True)
class VECMParams:
    n: int = 150
    loading: float = 0.7
    shock_scale: float = 1.0
    critical_value: float = ADF_CRITICAL_VALUE

    def __post_init__(self):
        check_min_count(self.n, 5, 'n')
        check_positive(self.shock_scale, 'shock_scale')
        for name in ('loading', 'critical_value'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name}: must be finite, got {value!r}")


class VECMLab(Lab[VECMParams]):
    """Two series sharing one stochastic trend, tested for cointegration."""

    lab_id = LabId.VECM
    params_type = VECMParams

    def _run(self, params: VECMParams, timer: Timer) -> tuple[Series, Statistics, list[str]]:
        n = params.n
        s = params.shock_scale
        y1 = np.zeros(n)
        y2 = np.zeros(n)

        with timer.section('draws'):
            for i in range(1, n):
                y1[i] = y1[i - 1] + s * sample(self.rng, _CENTERED_UNIFORM)
                y2[i] = params.loading * y1[i] + s * sample(self.rng, _CENTERED_UNIFORM)

        statistics = {
            'beta': math.nan,
            'alpha': math.nan,
            'adf_statistic': 0.0,
            'cointegrated': 0.0,
            'error_correction': math.nan,
        }
        series = {'y1': y1, 'y2': y2, 'residuals': np.full(n, math.nan)}

        with timer.section('cointegrating_regression'):
            try:
                long_run = ols(y1, y2, x_name='y1', y_name='y2')
            except MathLabError as e:
                self._alert(f"cointegrating regression failed, remaining statistics skipped: {e}")
                return series, statistics, []
        residuals = long_run.residuals
        series['residuals'] = residuals
        statistics['beta'] = long_run.slope
        statistics['alpha'] = long_run.intercept

        with timer.section('unit_root_test'):
            adf = adf_test(residuals, mode='lenient', critical_value=params.critical_value)
        for msg in adf.warnings:
            self._alert(msg)
        statistics['adf_statistic'] = adf.statistic
        if adf.failed:
            self._alert("error-correction regression skipped after failed unit-root test")
            return series, statistics, []
        statistics['cointegrated'] = 1.0 if adf.is_stationary else 0.0

        with timer.section('error_correction'):
            try:
                ecm = ols(residuals[:-1], np.diff(y2), x_name='ect_lag', y_name='dy2')
            except MathLabError as e:
                self._alert(f"error-correction regression failed: {e}")
            else:
                statistics['error_correction'] = ecm.slope

        return series, statistics, []
