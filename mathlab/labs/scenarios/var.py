"""
Vector autoregression lab.

    y1_t = a11 y1_{t-1} + a12 y2_{t-1} + ε1_t
    y2_t = a21 y1_{t-1} + a22 y2_{t-1} + ρ ε2_t

Both series start at 0. Each equation is re-estimated by normal-equation
OLS on the lagged pair (no intercept, as in the generating process).
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
from mathlab.rng.distributions import Normal, sample

_STANDARD_NORMAL = Normal()


@dataclass(frozen=True)
class VARParams:
    n: int = 100
    cross_correlation: float = 0.5
    a11: float = 0.7
    a12: float = 0.2
    a21: float = 0.1
    a22: float = 0.6

    def __post_init__(self):
        check_min_count(self.n, 4, 'n')
        for name in ('cross_correlation', 'a11', 'a12', 'a21', 'a22'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name}: must be finite, got {value!r}")

    @property
    def coefficient_matrix(self) -> np.ndarray:
        return np.array([[self.a11, self.a12], [self.a21, self.a22]])


class VARLab(Lab[VARParams]):
    """Two coupled AR(1) series."""

    lab_id = LabId.VAR
    params_type = VARParams

    def _run(self, params: VARParams, timer: Timer) -> tuple[Series, Statistics, list[str]]:
        n = params.n
        y1 = np.zeros(n)
        y2 = np.zeros(n)

        with timer.section('draws'):
            for i in range(1, n):
                y1[i] = (params.a11 * y1[i - 1] + params.a12 * y2[i - 1]
                         + sample(self.rng, _STANDARD_NORMAL))
                y2[i] = (params.a21 * y1[i - 1] + params.a22 * y2[i - 1]
                         + params.cross_correlation * sample(self.rng, _STANDARD_NORMAL))

        with timer.section('estimation'):
            lagged = np.column_stack([y1[:-1], y2[:-1]])
            eq1 = ols_multi(y1[1:], lagged)
            eq2 = ols_multi(y2[1:], lagged)
            r1, r2 = eq1.residuals, eq2.residuals
            denom = math.sqrt(float(r1 @ r1) * float(r2 @ r2))
            residual_corr = float(r1 @ r2) / denom if denom > 0 else float('nan')

        eigenvalues = np.linalg.eigvals(params.coefficient_matrix)
        statistics = {
            'a11_hat': float(eq1.coefficients[0]),
            'a12_hat': float(eq1.coefficients[1]),
            'a21_hat': float(eq2.coefficients[0]),
            'a22_hat': float(eq2.coefficients[1]),
            'residual_correlation': residual_corr,
            'spectral_radius': float(np.max(np.abs(eigenvalues))),
        }
        return {'y1': y1, 'y2': y2}, statistics, []
