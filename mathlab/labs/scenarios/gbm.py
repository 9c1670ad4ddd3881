"""
Geometric Brownian motion lab.

    S_t = S_{t-1} exp((μ - σ²/2) + σ ε_t)

Log-returns are the drawn exponents themselves, so their moments stay
finite when a large volatility drives the price to 0 or inf.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from mathlab.core.compute.timing import Timer
from mathlab.core.exceptions import ValidationError
from mathlab.core.validation import check_min_count, check_non_negative, check_positive
from mathlab.descriptive import describe
from mathlab.labs._common import LabId
from mathlab.labs.base import Lab, Series, Statistics
from mathlab.rng.distributions import Normal, sample

_STANDARD_NORMAL = Normal()


@dataclass(frozen=True)
class GBMParams:
    n: int = 252
    s0: float = 100.0
    drift: float = -0.005
    volatility: float = 0.05

    def __post_init__(self):
        check_min_count(self.n, 3, 'n')
        check_positive(self.s0, 's0')
        check_non_negative(self.volatility, 'volatility')
        if not math.isfinite(self.drift):
            raise ValidationError(f"drift: must be finite, got {self.drift!r}")
        if not math.isfinite(self.drift - 0.5 * self.volatility * self.volatility):
            raise ValidationError(
                f"volatility: drift - volatility**2 / 2 must be finite, got volatility={self.volatility!r}"
            )


class GBMLab(Lab[GBMParams]):
    """Discretized GBM price path."""

    lab_id = LabId.GBM
    params_type = GBMParams

    def _run(self, params: GBMParams, timer: Timer) -> tuple[Series, Statistics, list[str]]:
        mu, sigma = params.drift, params.volatility
        step_drift = mu - 0.5 * sigma * sigma
        price = np.empty(params.n)
        price[0] = params.s0
        # recorded as drawn; np.log(price) loses them once the price underflows to 0
        log_returns = np.empty(params.n - 1)

        with timer.section('draws'), np.errstate(over='ignore', invalid='ignore'):
            for i in range(1, params.n):
                log_returns[i - 1] = step_drift + sigma * sample(self.rng, _STANDARD_NORMAL)
                price[i] = price[i - 1] * np.exp(log_returns[i - 1])

        moments = describe(log_returns)
        statistics = {
            'final_price': float(price[-1]),
            'total_return': float(price[-1] / params.s0 - 1.0),
            'log_return_mean': moments.mean,
            'log_return_std': moments.sd,
        }
        return {'price': price, 'log_returns': log_returns}, statistics, []
