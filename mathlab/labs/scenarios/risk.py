"""
Historical VaR / Expected Shortfall lab.

Draw n returns, sort ascending, and with k = floor((1 - c) n):
    VaR = r[k]
    ES  = mean(r[0:k])
Both are reported as returns (negative numbers for losses).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from mathlab.core.compute.timing import Timer
from mathlab.core.exceptions import UnsupportedDistributionError, ValidationError
from mathlab.core.validation import check_in_open_interval, check_min_count
from mathlab.descriptive import describe
from mathlab.labs._common import LabId
from mathlab.labs.base import Lab, Series, Statistics
from mathlab.rng.distributions import Distribution, Normal, StudentT, Uniform, sample_many


def tail_count(n: int, confidence: float) -> int:
    """Number of observations in the lower tail, floor((1 - c) n)."""
    # rounding guard: (1 - 0.95) * 1000 is 50.000000000000004
    return int(math.floor((1.0 - confidence) * n + 1e-9))


@dataclass(frozen=True)
class RiskParams:
    n: int = 1000
    confidence: float = 0.95
    distribution: Distribution = field(default_factory=Normal)

    def __post_init__(self):
        check_min_count(self.n, 2, 'n')
        check_in_open_interval(self.confidence, 0.0, 1.0, 'confidence')
        if not isinstance(self.distribution, (Normal, StudentT, Uniform)):
            raise UnsupportedDistributionError(
                f"distribution: unsupported {self.distribution!r}",
                distribution=self.distribution,
            )
        k = tail_count(self.n, self.confidence)
        if k < 1 or k >= self.n:
            raise ValidationError(
                f"n={self.n} with confidence={self.confidence} leaves {k} tail "
                f"observations; need between 1 and n - 1"
            )


class RiskLab(Lab[RiskParams]):
    """Value-at-Risk and Expected Shortfall on simulated returns."""

    lab_id = LabId.RISK
    params_type = RiskParams

    def _run(self, params: RiskParams, timer: Timer) -> tuple[Series, Statistics, list[str]]:
        with timer.section('draws'):
            returns = np.sort(sample_many(self.rng, params.distribution, params.n))

        k = tail_count(params.n, params.confidence)
        moments = describe(returns)
        statistics = {
            'var': float(returns[k]),
            'expected_shortfall': float(np.mean(returns[:k])),
            'mean': moments.mean,
            'variance': moments.variance,
            'skewness': moments.skewness,
            'kurtosis': moments.kurtosis,
        }
        return {'returns': returns}, statistics, []
