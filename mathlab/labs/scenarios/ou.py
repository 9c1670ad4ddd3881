"""
Ornstein-Uhlenbeck lab.

Euler discretization with unit time step:
    p_t = p_{t-1} + θ (μ - p_{t-1}) + σ ε_t
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from mathlab.core.compute.timing import Timer
from mathlab.core.exceptions import ValidationError
from mathlab.core.validation import check_min_count, check_non_negative, check_positive
from mathlab.descriptive import mean, variance
from mathlab.labs._common import LabId
from mathlab.labs.base import Lab, Series, Statistics
from mathlab.rng.distributions import Normal, sample

_STANDARD_NORMAL = Normal()


@dataclass(frozen=True)
class OUParams:
    n: int = 200
    reversion: float = 0.1
    long_run_mean: float = 0.0
    sigma: float = 0.5
    start: float = 0.0

    def __post_init__(self):
        check_min_count(self.n, 2, 'n')
        check_positive(self.reversion, 'reversion')
        check_non_negative(self.sigma, 'sigma')
        for name in ('long_run_mean', 'start'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name}: must be finite, got {value!r}")


class OULab(Lab[OUParams]):
    """Mean-reverting path."""

    lab_id = LabId.OU
    params_type = OUParams

    def _run(self, params: OUParams, timer: Timer) -> tuple[Series, Statistics, list[str]]:
        if params.reversion >= 2.0:
            msg = (
                f"reversion={params.reversion} >= 2: the discretized path "
                f"oscillates with growing amplitude instead of reverting"
            )
            self._alert(msg)

        path = np.empty(params.n)
        path[0] = params.start
        with timer.section('draws'):
            for i in range(1, params.n):
                prev = path[i - 1]
                path[i] = (prev + params.reversion * (params.long_run_mean - prev)
                           + params.sigma * sample(self.rng, _STANDARD_NORMAL))

        path_mean = mean(path)
        statistics = {
            'final_value': float(path[-1]),
            'sample_mean': path_mean,
            'sample_variance': variance(path, mean=path_mean),
            'half_life': math.log(2.0) / params.reversion,
        }
        return {'path': path}, statistics, []
