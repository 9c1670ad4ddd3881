"""
Metropolis sampler lab.

Target density (unnormalized): π(x) = exp(-½ ((x - m) / s)²)
Proposal: x' = x + (U - 0.5) w, symmetric, so the acceptance ratio is
π(x') / π(x). The proposal uniform is drawn before the acceptance uniform.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from mathlab.core.compute.timing import Timer
from mathlab.core.exceptions import ValidationError
from mathlab.core.validation import check_min_count, check_positive
from mathlab.descriptive import mean, variance
from mathlab.labs._common import LabId
from mathlab.labs.base import Lab, Series, Statistics

LOW_ACCEPTANCE_RATE = 0.1


@dataclass(frozen=True)
class MCMCParams:
    n_steps: int = 2000
    target_mean: float = 5.0
    target_std: float = 2.0
    proposal_width: float = 2.0
    start: float = 0.0

    def __post_init__(self):
        check_min_count(self.n_steps, 1, 'n_steps')
        check_positive(self.target_std, 'target_std')
        check_positive(self.proposal_width, 'proposal_width')
        for name in ('target_mean', 'start'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name}: must be finite, got {value!r}")


class MCMCLab(Lab[MCMCParams]):
    """Random-walk Metropolis chain."""

    lab_id = LabId.MCMC
    params_type = MCMCParams

    def _run(self, params: MCMCParams, timer: Timer) -> tuple[Series, Statistics, list[str]]:
        m, s, w = params.target_mean, params.target_std, params.proposal_width

        def log_target(x: float) -> float:
            return -0.5 * ((x - m) / s) ** 2

        chain = np.empty(params.n_steps + 1)
        chain[0] = current = params.start
        accepted = 0

        with timer.section('sampling'):
            for i in range(1, params.n_steps + 1):
                proposal = current + (self.rng.random() - 0.5) * w
                # log-space ratio; equal to π(x') / π(x) without underflow
                ratio = math.exp(min(0.0, log_target(proposal) - log_target(current)))
                if self.rng.random() < ratio:
                    current = proposal
                    accepted += 1
                chain[i] = current

        acceptance_rate = accepted / params.n_steps
        if acceptance_rate < LOW_ACCEPTANCE_RATE:
            msg = (
                f"acceptance rate {acceptance_rate:.3f} is below {LOW_ACCEPTANCE_RATE}; "
                f"consider a smaller proposal_width"
            )
            self._alert(msg)

        chain_mean = mean(chain)
        statistics = {
            'acceptance_rate': acceptance_rate,
            'chain_mean': chain_mean,
            'chain_std': math.sqrt(variance(chain, mean=chain_mean)),
        }
        return {'chain': chain}, statistics, []
