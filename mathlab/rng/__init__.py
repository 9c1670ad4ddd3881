"""
Deterministic random number generation.

Public API:
    SFC32                 - seeded 4x32-bit generator, floats in [0, 1)
    Normal, StudentT, Uniform - distribution variants
    sample(rng, dist)     - one draw
    sample_many(rng, dist, n) - n sequential draws

Example:
    >>> from mathlab.rng import SFC32, Normal, sample
    >>> rng = SFC32.from_seed(12345)
    >>> x = sample(rng, Normal(mean=0.0, std=1.0))
"""

from mathlab.rng.sfc32 import SFC32
from mathlab.rng.distributions import (
    Distribution,
    Normal,
    StudentT,
    Uniform,
    nonzero_uniform,
    standard_normal,
    sample,
    sample_many,
)

__all__ = [
    "SFC32",
    "Distribution",
    "Normal",
    "StudentT",
    "Uniform",
    "nonzero_uniform",
    "standard_normal",
    "sample",
    "sample_many",
]
