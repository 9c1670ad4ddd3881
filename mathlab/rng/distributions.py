"""
Distribution sampler.

Distributions form a closed set of frozen variants. ``sample`` dispatches
on the variant type and raises UnsupportedDistributionError for anything
else, so an unknown distribution can never silently produce zeros.

All draws come from an explicit SFC32 passed by the caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from mathlab.core.compute.tolerances import STUDENT_T_CHI_FLOOR
from mathlab.core.exceptions import UnsupportedDistributionError, ValidationError
from mathlab.core.validation import check_min_count, check_non_negative, check_positive
from mathlab.rng.sfc32 import SFC32


@dataclass(frozen=True)
class Normal:
    """Gaussian with the given mean and standard deviation."""
    mean: float = 0.0
    std: float = 1.0

    def __post_init__(self):
        if not math.isfinite(self.mean):
            raise ValidationError(f"mean: must be finite, got {self.mean!r}")
        check_non_negative(self.std, 'std')


@dataclass(frozen=True)
class StudentT:
    """
    Student-t with ``df`` degrees of freedom scaled by ``std``.

    The chi-square denominator sums floor(df) squared normals and is
    floored at STUDENT_T_CHI_FLOOR after dividing by df. That clamp keeps
    small-df draws bounded; it is a deviation from the textbook
    construction.
    """
    df: float
    std: float = 1.0

    def __post_init__(self):
        check_positive(self.df, 'df')
        check_non_negative(self.std, 'std')


@dataclass(frozen=True)
class Uniform:
    """Continuous uniform on [low, high)."""
    low: float = 0.0
    high: float = 1.0

    def __post_init__(self):
        if not (math.isfinite(self.low) and math.isfinite(self.high)):
            raise ValidationError(
                f"Uniform bounds must be finite, got ({self.low!r}, {self.high!r})"
            )
        if self.high < self.low:
            raise ValidationError(
                f"Uniform: high ({self.high}) must be >= low ({self.low})"
            )


Distribution = Union[Normal, StudentT, Uniform]


def nonzero_uniform(rng: SFC32) -> float:
    """Draw from (0, 1): redraw while the generator returns exactly 0."""
    u = rng.random()
    while u == 0.0:
        u = rng.random()
    return u


def standard_normal(rng: SFC32) -> float:
    """Box-Muller draw using two non-zero uniforms (u first, then v)."""
    u = nonzero_uniform(rng)
    v = nonzero_uniform(rng)
    return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)


def _sample_normal(rng: SFC32, dist: Normal) -> float:
    return dist.mean + dist.std * standard_normal(rng)


def _sample_student_t(rng: SFC32, dist: StudentT) -> float:
    numerator = standard_normal(rng)
    chi = 0.0
    for _ in range(int(math.floor(dist.df))):
        z = standard_normal(rng)
        chi += z * z
    return dist.std * numerator / math.sqrt(max(STUDENT_T_CHI_FLOOR, chi / dist.df))


def _sample_uniform(rng: SFC32, dist: Uniform) -> float:
    return dist.low + (dist.high - dist.low) * rng.random()


def sample(rng: SFC32, dist: Distribution) -> float:
    """
    Draw one value from ``dist``.

    Args:
        rng: Generator to consume
        dist: A Normal, StudentT or Uniform instance

    Returns:
        The drawn value

    Raises:
        UnsupportedDistributionError: If dist is not a known variant
    """
    if isinstance(dist, Normal):
        return _sample_normal(rng, dist)
    if isinstance(dist, StudentT):
        return _sample_student_t(rng, dist)
    if isinstance(dist, Uniform):
        return _sample_uniform(rng, dist)
    raise UnsupportedDistributionError(
        f"Unsupported distribution: {dist!r}. "
        f"Expected Normal, StudentT or Uniform.",
        distribution=dist,
    )


def sample_many(rng: SFC32, dist: Distribution, n: int) -> NDArray[np.floating[Any]]:
    """Draw ``n`` values sequentially from ``dist`` into a 1D array."""
    check_min_count(n, 0, 'n')
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        out[i] = sample(rng, dist)
    return out
