"""
Descriptive moments.

mean, variance, skewness and kurtosis take a 1D sample. Higher moments
accept a precomputed mean so callers that already have it avoid a second
pass.

Small samples return exactly 0.0 instead of failing:
    variance  n < 2
    skewness  n < 3
    kurtosis  n < 4
A constant sample (zero standard deviation) has undefined skewness and
kurtosis and returns NaN.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mathlab.core.compute.timing import Timer
from mathlab.core.result import Result
from mathlab.core.validation import check_1d, check_array, check_finite, check_min_samples
from mathlab.descriptive.solution import DescriptiveParams, DescriptiveSolution


def _as_sample(x: ArrayLike) -> NDArray[np.floating[Any]]:
    arr = check_array(x, 'x')
    check_1d(arr, 'x')
    check_finite(arr, 'x')
    return arr


def mean(x: ArrayLike) -> float:
    """
    Arithmetic mean.

    Raises:
        ValidationError: If x is empty or non-finite
    """
    arr = _as_sample(x)
    check_min_samples(arr, 1, 'x')
    return float(np.sum(arr) / arr.shape[0])


def variance(x: ArrayLike, *, mean: float | None = None) -> float:
    """Sample variance with n - 1 divisor; 0.0 when n < 2."""
    arr = _as_sample(x)
    n = arr.shape[0]
    if n < 2:
        return 0.0
    mu = _mean(arr) if mean is None else mean
    return float(np.sum((arr - mu) ** 2) / (n - 1))


def skewness(x: ArrayLike, *, mean: float | None = None) -> float:
    """
    Bias-adjusted skewness, n / ((n-1)(n-2)) Σ((x - m)/s)³.

    Returns 0.0 when n < 3.
    """
    arr = _as_sample(x)
    n = arr.shape[0]
    if n < 3:
        return 0.0
    mu = _mean(arr) if mean is None else mean
    s = np.sqrt(variance(arr, mean=mu))
    if s == 0:
        return float('nan')
    z = (arr - mu) / s
    return float(n / ((n - 1) * (n - 2)) * np.sum(z ** 3))


def kurtosis(x: ArrayLike, *, mean: float | None = None) -> float:
    """
    Bias-adjusted excess kurtosis.

        n(n+1) / ((n-1)(n-2)(n-3)) Σ((x - m)/s)⁴ - 3(n-1)² / ((n-2)(n-3))

    Returns 0.0 when n < 4.
    """
    arr = _as_sample(x)
    n = arr.shape[0]
    if n < 4:
        return 0.0
    mu = _mean(arr) if mean is None else mean
    s = np.sqrt(variance(arr, mean=mu))
    if s == 0:
        return float('nan')
    z = (arr - mu) / s
    scale = n * (n + 1) / ((n - 1) * (n - 2) * (n - 3))
    correction = 3 * (n - 1) ** 2 / ((n - 2) * (n - 3))
    return float(scale * np.sum(z ** 4) - correction)


def _mean(arr: NDArray) -> float:
    return float(np.sum(arr) / arr.shape[0])


def describe(x: ArrayLike) -> DescriptiveSolution:
    """
    All descriptive moments at once.

    Computes n, mean, variance, standard deviation, skewness, kurtosis,
    min and max, sharing the mean across the higher moments.

    Raises:
        ValidationError: If x is empty, not 1D or non-finite
    """
    timer = Timer()
    timer.start()

    arr = _as_sample(x)
    check_min_samples(arr, 1, 'x')

    with timer.section('moments'):
        mu = _mean(arr)
        var = variance(arr, mean=mu)
        skew = skewness(arr, mean=mu)
        kurt = kurtosis(arr, mean=mu)

    timer.stop()

    params = DescriptiveParams(
        n=arr.shape[0],
        mean=mu,
        variance=var,
        sd=float(np.sqrt(var)),
        skewness=skew,
        kurtosis=kurt,
        minimum=float(np.min(arr)),
        maximum=float(np.max(arr)),
    )
    result = Result(
        params=params,
        info={'method': 'moments'},
        timing=timer.result(),
        backend_name='cpu_moments',
    )
    return DescriptiveSolution(_result=result)
