"""
ADF-style unit-root test.

With lags == 0 the test regression is Δy_t = c + γ y_{t-1} + e_t, fitted
by simple OLS. With lags == p > 0 the lagged differences
Δy_{t-1}, ..., Δy_{t-p} are added and the regression is solved by the
normal equations. The statistic is the t-statistic on γ.

The critical value is a fixed illustrative threshold (-3.0 by default),
not a Dickey-Fuller table lookup by sample size.
"""

from __future__ import annotations

from typing import Any, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mathlab.core.compute.timing import Timer
from mathlab.core.compute.tolerances import ADF_CRITICAL_VALUE
from mathlab.core.exceptions import MathLabError, ValidationError
from mathlab.core.result import Result
from mathlab.core.validation import check_1d, check_array, check_finite, check_min_count
from mathlab.regression.solvers import ols, ols_multi
from mathlab.timeseries.solution import ADFParams, ADFSolution

ADFMode = Literal['strict', 'lenient']


def _test_regression(series: NDArray, lags: int) -> tuple[float, float, int]:
    """Return (t-statistic on γ, γ, observations used)."""
    diffs = np.diff(series)
    if lags == 0:
        fit = ols(series[:-1], diffs, x_name='y_lag', y_name='dy')
        return fit.t_statistic, fit.slope, fit.n

    n_rows = diffs.shape[0] - lags
    if n_rows < lags + 3:
        raise ValidationError(
            f"series: {series.shape[0]} observations are too few for {lags} lags"
        )
    response = diffs[lags:]
    columns = [np.ones(n_rows), series[lags:-1]]
    for j in range(1, lags + 1):
        columns.append(diffs[lags - j:-j])
    fit = ols_multi(response, np.column_stack(columns))
    return float(fit.t_statistics[1]), float(fit.coefficients[1]), fit.n


def adf_test(
    series: ArrayLike,
    *,
    lags: int = 0,
    mode: ADFMode = 'strict',
    critical_value: float = ADF_CRITICAL_VALUE,
) -> ADFSolution:
    """
    Test a series (typically a regression residual) for a unit root.

    Args:
        series: 1D array-like
        lags: Number of lagged differences to include
        mode: 'strict' propagates every failure. 'lenient' returns a 0.0
            statistic flagged with info['failed'] and a warning instead,
            for callers that must never halt on an unlucky random draw.
        critical_value: Rejection threshold for is_stationary

    Returns:
        ADFSolution

    Raises:
        ValidationError: Bad mode or lags (both modes); in strict mode also
            non-finite or too-short series
        DegenerateRegressorError, SingularMatrixError: strict mode only
    """
    if mode not in ('strict', 'lenient'):
        raise ValidationError(f"mode: expected 'strict' or 'lenient', got {mode!r}")
    check_min_count(lags, 0, 'lags')

    timer = Timer()
    timer.start()
    warnings: tuple[str, ...] = ()
    info: dict[str, Any] = {'method': 'adf', 'mode': mode, 'failed': False}

    try:
        with timer.section('validation'):
            arr = check_array(series, 'series')
            check_1d(arr, 'series')
            check_finite(arr, 'series')
        with timer.section('test_regression'):
            statistic, gamma, n_obs = _test_regression(arr, lags)
    except MathLabError as e:
        if mode == 'strict':
            raise
        statistic, gamma, n_obs = 0.0, float('nan'), 0
        info['failed'] = True
        info['error'] = type(e).__name__
        warnings = (f"ADF test regression failed, statistic set to 0.0: {e}",)

    timer.stop()

    params = ADFParams(
        statistic=float(statistic),
        gamma=float(gamma),
        lags=lags,
        n_obs=n_obs,
        critical_value=critical_value,
    )
    result = Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name='cpu_adf',
        warnings=warnings,
    )
    return ADFSolution(_result=result)
