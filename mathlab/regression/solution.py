"""
Regression solution types.

Contains the parameter payloads produced by backends and the user-facing
solution wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from mathlab.core.result import Result

if TYPE_CHECKING:
    from mathlab.regression.design import MultiDesign, SimpleDesign


@dataclass(frozen=True)
class SimpleOLSParams:
    """
    Parameter payload for single-regressor OLS.

    sxx is the centered sum of squares of the regressor, Σ(x - x̄)².
    """
    intercept: float
    slope: float
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    ssr: float
    tss: float
    sxx: float
    t_statistic: float
    df_residual: int


@dataclass(frozen=True)
class MultiOLSParams:
    """Parameter payload for normal-equation OLS."""
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    ssr: float
    tss: float
    xtx_inverse: NDArray[np.floating[Any]]
    n: int
    k: int
    df_residual: int


def _r_squared(ssr: float, tss: float) -> float:
    if tss == 0:
        return 1.0 if ssr == 0 else 0.0
    return 1.0 - (ssr / tss)


@dataclass
class OLSSolution:
    """
    User-facing single-regressor OLS results.

    The t-statistic is slope / sqrt((ssr / (n - 2)) / sxx). A perfect fit
    (ssr == 0) gives an infinite t-statistic.
    """
    _result: Result[SimpleOLSParams]
    _design: 'SimpleDesign'

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def ssr(self) -> float:
        """Sum of squared residuals."""
        return self._result.params.ssr

    @property
    def r_squared(self) -> float:
        return _r_squared(self.ssr, self._result.params.tss)

    @property
    def t_statistic(self) -> float:
        return self._result.params.t_statistic

    @property
    def standard_error(self) -> float:
        """Standard error of the slope."""
        p = self._result.params
        return float(np.sqrt((p.ssr / p.df_residual) / p.sxx))

    @property
    def p_value(self) -> float:
        """Two-sided p-value of the slope t-statistic (n - 2 df)."""
        t = self.t_statistic
        if np.isnan(t):
            return float('nan')
        return float(2.0 * stats.t.sf(abs(t), self.df_residual))

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def n(self) -> int:
        return self._design.n

    def predict(self, x) -> NDArray[np.floating[Any]]:
        """Evaluate intercept + slope * x."""
        return self.intercept + self.slope * np.asarray(x, dtype=np.float64)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary."""
        lines = [
            "Simple Linear Regression",
            "=" * 60,
            f"Response: {self._design.y_name}   Regressor: {self._design.x_name}",
            f"Observations: {self.n}",
            f"Intercept: {self.intercept:.6f}",
            f"Slope: {self.slope:.6f}  (SE {self.standard_error:.6f})",
            f"t value: {self.t_statistic:.3f}  p-value: {self.p_value:.4g}",
            f"SSR: {self.ssr:.6f}",
            f"R-squared: {self.r_squared:.6f}",
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"OLSSolution(n={self.n}, intercept={self.intercept:.4f}, "
            f"slope={self.slope:.4f}, t={self.t_statistic:.3f})"
        )


@dataclass
class MultiOLSSolution:
    """
    User-facing multi-regressor OLS results.

    Standard errors are sqrt(σ² diag((X'X)⁻¹)) with σ² = ssr / (n - k).
    """
    _result: Result[MultiOLSParams]
    _design: 'MultiDesign'

    # Cached computations
    _standard_errors: NDArray[np.floating[Any]] | None = None
    _t_statistics: NDArray[np.floating[Any]] | None = None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def ssr(self) -> float:
        return self._result.params.ssr

    @property
    def xtx_inverse(self) -> NDArray[np.floating[Any]]:
        return self._result.params.xtx_inverse

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def k(self) -> int:
        return self._result.params.k

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def r_squared(self) -> float:
        """Centered R². Only meaningful when X contains a constant column."""
        return _r_squared(self.ssr, self._result.params.tss)

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """Coefficient standard errors; NaN when there are no residual df."""
        if self._standard_errors is not None:
            return self._standard_errors

        if self.df_residual <= 0:
            self._standard_errors = np.full(self.k, np.nan, dtype=np.float64)
            return self._standard_errors

        sigma_sq = self.ssr / self.df_residual
        diag = np.clip(np.diag(self.xtx_inverse), 0.0, None)
        self._standard_errors = np.sqrt(sigma_sq * diag)
        return self._standard_errors

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for coefficients."""
        if self._t_statistics is not None:
            return self._t_statistics

        with np.errstate(divide='ignore', invalid='ignore'):
            self._t_statistics = self.coefficients / self.standard_errors
        return self._t_statistics

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values (n - k df)."""
        if self.df_residual <= 0:
            return np.full(self.k, np.nan, dtype=np.float64)
        return 2.0 * stats.t.sf(np.abs(self.t_statistics), self.df_residual)

    def predict(self, X) -> NDArray[np.floating[Any]]:
        """Evaluate X @ β."""
        return np.asarray(X, dtype=np.float64) @ self.coefficients

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a coefficient table."""
        lines = [
            "Linear Regression (normal equations)",
            "=" * 60,
            f"Observations: {self.n}",
            f"Regressors: {self.k}",
            f"SSR: {self.ssr:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'Index':<8} {'Estimate':>14} {'Std.Error':>12} {'t value':>10}",
            "-" * 60,
        ]
        for i, (coef, se, t) in enumerate(zip(
            self.coefficients, self.standard_errors, self.t_statistics
        )):
            se_str = f"{se:12.6f}" if not np.isnan(se) else "          NA"
            t_str = f"{t:10.3f}" if np.isfinite(t) else "        NA"
            lines.append(f"  β[{i}]: {coef:14.6f} {se_str} {t_str}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"MultiOLSSolution(n={self.n}, k={self.k}, ssr={self.ssr:.4f})"


@dataclass
class IVSolution:
    """
    Two-stage least squares with a single instrument.

    Holds all three regressions: the first stage (x on z), the second
    stage (y on x̂) and the naive OLS (y on x) it is contrasted with.
    """
    first_stage: OLSSolution
    second_stage: OLSSolution
    naive: OLSSolution

    @property
    def iv_slope(self) -> float:
        return self.second_stage.slope

    @property
    def iv_intercept(self) -> float:
        return self.second_stage.intercept

    @property
    def ols_slope(self) -> float:
        return self.naive.slope

    @property
    def ols_intercept(self) -> float:
        return self.naive.intercept

    @property
    def x_hat(self) -> NDArray[np.floating[Any]]:
        """First-stage fitted values of the endogenous regressor."""
        return self.first_stage.fitted_values

    @property
    def instrument_t_statistic(self) -> float:
        """First-stage t-statistic, a rough instrument-strength check."""
        return self.first_stage.t_statistic

    def summary(self) -> str:
        return "\n".join([
            "Instrumental Variables (2SLS)",
            "=" * 60,
            f"OLS slope:  {self.ols_slope:.6f}",
            f"2SLS slope: {self.iv_slope:.6f}",
            f"First-stage t: {self.instrument_t_statistic:.3f}",
        ])

    def __repr__(self) -> str:
        return f"IVSolution(ols_slope={self.ols_slope:.4f}, iv_slope={self.iv_slope:.4f})"
