"""
Tests for simple OLS, normal-equation OLS and 2SLS.

Reference values come from scipy.stats.linregress and numpy.linalg.lstsq.
"""

import numpy as np
import pytest
from scipy import stats

from mathlab.core.exceptions import (
    DegenerateRegressorError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)
from mathlab.regression import iv2sls, ols, ols_multi


# ═══════════════════════════════════════════════════════════════════════
# Simple OLS
# ═══════════════════════════════════════════════════════════════════════


class TestOLSExactFit:

    def test_recovers_line(self):
        x = np.arange(10.0)
        fit = ols(x, 3.0 + 2.0 * x)
        assert fit.intercept == pytest.approx(3.0, abs=1e-12)
        assert fit.slope == pytest.approx(2.0, abs=1e-12)
        assert fit.ssr == pytest.approx(0.0, abs=1e-20)
        assert fit.r_squared == pytest.approx(1.0)

    def test_residuals_zero(self):
        x = np.array([0.0, 1.0, 2.0, 3.0])
        fit = ols(x, 3.0 + 2.0 * x)
        np.testing.assert_allclose(fit.residuals, 0.0, atol=1e-12)

    def test_negative_slope(self):
        x = np.linspace(-1.0, 1.0, 7)
        fit = ols(x, 0.5 - 4.0 * x)
        assert fit.slope == pytest.approx(-4.0)
        assert fit.intercept == pytest.approx(0.5)


class TestOLSAgainstScipy:

    def test_coefficients(self, simple_regression_data):
        x, y = simple_regression_data
        ref = stats.linregress(x, y)
        fit = ols(x, y)
        assert fit.slope == pytest.approx(ref.slope, rel=1e-10)
        assert fit.intercept == pytest.approx(ref.intercept, rel=1e-10)

    def test_t_statistic_and_p_value(self, simple_regression_data):
        x, y = simple_regression_data
        ref = stats.linregress(x, y)
        fit = ols(x, y)
        assert fit.t_statistic == pytest.approx(ref.slope / ref.stderr, rel=1e-10)
        assert fit.standard_error == pytest.approx(ref.stderr, rel=1e-10)
        assert fit.p_value == pytest.approx(ref.pvalue, rel=1e-6, abs=1e-300)

    def test_r_squared(self, simple_regression_data):
        x, y = simple_regression_data
        ref = stats.linregress(x, y)
        assert ols(x, y).r_squared == pytest.approx(ref.rvalue ** 2, rel=1e-10)

    def test_residuals_orthogonal_to_regressor(self, simple_regression_data):
        x, y = simple_regression_data
        fit = ols(x, y)
        assert abs(fit.residuals.sum()) < 1e-9
        assert abs(fit.residuals @ x) < 1e-9

    def test_fitted_plus_residuals_is_y(self, simple_regression_data):
        x, y = simple_regression_data
        fit = ols(x, y)
        np.testing.assert_allclose(fit.fitted_values + fit.residuals, y, atol=1e-12)

    def test_predict(self, simple_regression_data):
        x, y = simple_regression_data
        fit = ols(x, y)
        np.testing.assert_allclose(fit.predict([0.0, 1.0]), [fit.intercept, fit.intercept + fit.slope])


class TestOLSErrors:

    def test_constant_regressor(self):
        with pytest.raises(DegenerateRegressorError) as exc_info:
            ols([5.0, 5.0, 5.0, 5.0], [1.0, 2.0, 3.0, 4.0])
        assert exc_info.value.regressor_name == 'x'
        assert exc_info.value.sum_of_squares == pytest.approx(0.0)

    def test_regressor_name_in_error(self):
        with pytest.raises(DegenerateRegressorError, match="z"):
            ols([1.0, 1.0, 1.0], [1.0, 2.0, 3.0], x_name='z')

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            ols([1.0, 2.0, 3.0], [1.0, 2.0])

    def test_too_few_samples(self):
        with pytest.raises(ValidationError, match="at least 3"):
            ols([1.0, 2.0], [1.0, 2.0])

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            ols([1.0, np.nan, 3.0], [1.0, 2.0, 3.0])

    def test_overflowing_sums_raise(self):
        with pytest.raises(NumericalError, match="overflow"):
            ols([1e200, -1e200, 3e200], [1.0, 2.0, 3.0])

    def test_overflow_is_not_degenerate(self):
        with pytest.raises(NumericalError) as exc_info:
            ols([1.0, 2.0, 3.0], [-1e308, 0.0, 1e308], x_name="z")
        assert not isinstance(exc_info.value, DegenerateRegressorError)
        assert "z" in str(exc_info.value)


class TestOLSResultEnvelope:

    def test_backend_and_info(self, simple_regression_data):
        fit = ols(*simple_regression_data)
        assert fit.backend_name == 'cpu_closed_form'
        assert fit.info['n'] == 200
        assert fit.df_residual == 198
        assert fit.warnings == ()
        assert 'total_seconds' in fit.timing

    def test_summary_and_repr(self, simple_regression_data):
        fit = ols(*simple_regression_data)
        assert "Simple Linear Regression" in fit.summary()
        assert "OLSSolution" in repr(fit)


# ═══════════════════════════════════════════════════════════════════════
# Normal-equation OLS
# ═══════════════════════════════════════════════════════════════════════


class TestOLSMulti:

    def test_matches_lstsq(self, multi_regression_data):
        X, y, _ = multi_regression_data
        fit = ols_multi(y, X)
        expected, *_ = np.linalg.lstsq(X, y, rcond=None)
        np.testing.assert_allclose(fit.coefficients, expected, rtol=1e-9, atol=1e-12)

    def test_recovers_true_beta(self, multi_regression_data):
        X, y, beta_true = multi_regression_data
        np.testing.assert_allclose(ols_multi(y, X).coefficients, beta_true, atol=0.05)

    def test_standard_errors(self, multi_regression_data):
        X, y, _ = multi_regression_data
        fit = ols_multi(y, X)
        sigma_sq = fit.ssr / (X.shape[0] - X.shape[1])
        expected = np.sqrt(sigma_sq * np.diag(np.linalg.inv(X.T @ X)))
        np.testing.assert_allclose(fit.standard_errors, expected, rtol=1e-8)
        np.testing.assert_allclose(fit.t_statistics, fit.coefficients / expected, rtol=1e-8)

    def test_agrees_with_simple_ols(self, simple_regression_data):
        x, y = simple_regression_data
        multi = ols_multi(y, np.column_stack([np.ones_like(x), x]))
        simple = ols(x, y)
        assert multi.coefficients[0] == pytest.approx(simple.intercept, rel=1e-9)
        assert multi.coefficients[1] == pytest.approx(simple.slope, rel=1e-9)
        assert multi.t_statistics[1] == pytest.approx(simple.t_statistic, rel=1e-8)

    def test_xtx_inverse(self, multi_regression_data):
        X, y, _ = multi_regression_data
        fit = ols_multi(y, X)
        np.testing.assert_allclose(fit.xtx_inverse @ (X.T @ X), np.eye(3), atol=1e-9)

    def test_collinear_raises(self, collinear_data):
        X, y = collinear_data
        with pytest.raises(SingularMatrixError) as exc_info:
            ols_multi(y, X)
        assert exc_info.value.matrix_name == "X'X"

    def test_one_dimensional_design(self):
        x = np.array([1.0, 2.0, 3.0, 4.0])
        fit = ols_multi(2.0 * x, x)
        assert fit.k == 1
        assert fit.coefficients[0] == pytest.approx(2.0)

    def test_row_mismatch(self):
        with pytest.raises(DimensionError):
            ols_multi(np.ones(5), np.ones((4, 2)))

    def test_backend_name(self, multi_regression_data):
        X, y, _ = multi_regression_data
        assert ols_multi(y, X).backend_name == 'cpu_normal_equations'


# ═══════════════════════════════════════════════════════════════════════
# 2SLS
# ═══════════════════════════════════════════════════════════════════════


def _endogenous_data(rng, n=2000, endogeneity=0.8):
    z = rng.standard_normal(n)
    u = rng.standard_normal(n)
    x = 0.8 * z + endogeneity * u + rng.standard_normal(n) * 0.5
    y = 1.0 + 1.5 * x + u
    return x, y, z


class TestIV2SLS:

    def test_single_instrument_ratio(self, rng):
        """With one instrument the 2SLS slope is cov(z, y) / cov(z, x)."""
        x, y, z = _endogenous_data(rng)
        fit = iv2sls(y, x, z)
        expected = np.cov(z, y)[0, 1] / np.cov(z, x)[0, 1]
        assert fit.iv_slope == pytest.approx(expected, rel=1e-9)

    def test_iv_closer_than_ols(self, rng):
        x, y, z = _endogenous_data(rng)
        fit = iv2sls(y, x, z)
        assert abs(fit.iv_slope - 1.5) < abs(fit.ols_slope - 1.5)
        assert fit.ols_slope > 1.5

    def test_stage_wiring(self, rng):
        x, y, z = _endogenous_data(rng, n=300)
        fit = iv2sls(y, x, z)
        np.testing.assert_allclose(fit.x_hat, ols(z, x).fitted_values)
        assert fit.ols_slope == pytest.approx(ols(x, y).slope)
        assert fit.instrument_t_statistic == pytest.approx(ols(z, x).t_statistic)

    def test_constant_instrument(self):
        with pytest.raises(DegenerateRegressorError) as exc_info:
            iv2sls([1.0, 2.0, 3.0, 4.0], [1.0, 3.0, 2.0, 4.0], [5.0, 5.0, 5.0, 5.0])
        assert exc_info.value.regressor_name == 'z'

    def test_summary(self, rng):
        x, y, z = _endogenous_data(rng, n=100)
        fit = iv2sls(y, x, z)
        assert "2SLS" in fit.summary()


class TestBackendProtocol:

    def test_backends_satisfy_protocol(self):
        from mathlab.core import Backend
        from mathlab.regression.backends import CPUClosedFormBackend, CPUNormalEquationsBackend

        assert isinstance(CPUClosedFormBackend(), Backend)
        assert isinstance(CPUNormalEquationsBackend(), Backend)
