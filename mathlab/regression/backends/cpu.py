"""
CPU backends for linear regression.

CPUClosedFormBackend: single-regressor OLS from centered sums.
CPUNormalEquationsBackend: X'X β = X'y solved through the Gauss-Jordan
inverse from mathlab.linalg.
"""

from typing import Any

import numpy as np

from mathlab.core.compute.timing import Timer
from mathlab.core.compute.tolerances import DEGENERATE_TOLERANCE
from mathlab.core.exceptions import DegenerateRegressorError, NumericalError
from mathlab.core.result import Result
from mathlab.linalg import invert, multiply, transpose
from mathlab.regression.design import MultiDesign, SimpleDesign
from mathlab.regression.solution import MultiOLSParams, SimpleOLSParams


class CPUClosedFormBackend:
    """
    Closed-form simple regression.

    Implements the Backend protocol for SimpleDesign -> SimpleOLSParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: SimpleDesign) -> Result[SimpleOLSParams]:
        """
        Fit y = a + b x.

        Algorithm:
            1. sxy = Σ(x - x̄)(y - ȳ), sxx = Σ(x - x̄)²
            2. b = sxy / sxx, a = ȳ - b x̄
            3. t = b / sqrt((ssr / (n - 2)) / sxx)

        Raises:
            NumericalError: If sxx or sxy is not finite
            DegenerateRegressorError: If sxx < DEGENERATE_TOLERANCE
        """
        timer = Timer()
        timer.start()

        x, y = design.x, design.y
        n = design.n

        with timer.section('moments'):
            with np.errstate(over='ignore', invalid='ignore'):
                x_mean = float(np.mean(x))
                y_mean = float(np.mean(y))
                dx = x - x_mean
                sxy = float(dx @ (y - y_mean))
                sxx = float(dx @ dx)

        if not (np.isfinite(sxx) and np.isfinite(sxy)):
            raise NumericalError(
                f"{design.x_name}: centered sums of squares overflow "
                f"(sxx={sxx:.3e}, sxy={sxy:.3e})"
            )

        if abs(sxx) < DEGENERATE_TOLERANCE:
            raise DegenerateRegressorError(
                f"{design.x_name}: regressor is constant "
                f"(centered sum of squares {sxx:.3e} < {DEGENERATE_TOLERANCE:.0e})",
                regressor_name=design.x_name,
                sum_of_squares=sxx,
            )

        with timer.section('coefficients'):
            slope = sxy / sxx
            intercept = y_mean - slope * x_mean
            fitted_values = intercept + slope * x
            residuals = y - fitted_values

        with timer.section('statistics'):
            ssr = float(residuals @ residuals)
            tss = float(np.sum((y - y_mean) ** 2))
            df_residual = n - 2
            with np.errstate(divide='ignore', invalid='ignore'):
                t_statistic = float(np.float64(slope) / np.sqrt((ssr / df_residual) / sxx))

        timer.stop()

        params = SimpleOLSParams(
            intercept=intercept,
            slope=slope,
            residuals=residuals,
            fitted_values=fitted_values,
            ssr=ssr,
            tss=tss,
            sxx=sxx,
            t_statistic=t_statistic,
            df_residual=df_residual,
        )

        info: dict[str, Any] = {
            'method': 'closed_form',
            'n': n,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUNormalEquationsBackend:
    """
    Normal-equations OLS.

    Implements the Backend protocol for MultiDesign -> MultiOLSParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_normal_equations'

    def solve(self, design: MultiDesign) -> Result[MultiOLSParams]:
        """
        Solve X'X β = X'y via (X'X)⁻¹.

        Raises:
            SingularMatrixError: If X'X is rank-deficient
        """
        timer = Timer()
        timer.start()

        X, y = design.X, design.y
        n, k = design.n, design.k

        with timer.section('normal_equations'):
            Xt = transpose(X)
            XtX = multiply(Xt, X)
            Xty = multiply(Xt, y)

        with timer.section('inversion'):
            XtX_inv = invert(XtX, name="X'X")

        with timer.section('residuals'):
            coefficients = multiply(XtX_inv, Xty)
            fitted_values = multiply(X, coefficients)
            residuals = y - fitted_values

        with timer.section('statistics'):
            ssr = float(residuals @ residuals)
            tss = float(np.sum((y - np.mean(y)) ** 2))

        timer.stop()

        params = MultiOLSParams(
            coefficients=coefficients,
            residuals=residuals,
            fitted_values=fitted_values,
            ssr=ssr,
            tss=tss,
            xtx_inverse=XtX_inv,
            n=n,
            k=k,
            df_residual=n - k,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'n': n,
            'k': k,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
