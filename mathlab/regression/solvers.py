"""
Solver dispatch for regression.

Public entry points: ols(), ols_multi(), iv2sls().
"""

from numpy.typing import ArrayLike

from mathlab.regression.backends.cpu import CPUClosedFormBackend, CPUNormalEquationsBackend
from mathlab.regression.design import MultiDesign, SimpleDesign
from mathlab.regression.solution import IVSolution, MultiOLSSolution, OLSSolution


def ols(
    x: ArrayLike,
    y: ArrayLike,
    *,
    x_name: str = 'x',
    y_name: str = 'y',
) -> OLSSolution:
    """
    Simple OLS with intercept: y = a + b x + e.

    Args:
        x: Regressor, 1D array-like of length n >= 3
        y: Response, same length as x
        x_name: Regressor name used in error messages
        y_name: Response name used in error messages

    Returns:
        OLSSolution with intercept, slope, residuals, t-statistic, SSR, R²

    Raises:
        ValidationError: If inputs are non-numeric, non-finite or too short
        DimensionError: If x and y differ in length
        DegenerateRegressorError: If x has (numerically) zero variance

    Example:
        >>> fit = ols([0, 1, 2, 3], [3, 5, 7, 9])
        >>> round(fit.intercept, 9), round(fit.slope, 9)
        (3.0, 2.0)
    """
    design = SimpleDesign.build(x, y, x_name=x_name, y_name=y_name)
    result = CPUClosedFormBackend().solve(design)
    return OLSSolution(_result=result, _design=design)


def ols_multi(y: ArrayLike, X: ArrayLike) -> MultiOLSSolution:
    """
    Multi-regressor OLS via the normal equations X'X β = X'y.

    No intercept is added; include a column of ones in X for one.

    Args:
        y: Response vector (n,)
        X: Design matrix (n, k); a 1D X is treated as a single column

    Returns:
        MultiOLSSolution with coefficients, residuals, SSR, (X'X)⁻¹

    Raises:
        ValidationError: If inputs are invalid or n < k
        DimensionError: If X and y disagree on n
        SingularMatrixError: If X'X is rank-deficient
    """
    design = MultiDesign.build(y, X)
    result = CPUNormalEquationsBackend().solve(design)
    return MultiOLSSolution(_result=result, _design=design)


def iv2sls(y: ArrayLike, x: ArrayLike, z: ArrayLike) -> IVSolution:
    """
    Two-stage least squares with a single instrument.

    Stage 1 regresses x on z to get x̂; stage 2 regresses y on x̂. The
    naive regression of y on x is returned alongside for comparison.

    Args:
        y: Response
        x: Endogenous regressor
        z: Instrument

    Returns:
        IVSolution

    Raises:
        DegenerateRegressorError: If z, x̂ or x is constant
        DimensionError: If lengths differ
    """
    first_stage = ols(z, x, x_name='z', y_name='x')
    second_stage = ols(first_stage.fitted_values, y, x_name='x_hat', y_name='y')
    naive = ols(x, y, x_name='x', y_name='y')
    return IVSolution(first_stage=first_stage, second_stage=second_stage, naive=naive)
