"""
Regression designs.

A design holds validated, immutable inputs for one estimation call.
Validation happens once here; backends trust what they receive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mathlab.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
)

# Two coefficients plus at least one residual degree of freedom
MIN_SIMPLE_SAMPLES = 3


@dataclass(frozen=True)
class SimpleDesign:
    """
    Single-regressor design: y = a + b x + e.

    Construction:
        SimpleDesign.build(x, y)
        SimpleDesign.build(x, y, x_name='z', y_name='x')   # names for errors
    """
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    x_name: str
    y_name: str

    @classmethod
    def build(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        x_name: str = 'x',
        y_name: str = 'y',
    ) -> SimpleDesign:
        """Validate and freeze the regressor and response."""
        x_arr = check_array(x, x_name)
        y_arr = check_array(y, y_name)
        check_1d(x_arr, x_name)
        check_1d(y_arr, y_name)
        check_consistent_length(x_arr, y_arr, names=(x_name, y_name))
        check_min_samples(x_arr, MIN_SIMPLE_SAMPLES, x_name)
        check_finite(x_arr, x_name)
        check_finite(y_arr, y_name)
        return cls(x=x_arr, y=y_arr, x_name=x_name, y_name=y_name)

    @property
    def n(self) -> int:
        """Number of observations."""
        return self.x.shape[0]


@dataclass(frozen=True)
class MultiDesign:
    """
    Multi-regressor design: y = X β + e.

    No intercept column is added; callers include a column of ones when
    they want one.
    """
    X: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]

    @classmethod
    def build(cls, y: ArrayLike, X: ArrayLike) -> MultiDesign:
        """Validate and freeze the response and design matrix."""
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))
        check_min_samples(X_arr, X_arr.shape[1], 'X')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')
        return cls(X=X_arr, y=y_arr)

    @property
    def n(self) -> int:
        """Number of observations."""
        return self.X.shape[0]

    @property
    def k(self) -> int:
        """Number of regressors (columns of X)."""
        return self.X.shape[1]
