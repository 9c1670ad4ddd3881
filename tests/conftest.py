"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from mathlab.rng import SFC32


@pytest.fixture
def rng():
    """Seeded numpy generator for building test datasets."""
    return np.random.default_rng(42)


@pytest.fixture
def sfc():
    """Seeded SFC32 stream using the session seeding convention."""
    return SFC32.from_seed(12345)


@pytest.fixture
def simple_regression_data(rng):
    """Single-regressor dataset y = 1 + 2x + noise."""
    n = 200
    x = rng.standard_normal(n)
    y = 1.0 + 2.0 * x + rng.standard_normal(n) * 0.5
    return x, y


@pytest.fixture
def multi_regression_data(rng):
    """Design with intercept column and two regressors."""
    n = 150
    X = np.column_stack([np.ones(n), rng.standard_normal(n), rng.standard_normal(n)])
    beta_true = np.array([1.0, -2.0, 0.5])
    y = X @ beta_true + rng.standard_normal(n) * 0.1
    return X, y, beta_true


@pytest.fixture
def collinear_data(rng):
    """Dataset with perfect collinearity (should fail)."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1.copy()  # Perfect collinearity
    X = np.column_stack([np.ones(n), x1, x2, x3])
    y = rng.standard_normal(n)
    return X, y
