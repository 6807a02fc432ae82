"""
Shared fixtures: a seeded generator and a few canonical inputs.
"""

import numpy as np
import pytest

SEED = 42


@pytest.fixture
def rng():
    return np.random.default_rng(SEED)


@pytest.fixture
def well_conditioned(rng):
    """4x4 with a dominant diagonal, so inv() never hits the singularity check."""
    return rng.standard_normal((4, 4)) + 4.0 * np.eye(4)


@pytest.fixture
def simple_regression_data(rng):
    """
    100 observations of y = 3 + x1 - 2·x2 + 0.5·x3 plus N(0, 0.01) noise.

    Returns (X, y, slopes) with X of shape (100, 3).
    """
    slopes = np.array([1.0, -2.0, 0.5])
    X = rng.standard_normal((100, slopes.size))
    noise = 0.1 * rng.standard_normal(100)
    return X, 3.0 + X @ slopes + noise, slopes


@pytest.fixture
def collinear_data(rng):
    """Three predictors where the third is the sum of the first two."""
    a, b = rng.standard_normal((2, 100))
    return np.column_stack([a, b, a + b]), rng.standard_normal(100)
