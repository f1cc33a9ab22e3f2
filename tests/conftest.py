"""
Pytest configuration and fixtures for yjtransform tests.
"""

import pytest
import numpy as np
import pandas as pd


# Shape parameters covering both closed forms, the identity and the
# general formula on either side of the special values.
THETAS = [-1.5, -0.5, 0.0, 0.2, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0]


@pytest.fixture(params=THETAS)
def theta(request):
    """Shape parameter from the standard grid."""
    return request.param


@pytest.fixture
def sample_values():
    """Moderate values of both signs, including zero."""
    np.random.seed(42)
    values = np.random.normal(loc=0.0, scale=3.0, size=200)
    return np.concatenate([values, [-5.0, -1.0, 0.0, 1.0, 5.0]])


@pytest.fixture
def sample_skewed_series():
    """Generate a skewed monthly series with negative values."""
    dates = pd.date_range(start='2010-01-01', end='2020-12-31', freq='MS')
    np.random.seed(42)
    values = np.random.gamma(shape=2.0, scale=2.0, size=len(dates)) - 3.0
    return pd.Series(values, index=dates, name='site_1')


@pytest.fixture
def sample_skewed_dataframe():
    """Generate a skewed monthly multi-site DataFrame."""
    dates = pd.date_range(start='2010-01-01', end='2020-12-31', freq='MS')
    np.random.seed(42)
    n_sites = 3
    data = {}
    for i in range(n_sites):
        base = np.random.gamma(shape=2.0, scale=2.0, size=len(dates))
        noise = np.random.normal(0, 1, size=len(dates))
        data[f'site_{i+1}'] = base + noise - 3.0
    return pd.DataFrame(data, index=dates)
