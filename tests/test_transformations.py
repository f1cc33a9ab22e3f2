"""
Tests for yjtransform.transformations module.
"""

import logging

import pytest
import numpy as np
import pandas as pd

from yjtransform import yj_forward, yj_derivative
from yjtransform.transformations import Transform, YeoJohnsonTransform


class TestYeoJohnsonTransform:
    """Tests for the fixed-theta Yeo-Johnson transform object."""

    def test_fit_transform_series(self, sample_skewed_series):
        """Test fit and transform on Series."""
        transform = YeoJohnsonTransform(theta=0.5)
        transformed = transform.fit_transform(sample_skewed_series)

        assert isinstance(transformed, pd.Series)
        assert len(transformed) == len(sample_skewed_series)
        assert transformed.index.equals(sample_skewed_series.index)
        assert transform.is_fitted is True
        assert transform.params_['theta'] == 0.5

    def test_transform_matches_function(self, sample_skewed_series):
        """Test that transform() is the elementwise forward transformation."""
        transform = YeoJohnsonTransform(theta=0.5).fit(sample_skewed_series)
        transformed = transform.transform(sample_skewed_series)
        expected = yj_forward(sample_skewed_series.values, 0.5)

        assert np.array_equal(transformed.values, expected)

    def test_inverse_transform_series(self, sample_skewed_series):
        """Test inverse transform on Series."""
        transform = YeoJohnsonTransform(theta=0.5)
        transformed = transform.fit_transform(sample_skewed_series)
        recovered = transform.inverse_transform(transformed)

        assert isinstance(recovered, pd.Series)
        assert np.allclose(recovered.values, sample_skewed_series.values, rtol=1e-9)

    @pytest.mark.parametrize("theta", [-0.5, 0.0, 1.5, 2.0])
    def test_inverse_transform_dataframe(self, sample_skewed_dataframe, theta):
        """Test inverse transform on DataFrame."""
        transform = YeoJohnsonTransform(theta=theta)
        transformed = transform.fit_transform(sample_skewed_dataframe)
        recovered = transform.inverse_transform(transformed)

        assert isinstance(recovered, pd.DataFrame)
        assert recovered.shape == sample_skewed_dataframe.shape
        assert list(recovered.columns) == list(sample_skewed_dataframe.columns)
        assert np.allclose(recovered.values, sample_skewed_dataframe.values, rtol=1e-9, atol=1e-12)

    def test_derivative(self, sample_skewed_series):
        """Test derivative method."""
        transform = YeoJohnsonTransform(theta=0.5).fit(sample_skewed_series)
        result = transform.derivative(sample_skewed_series)

        assert isinstance(result, pd.Series)
        assert np.array_equal(result.values, yj_derivative(sample_skewed_series.values, 0.5))

    def test_transform_before_fit_raises(self, sample_skewed_series):
        """Test that transform before fit raises ValueError."""
        transform = YeoJohnsonTransform(theta=0.5)
        with pytest.raises(ValueError, match="fitted"):
            transform.transform(sample_skewed_series)

    def test_inverse_before_fit_raises(self, sample_skewed_series):
        """Test that inverse_transform before fit raises ValueError."""
        transform = YeoJohnsonTransform(theta=0.5)
        with pytest.raises(ValueError, match="fitted before inverse_transform"):
            transform.inverse_transform(sample_skewed_series)

    def test_invalid_theta_raises(self):
        """Test that a non-scalar theta raises TypeError."""
        with pytest.raises(TypeError, match="theta"):
            YeoJohnsonTransform(theta=[0.5, 1.0])

    def test_nan_warning(self, sample_skewed_series, caplog):
        """Test that NaN values in fitted data are logged."""
        data = sample_skewed_series.copy()
        data.iloc[:3] = np.nan
        transform = YeoJohnsonTransform(theta=0.5)

        with caplog.at_level(logging.WARNING, logger="yjtransform"):
            transformed = transform.fit_transform(data)

        assert "3 NaN values" in caplog.text
        assert transformed.iloc[:3].isna().all()

    def test_array_input(self):
        """Test that plain arrays are accepted."""
        transform = YeoJohnsonTransform(theta=2.0)
        result = transform.fit_transform(np.array([-1.0, 0.0, 1.0]))

        assert isinstance(result, np.ndarray)
        assert result[1] == 0.0

    def test_repr(self):
        """Test string representation."""
        assert repr(YeoJohnsonTransform(theta=0.5)) == "YeoJohnsonTransform(theta=0.5)"


class TestTransformBaseClass:
    """Tests for Transform base class."""

    def test_transform_is_abstract(self):
        """Test that Transform cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Transform()

    def test_fit_transform_calls_fit_and_transform(self, sample_skewed_series):
        """Test that fit_transform calls fit and then transform."""
        transform = YeoJohnsonTransform(theta=1.0)
        result = transform.fit_transform(sample_skewed_series)

        assert transform.is_fitted is True
        assert isinstance(result, pd.Series)

    def test_is_fitted_flag(self, sample_skewed_series):
        """Test is_fitted flag."""
        transform = YeoJohnsonTransform(theta=1.0)
        assert transform.is_fitted is False

        transform.fit(sample_skewed_series)
        assert transform.is_fitted is True
