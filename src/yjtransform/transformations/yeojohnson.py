"""
Yeo-Johnson transformation with a fixed shape parameter.

Wraps the elementwise functions in the fit/transform/inverse_transform
interface. Nothing is estimated from the data.
"""
import logging
import numpy as np

from yjtransform.transformations.abstract import Transform
from yjtransform.utils.validation import ArrayLike, as_float_array, validate_theta
from yjtransform.yeojohnson import yj_derivative, yj_forward, yj_inverse

logger = logging.getLogger(__name__)


class YeoJohnsonTransform(Transform):
    """
    Yeo-Johnson power transformation.

    Works with negative, zero and positive values. The shape parameter is
    supplied by the caller and kept fixed.

    Parameters
    ----------
    theta : float, default=1.0
        Shape parameter. ``theta=1`` leaves the data unchanged.

    Examples
    --------
    >>> from yjtransform import YeoJohnsonTransform
    >>> transform = YeoJohnsonTransform(theta=0.5)
    >>> Q_yj = transform.fit_transform(Q_obs)
    >>> Q_orig = transform.inverse_transform(Q_yj)
    """

    def __init__(self, theta: float = 1.0):
        super().__init__()
        self.theta = validate_theta(theta)

    def fit(self, data: ArrayLike) -> 'YeoJohnsonTransform':
        """
        Fit transform (no parameters to learn).

        Parameters
        ----------
        data : array-like, pd.Series or pd.DataFrame
            Data the transform will be applied to.

        Returns
        -------
        YeoJohnsonTransform
            Self (for chaining).
        """
        n_nan = int(np.isnan(as_float_array(data, variable_name="data")).sum())
        if n_nan > 0:
            logger.warning(f"data contains {n_nan} NaN values; they will stay NaN")

        self.params_['theta'] = self.theta
        self.is_fitted = True
        return self

    def transform(self, data: ArrayLike) -> ArrayLike:
        """
        Apply the forward transformation.

        Parameters
        ----------
        data : array-like, pd.Series or pd.DataFrame
            Data to transform.

        Returns
        -------
        array-like, pd.Series or pd.DataFrame
            Transformed data.
        """
        self._check_fitted("transform")
        return yj_forward(data, self.params_['theta'])

    def inverse_transform(self, data: ArrayLike) -> ArrayLike:
        """
        Reverse the transformation.

        Parameters
        ----------
        data : array-like, pd.Series or pd.DataFrame
            Transformed data.

        Returns
        -------
        array-like, pd.Series or pd.DataFrame
            Original scale data.
        """
        self._check_fitted("inverse_transform")
        return yj_inverse(data, self.params_['theta'])

    def derivative(self, data: ArrayLike) -> ArrayLike:
        """Derivative of the forward transformation at ``data``."""
        self._check_fitted("derivative")
        return yj_derivative(data, self.params_['theta'])

    def __repr__(self) -> str:
        return f"YeoJohnsonTransform(theta={self.theta})"
