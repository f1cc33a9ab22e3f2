"""
Input validation utilities.

Coerces user inputs to float arrays for the elementwise transforms and
restores the caller's container type on the way out.
"""
import logging
import numbers
import numpy as np
import pandas as pd
from typing import Any, Union

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray, pd.Series, pd.DataFrame]


def as_float_array(data: Any, variable_name: str = "y") -> np.ndarray:
    """
    Convert numeric input to a float NumPy array.

    Parameters
    ----------
    data : scalar, array-like, pd.Series or pd.DataFrame
        Numeric input.
    variable_name : str, default='y'
        Name of variable for error messages.

    Returns
    -------
    np.ndarray
        Float64 array (0-d for scalar input).

    Raises
    ------
    TypeError
        If data is None, complex, or cannot be interpreted as real numbers.

    Examples
    --------
    >>> from yjtransform.utils.validation import as_float_array
    >>> as_float_array([1, -2, 3]).dtype
    dtype('float64')
    """
    if data is None or isinstance(data, (str, bytes)):
        raise TypeError(
            f"{variable_name} must be numeric, got {type(data).__name__}"
        )

    try:
        raw = np.asarray(data)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"{variable_name} must be numeric, got {type(data).__name__}"
        ) from exc

    if np.iscomplexobj(raw):
        raise TypeError(
            f"{variable_name} must be numeric and real, got complex values"
        )

    try:
        values = raw.astype(float)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"{variable_name} must be numeric, got {type(data).__name__}"
        ) from exc

    return values


def restore_like(values: np.ndarray, template: Any) -> ArrayLike:
    """
    Wrap a result array in the container type of the original input.

    Parameters
    ----------
    values : np.ndarray
        Elementwise result computed from ``template``.
    template : scalar, array-like, pd.Series or pd.DataFrame
        Original input.

    Returns
    -------
    float, np.ndarray, pd.Series or pd.DataFrame
        Python float for 0-d results, pandas objects with the
        template's labels, otherwise the array itself.
    """
    if isinstance(template, pd.Series) and values.shape == template.shape:
        return pd.Series(values, index=template.index, name=template.name)

    if isinstance(template, pd.DataFrame) and values.shape == template.shape:
        return pd.DataFrame(values, index=template.index, columns=template.columns)

    if values.ndim == 0:
        return float(values)

    return values


def validate_theta(theta: Any) -> float:
    """
    Validate the Yeo-Johnson shape parameter.

    Any real value is accepted, including negative values; only the type
    and dimensionality are checked.

    Parameters
    ----------
    theta : float
        Shape parameter.

    Returns
    -------
    float
        theta as a Python float.

    Raises
    ------
    TypeError
        If theta is not a real scalar.

    Examples
    --------
    >>> from yjtransform.utils.validation import validate_theta
    >>> validate_theta(1)
    1.0
    """
    if np.ndim(theta) != 0:
        raise TypeError(
            f"theta must be a real scalar, got array with shape {np.shape(theta)}"
        )

    if isinstance(theta, np.ndarray):
        theta = theta[()]

    if isinstance(theta, (bool, np.bool_)) or not isinstance(
        theta, (numbers.Real, np.floating, np.integer)
    ):
        raise TypeError(
            f"theta must be a real scalar, got {type(theta).__name__}"
        )

    theta = float(theta)
    logger.debug(f"theta={theta} passed validation")
    return theta
