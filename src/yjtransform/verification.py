"""Numerical checks for the Yeo-Johnson functions.
"""

import numpy as np

from yjtransform.config import DEFAULT_FD_STEP
from yjtransform.utils.validation import as_float_array, restore_like, validate_theta
from yjtransform.yeojohnson import yj_derivative, yj_forward, yj_inverse


def inverse_error(x, theta):
    """Absolute round-trip error of the inverse transformation.

    Args:
        x (float, array-like, pd.Series or pd.DataFrame): Original values.
        theta (float): Shape parameter.

    Returns:
        Elementwise |yj_inverse(yj_forward(x, theta), theta) - x|, in the
        container type of x.
    """
    theta = validate_theta(theta)
    values = as_float_array(x, variable_name="x")
    recovered = yj_inverse(yj_forward(values, theta), theta)
    return restore_like(np.abs(np.asarray(recovered) - values), x)


def derivative_error(y, theta, step=DEFAULT_FD_STEP):
    """Absolute difference between the analytic and a central-difference derivative.

    Args:
        y (float, array-like, pd.Series or pd.DataFrame): Evaluation points.
        theta (float): Shape parameter.
        step (float): Finite-difference half width h.

    Returns:
        Elementwise |yj_derivative(y) - (yj_forward(y + h) - yj_forward(y - h)) / 2h|.
    """
    theta = validate_theta(theta)
    values = as_float_array(y)
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    upper = np.asarray(yj_forward(values + step, theta))
    lower = np.asarray(yj_forward(values - step, theta))
    central = (upper - lower) / (2 * step)
    analytic = np.asarray(yj_derivative(values, theta))
    return restore_like(np.abs(analytic - central), y)
