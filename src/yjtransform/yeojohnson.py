"""
Yeo-Johnson power transformation, its inverse and its derivative.

Yeo, I. K., and Johnson, R. A. (2000). A new family of power
transformations to improve normality or symmetry. Biometrika, 87, 954-959.

Every function splits elementwise on the sign of the input (``y >= 0``)
and on the shape parameter ``theta``. The closed forms at ``theta == 0``
and ``theta == 2`` are selected by exact equality, so values merely close
to 0 or 2 use the general power formula.

Both branches are evaluated over the whole array with guarded log/power
and combined with ``np.where``. The branch that is not selected for an
element never leaks into the result, and floating point overflow in it is
silenced. Overflow or NaN in the selected branch propagates as ordinary
special values.

Examples
--------
>>> from yjtransform import yj_forward, yj_inverse, yj_derivative
>>> z = yj_forward([-5.0, 0.0, 5.0], theta=0.5)
>>> x = yj_inverse(z, theta=0.5)
>>> dz = yj_derivative(2.0, theta=0.5)
"""
import logging
import numpy as np

from yjtransform.config import LOG_THETA, QUADRATIC_THETA
from yjtransform.safe import guarded_log, guarded_power
from yjtransform.utils.validation import (
    ArrayLike,
    as_float_array,
    restore_like,
    validate_theta,
)

logger = logging.getLogger(__name__)


def _regime(theta: float) -> str:
    if theta == LOG_THETA:
        return "log"
    if theta == QUADRATIC_THETA:
        return "quadratic"
    return "power"


def yj_forward(y, theta: float) -> ArrayLike:
    """
    Forward Yeo-Johnson transformation.

    Parameters
    ----------
    y : float, array-like, pd.Series or pd.DataFrame
        Values to transform. Any real value is allowed.
    theta : float
        Shape parameter. Any real value is allowed.

    Returns
    -------
    float, np.ndarray, pd.Series or pd.DataFrame
        Transformed values in the container type of ``y``.

    Notes
    -----
    For ``y >= 0``::

        theta == 0 : log(y + 1)
        theta == 2 : -0.5 + 0.5 * (y + 1)**2
        otherwise  : ((y + 1)**theta - 1) / theta

    For ``y < 0``::

        theta == 0 : 0.5 - 0.5 * (y - 1)**2
        theta == 2 : -log(1 - y)
        otherwise  : (1 - (1 - y)**(2 - theta)) / (2 - theta)
    """
    theta = validate_theta(theta)
    values = as_float_array(y)
    regime = _regime(theta)
    logger.debug(f"yj_forward: theta={theta} uses {regime} branch")

    sg = values >= 0
    with np.errstate(over='ignore', invalid='ignore'):
        if regime == "log":
            pos = guarded_log(values + 1)
            neg = 0.5 - 0.5 * (values - 1) ** 2
        elif regime == "quadratic":
            pos = -0.5 + 0.5 * (values + 1) ** 2
            neg = -guarded_log(-values + 1)
        else:
            pos = (guarded_power(values + 1, theta) - 1) / theta
            neg = (1 - guarded_power(-values + 1, 2 - theta)) / (2 - theta)
        result = np.where(sg, pos, neg)

    return restore_like(result, y)


def yj_inverse(y, theta: float) -> ArrayLike:
    """
    Inverse Yeo-Johnson transformation.

    Recovers ``x`` from ``yj_forward(x, theta)`` for every real ``theta``,
    on both sign branches. Inputs outside the image of the forward
    transform are not rejected; their bases are guarded like any other.

    Parameters
    ----------
    y : float, array-like, pd.Series or pd.DataFrame
        Transformed values.
    theta : float
        Shape parameter used for the forward transformation.

    Returns
    -------
    float, np.ndarray, pd.Series or pd.DataFrame
        Values on the original scale.
    """
    theta = validate_theta(theta)
    values = as_float_array(y)
    regime = _regime(theta)
    logger.debug(f"yj_inverse: theta={theta} uses {regime} branch")

    sg = values >= 0
    with np.errstate(over='ignore', invalid='ignore'):
        if regime == "log":
            pos = np.exp(values) - 1
            neg = 1 - guarded_power(-2 * values + 1, 0.5)
        elif regime == "quadratic":
            pos = -1 + guarded_power(2 * values + 1, 0.5)
            neg = 1 - np.exp(-values)
        else:
            pos = guarded_power(theta * values + 1, 1 / theta) - 1
            neg = 1 - guarded_power(1 - (2 - theta) * values, 1 / (2 - theta))
        result = np.where(sg, pos, neg)

    return restore_like(result, y)


def yj_derivative(y, theta: float) -> ArrayLike:
    """
    First derivative of the forward Yeo-Johnson transformation in ``y``.

    A single formula covers every ``theta``, including 0 and 2:
    ``(y + 1)**(theta - 1)`` for ``y >= 0`` and ``(1 - y)**(1 - theta)``
    for ``y < 0``. Both branches equal 1 at ``y = 0``.

    Parameters
    ----------
    y : float, array-like, pd.Series or pd.DataFrame
        Points at which to evaluate the derivative.
    theta : float
        Shape parameter.

    Returns
    -------
    float, np.ndarray, pd.Series or pd.DataFrame
        Derivative values in the container type of ``y``.
    """
    theta = validate_theta(theta)
    values = as_float_array(y)

    sg = values >= 0
    with np.errstate(over='ignore', invalid='ignore'):
        pos = guarded_power(values + 1, theta - 1)
        neg = guarded_power(-values + 1, 1 - theta)
        # theta == 1 gives NaN ** 0 == 1
        result = np.where(np.isnan(values), np.nan, np.where(sg, pos, neg))

    return restore_like(result, y)


# Short names used by downstream statistical code
YJtrans = yj_forward
IYJtrans = yj_inverse
DYJtrans = yj_derivative
