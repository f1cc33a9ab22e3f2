"""
Guarded logarithm and power.

Both helpers replace non-positive arguments with ``GUARD_VALUE`` before
evaluating, so a branch that is later masked out never produces a domain
error or a complex result. On the valid domain (``y > 0``) the result is
the plain ``log``/``power``. NaN inputs propagate, except that
``safe_power(nan, 0)`` is 1 as with ``np.power``.

Examples
--------
>>> from yjtransform import safe_log, safe_power
>>> safe_log(5)
1.6094379124341003
>>> safe_log(-3.0)
0.0
>>> safe_power(2, 0.5)
1.4142135623730951
"""
import numpy as np

from yjtransform.config import GUARD_VALUE
from yjtransform.utils.validation import ArrayLike, as_float_array, restore_like


def _guard(values: np.ndarray) -> np.ndarray:
    """Substitute ``GUARD_VALUE`` wherever ``values <= 0``."""
    return np.where(values <= 0, GUARD_VALUE, values)


def guarded_log(values: np.ndarray) -> np.ndarray:
    """Array-level ``safe_log`` without container handling."""
    return np.log(_guard(values))


def guarded_power(values: np.ndarray, pw) -> np.ndarray:
    """Array-level ``safe_power`` without container handling."""
    return np.power(_guard(values), pw)


def safe_log(y) -> ArrayLike:
    """
    Natural logarithm with a guarded domain.

    Parameters
    ----------
    y : float, array-like, pd.Series or pd.DataFrame
        Input values.

    Returns
    -------
    float, np.ndarray, pd.Series or pd.DataFrame
        ``log(y)`` where ``y > 0`` and ``0`` elsewhere (including ``y = 0``),
        in the container type of ``y``.
    """
    values = as_float_array(y, variable_name="y")
    return restore_like(guarded_log(values), y)


def safe_power(y, pw) -> ArrayLike:
    """
    Real power with a guarded base.

    Parameters
    ----------
    y : float, array-like, pd.Series or pd.DataFrame
        Base values.
    pw : float or array-like
        Exponent, broadcast against ``y``. Fractional and negative
        exponents are allowed.

    Returns
    -------
    float, np.ndarray, pd.Series or pd.DataFrame
        ``y ** pw`` where ``y > 0`` and ``1`` elsewhere.
    """
    values = as_float_array(y, variable_name="y")
    exponent = as_float_array(pw, variable_name="pw")
    return restore_like(guarded_power(values, exponent), y)


# Short names used by downstream statistical code
slog = safe_log
spower = safe_power
