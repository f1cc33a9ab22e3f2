"""
yjtransform: Yeo-Johnson power transformation

Forward transform, inverse and first derivative of the Yeo-Johnson
power-transformation family, with guarded log/power helpers. All
functions work elementwise on scalars, NumPy arrays and pandas objects.
"""

__version__ = "0.1.0"

# Guarded helpers
from yjtransform.safe import safe_log, safe_power, slog, spower

# Transform, inverse and derivative
from yjtransform.yeojohnson import (
    yj_forward,
    yj_inverse,
    yj_derivative,
    YJtrans,
    IYJtrans,
    DYJtrans,
)

# Transform objects
from yjtransform.transformations import Transform, YeoJohnsonTransform

# Numerical checks
from yjtransform.verification import inverse_error, derivative_error


# Public API
__all__ = [
    # Guarded helpers
    "safe_log",
    "safe_power",
    "slog",
    "spower",
    # Yeo-Johnson functions
    "yj_forward",
    "yj_inverse",
    "yj_derivative",
    "YJtrans",
    "IYJtrans",
    "DYJtrans",
    # Transform objects
    "Transform",
    "YeoJohnsonTransform",
    # Verification
    "inverse_error",
    "derivative_error",
]
