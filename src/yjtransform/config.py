"""
Numeric constants shared across yjtransform.

These are read-only module defaults; the package has no runtime
configuration.
"""

# ============================================================================
# GUARDED LOG / POWER
# ============================================================================

# Substitute for non-positive arguments of a guarded log or power.
# log(1) = 0 and 1**p = 1, so the masked-out branch stays finite.
GUARD_VALUE = 1.0

# ============================================================================
# SHAPE PARAMETER REGIMES
# ============================================================================

# Closed forms are selected by exact equality on theta.
LOG_THETA = 0.0          # log branch for y >= 0
QUADRATIC_THETA = 2.0    # log branch for y < 0

# ============================================================================
# VERIFICATION DEFAULTS
# ============================================================================

DEFAULT_FD_STEP = 1e-6
