"""
Utility functions for yjtransform.

This module provides input validation and container handling shared by
the transform functions.
"""

from yjtransform.utils.validation import (
    as_float_array,
    restore_like,
    validate_theta,
)

__all__ = [
    'as_float_array',
    'restore_like',
    'validate_theta',
]
