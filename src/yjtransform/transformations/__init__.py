"""
Transformation objects for yjtransform.

Transforms follow the fit/transform/inverse_transform pattern similar to
scikit-learn. The shape parameter is fixed at construction and is never
estimated from data.

Available Transformations
-------------------------
- YeoJohnsonTransform: Yeo-Johnson power transformation

Examples
--------
>>> from yjtransform.transformations import YeoJohnsonTransform
>>>
>>> transform = YeoJohnsonTransform(theta=0.5)
>>> Q_transformed = transform.fit_transform(Q_obs)
>>> Q_original = transform.inverse_transform(Q_transformed)
"""

# Abstract base class
from yjtransform.transformations.abstract import Transform

# Concrete transformations
from yjtransform.transformations.yeojohnson import YeoJohnsonTransform

__all__ = [
    'Transform',
    'YeoJohnsonTransform',
]
