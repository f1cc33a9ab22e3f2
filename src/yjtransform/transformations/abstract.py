"""
Abstract base class for data transformations.

Transforms follow the fit/transform/inverse_transform pattern.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any

from yjtransform.utils.validation import ArrayLike


class Transform(ABC):
    """
    Base class for reversible data transformations.

    All transforms implement fit/transform/inverse_transform pattern
    similar to scikit-learn transformers.
    """

    def __init__(self):
        self.is_fitted: bool = False
        self.params_: Dict[str, Any] = {}

    @abstractmethod
    def fit(self, data: ArrayLike) -> 'Transform':
        """
        Fit transformation parameters to data.

        Parameters
        ----------
        data : array-like, pd.Series or pd.DataFrame
            Data to fit transformation to.

        Returns
        -------
        Transform
            Self (for chaining).
        """
        pass

    @abstractmethod
    def transform(self, data: ArrayLike) -> ArrayLike:
        """Apply transformation to data."""
        pass

    @abstractmethod
    def inverse_transform(self, data: ArrayLike) -> ArrayLike:
        """Reverse transformation."""
        pass

    def fit_transform(self, data: ArrayLike) -> ArrayLike:
        """
        Fit and transform in one step.

        Parameters
        ----------
        data : array-like, pd.Series or pd.DataFrame
            Data to fit and transform.

        Returns
        -------
        array-like, pd.Series or pd.DataFrame
            Transformed data.
        """
        return self.fit(data).transform(data)

    def _check_fitted(self, method: str) -> None:
        if not self.is_fitted:
            raise ValueError(f"Transform must be fitted before {method}()")
