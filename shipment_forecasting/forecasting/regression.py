"""
Ordinary least-squares trend over the series index.
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .exceptions import InsufficientDataError
from .options import as_series


@dataclass(frozen=True)
class RegressionResult:
    """Fitted linear trend ``y = slope * i + intercept``."""
    slope: float
    intercept: float
    fitted: List[float]

    def predict(self, position: float) -> float:
        """Evaluate the trend line at an arbitrary (possibly future) position."""
        return self.slope * position + self.intercept

    def to_dict(self) -> dict:
        return {
            'slope': self.slope,
            'intercept': self.intercept,
            'fitted': list(self.fitted)
        }


def linear_regression(series: Sequence[float]) -> RegressionResult:
    """
    Fit a straight line to the series, using positions 0..n-1 as x.

    Raises:
        InsufficientDataError: if fewer than two observations are supplied,
            since the slope is undefined for a single point.
    """
    y = as_series(series)
    n = y.size
    if n < 2:
        raise InsufficientDataError(2, n, "linear regression")

    x = np.arange(n, dtype=float)
    x_mean = x.mean()
    y_mean = y.mean()

    slope = np.sum((x - x_mean) * (y - y_mean)) / np.sum((x - x_mean) ** 2)
    intercept = y_mean - slope * x_mean

    return RegressionResult(
        slope=float(slope),
        intercept=float(intercept),
        fitted=(slope * x + intercept).tolist()
    )
