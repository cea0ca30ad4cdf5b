"""
Forecasting models for shipment volume prediction.

This module ties the smoothing and regression transforms together: it fits
a historical series with the selected method, extrapolates the last fitted
step into the future and attaches a 95% confidence band derived from the
in-sample residuals.
"""

from typing import List, Dict, Any, Optional, Sequence, Union
from dataclasses import dataclass, field
import logging

import numpy as np
import pandas as pd

from .exceptions import InsufficientDataError
from .metrics import Metrics, calculate_metrics
from .options import (
    DEFAULT_ALPHA,
    DEFAULT_PERIODS,
    DEFAULT_WINDOW,
    ForecastMethod,
    ForecastOptions,
    as_series,
    validate_alpha,
    validate_periods,
    validate_window,
)
from .regression import linear_regression
from .smoothing import exponential_smoothing, moving_average

log = logging.getLogger(__name__)

# Two-sided 95% multiplier under a normal approximation
CONFIDENCE_Z = 1.96

MethodLike = Union[str, ForecastMethod]


@dataclass(frozen=True)
class ForecastPoint:
    """A single out-of-sample forecast ``offset`` steps past the last observation."""
    offset: int
    predicted: float
    lower: float
    upper: float

    @property
    def confidence(self) -> Dict[str, float]:
        return {'lower': self.lower, 'upper': self.upper}

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def to_dict(self) -> Dict[str, Any]:
        return {
            'offset': self.offset,
            'predicted': self.predicted,
            'confidence': self.confidence
        }


@dataclass
class ForecastResult:
    """Result of a forecasting operation."""
    method: ForecastMethod
    fitted: List[float]
    forecasts: List[ForecastPoint]
    metrics: Metrics

    def to_dataframe(self) -> pd.DataFrame:
        """Convert forecast points to a pandas DataFrame."""
        return pd.DataFrame({
            'offset': [p.offset for p in self.forecasts],
            'predicted': [p.predicted for p in self.forecasts],
            'lower': [p.lower for p in self.forecasts],
            'upper': [p.upper for p in self.forecasts]
        })

    def to_dict(self) -> Dict[str, Any]:
        return {
            'method': self.method.value,
            'fitted': list(self.fitted),
            'forecasts': [p.to_dict() for p in self.forecasts],
            'metrics': self.metrics.to_dict()
        }


@dataclass
class ModelComparison:
    """In-sample accuracy of one method over a historical series."""
    method: ForecastMethod
    metrics: Metrics
    name: str = field(default="")

    def __post_init__(self):
        if not self.name:
            self.name = self.method.label

    @property
    def accuracy(self) -> Optional[float]:
        return self.metrics.accuracy

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'method': self.method.value,
            'metrics': self.metrics.to_dict(),
            'accuracy': self.accuracy
        }


def fit_series(series: Sequence[float],
               method: MethodLike,
               window: int = DEFAULT_WINDOW,
               alpha: float = DEFAULT_ALPHA) -> List[float]:
    """
    Produce the fitted sequence for ``series`` with the chosen method.

    Returns:
        Fitted values, same length as ``series``
    """
    method = ForecastMethod.parse(method)
    log.debug("Fitting %d observations with %s", len(series), method.value)

    if method is ForecastMethod.MOVING_AVERAGE:
        return moving_average(series, window)
    elif method is ForecastMethod.EXPONENTIAL_SMOOTHING:
        return exponential_smoothing(series, alpha)
    else:
        return linear_regression(series).fitted


def residual_std_dev(series: Sequence[float], fitted: Sequence[float]) -> float:
    """Root mean square of the in-sample residuals ``series - fitted``."""
    residuals = np.abs(np.asarray(series, dtype=float) - np.asarray(fitted, dtype=float))
    return float(np.sqrt(np.mean(residuals ** 2)))


def _extrapolate(series: np.ndarray,
                 fitted: Sequence[float],
                 periods: int) -> List[ForecastPoint]:
    std_dev = residual_std_dev(series, fitted)
    base = fitted[-1]
    trend = fitted[-1] - fitted[-2]
    margin = CONFIDENCE_Z * std_dev

    # band width is the same at every horizon
    forecasts = []
    for offset in range(1, periods + 1):
        predicted = base + trend * offset
        forecasts.append(ForecastPoint(
            offset=offset,
            predicted=predicted,
            lower=predicted - margin,
            upper=predicted + margin
        ))
    return forecasts


def forecast_with_confidence(series: Sequence[float],
                             periods: int = DEFAULT_PERIODS,
                             method: MethodLike = ForecastMethod.EXPONENTIAL_SMOOTHING,
                             window: int = DEFAULT_WINDOW,
                             alpha: float = DEFAULT_ALPHA) -> List[ForecastPoint]:
    """
    Forecast ``periods`` future steps with a 95% confidence band.

    The series is fitted with ``method``; the step between the last two
    fitted values is carried forward linearly from the last fitted value.
    The band is ``predicted +/- 1.96 * std_dev`` where ``std_dev`` is the
    root mean square of the in-sample residuals.

    Args:
        series: Historical observations (at least two)
        periods: Number of future steps; zero or negative yields no points
        method: Fitting method (default: exponential smoothing)
        window: Moving-average window
        alpha: Exponential smoothing factor

    Returns:
        Forecast points ordered by offset 1..periods
    """
    periods = validate_periods(periods)
    values = as_series(series)
    if values.size < 2:
        raise InsufficientDataError(2, values.size, "forecasting")

    fitted = fit_series(values, method, window, alpha)
    if periods <= 0:
        return []
    return _extrapolate(values, fitted, periods)


class ForecastingEngine:
    """
    Main forecasting engine supporting multiple algorithms.

    The engine only carries its configuration (default method, window and
    alpha); every call takes the full historical series, so one instance can
    be shared between concurrent callers.
    """

    SUPPORTED_METHODS = [method.value for method in ForecastMethod]

    def __init__(self,
                 default_method: MethodLike = ForecastMethod.EXPONENTIAL_SMOOTHING,
                 window: int = DEFAULT_WINDOW,
                 alpha: float = DEFAULT_ALPHA):
        """
        Initialize forecasting engine.

        Args:
            default_method: Default forecasting method to use
            window: Moving-average window
            alpha: Exponential smoothing factor
        """
        self.default_method = ForecastMethod.parse(default_method)
        self.window = validate_window(window)
        self.alpha = validate_alpha(alpha)

    @classmethod
    def from_options(cls, options: ForecastOptions) -> 'ForecastingEngine':
        """Create an engine whose defaults come from validated options."""
        return cls(default_method=options.method, window=options.window, alpha=options.alpha)

    def _resolve(self, method: Optional[MethodLike]) -> ForecastMethod:
        return ForecastMethod.parse(method if method is not None else self.default_method)

    def fit(self, series: Sequence[float], method: Optional[MethodLike] = None) -> List[float]:
        """Fitted values for ``series`` with the given (or default) method."""
        return fit_series(series, self._resolve(method), self.window, self.alpha)

    def forecast(self,
                 series: Sequence[float],
                 periods: int = DEFAULT_PERIODS,
                 method: Optional[MethodLike] = None) -> ForecastResult:
        """
        Generate forecast for the specified number of periods.

        Args:
            series: Historical observations
            periods: Number of future periods to forecast (default: 6)
            method: Forecasting method to use (default: instance default)

        Returns:
            ForecastResult with fitted values, forecast points and in-sample metrics
        """
        periods = validate_periods(periods)
        method = self._resolve(method)
        values = as_series(series)
        if values.size < 2:
            raise InsufficientDataError(2, values.size, "forecasting")

        fitted = fit_series(values, method, self.window, self.alpha)
        forecasts = _extrapolate(values, fitted, periods) if periods > 0 else []

        return ForecastResult(
            method=method,
            fitted=fitted,
            forecasts=forecasts,
            metrics=calculate_metrics(values, fitted)
        )

    def evaluate_model(self,
                       series: Sequence[float],
                       method: Optional[MethodLike] = None) -> Metrics:
        """
        Evaluate in-sample accuracy of a method on ``series``.

        Returns:
            Metrics (MAE, RMSE, MAPE) of the fitted values against the series
        """
        return calculate_metrics(series, self.fit(series, method))

    def compare_models(self, series: Sequence[float]) -> List[ModelComparison]:
        """Evaluate every supported method on the same series."""
        return [
            ModelComparison(method=method, metrics=self.evaluate_model(series, method))
            for method in ForecastMethod
        ]

    def get_model_info(self) -> Dict[str, Any]:
        """Get information about available models and current configuration."""
        return {
            'supported_methods': self.SUPPORTED_METHODS,
            'default_method': self.default_method.value,
            'window': self.window,
            'alpha': self.alpha
        }
