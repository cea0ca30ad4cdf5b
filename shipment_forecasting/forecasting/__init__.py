"""
Forecasting module for shipment volume prediction.
"""

from .exceptions import (
    EmptySeriesError,
    ForecastingError,
    InsufficientDataError,
    InvalidParameterError,
    InvalidSeriesError,
    UnknownMethodError,
)
from .metrics import Metrics, calculate_metrics
from .models import (
    ForecastingEngine,
    ForecastPoint,
    ForecastResult,
    ModelComparison,
    fit_series,
    forecast_with_confidence,
)
from .options import ForecastMethod, ForecastOptions
from .regression import RegressionResult, linear_regression
from .sample import generate_sample_shipment_data
from .smoothing import exponential_smoothing, moving_average

__all__ = [
    "ForecastingEngine",
    "ForecastPoint",
    "ForecastResult",
    "ModelComparison",
    "ForecastMethod",
    "ForecastOptions",
    "Metrics",
    "RegressionResult",
    "moving_average",
    "exponential_smoothing",
    "linear_regression",
    "calculate_metrics",
    "fit_series",
    "forecast_with_confidence",
    "generate_sample_shipment_data",
    "ForecastingError",
    "EmptySeriesError",
    "InvalidSeriesError",
    "InsufficientDataError",
    "InvalidParameterError",
    "UnknownMethodError",
]
