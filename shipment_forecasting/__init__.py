"""
Shipment Forecasting

Forecasting engine for shipment volumes: smoothing and regression fits,
point forecasts with confidence bands and accuracy metrics.
"""



from .forecasting.models import ForecastingEngine, ForecastResult
from .forecasting.metrics import calculate_metrics
from .economic_data.client import FredClient

__version__ = "0.1.0"

__all__ = [
    "ForecastingEngine",
    "ForecastResult",
    "calculate_metrics",
    "FredClient"
]
