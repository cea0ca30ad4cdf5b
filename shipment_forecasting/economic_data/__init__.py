"""
Economic indicator data from FRED.
"""

from .client import FredClient
from .exceptions import EconomicDataError, UnknownIndicatorError, UpstreamError, UpstreamUnavailable
from .models import SERIES_IDS, IndicatorSeries, Observation

__all__ = [
    "FredClient",
    "IndicatorSeries",
    "Observation",
    "SERIES_IDS",
    "EconomicDataError",
    "UnknownIndicatorError",
    "UpstreamError",
    "UpstreamUnavailable",
]
