"""
Method selection and parameter validation for the forecasting engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union
import math

import numpy as np

from .exceptions import (
    EmptySeriesError,
    InvalidParameterError,
    InvalidSeriesError,
    UnknownMethodError,
)


DEFAULT_WINDOW = 3
DEFAULT_ALPHA = 0.3
DEFAULT_PERIODS = 6


class ForecastMethod(str, Enum):
    """Fitting strategies supported by the engine."""

    MOVING_AVERAGE = "moving-average"
    EXPONENTIAL_SMOOTHING = "exponential-smoothing"
    LINEAR_REGRESSION = "linear-regression"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Union[str, "ForecastMethod"]) -> "ForecastMethod":
        """
        Resolve a method selector.

        Accepts enum members, canonical values ("moving-average"), underscore
        spellings ("moving_average") and the short codes "ma", "es" and "lr".
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownMethodError(f"Method must be a string, got {type(value).__name__}")

        key = value.strip().lower().replace("_", "-")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            supported = [m.value for m in cls]
            raise UnknownMethodError(
                f"Unknown method {value!r}; must be one of {supported}"
            ) from None


_ALIASES = {
    "ma": ForecastMethod.MOVING_AVERAGE.value,
    "es": ForecastMethod.EXPONENTIAL_SMOOTHING.value,
    "lr": ForecastMethod.LINEAR_REGRESSION.value,
}

_LABELS = {
    ForecastMethod.MOVING_AVERAGE: "Moving Average",
    ForecastMethod.EXPONENTIAL_SMOOTHING: "Exponential Smoothing",
    ForecastMethod.LINEAR_REGRESSION: "Linear Regression",
}


def as_series(series: Sequence[float], name: str = "series") -> np.ndarray:
    """
    Convert ``series`` to a 1-D float array.

    Strings, booleans and other non-numeric elements are rejected rather than
    coerced, as are empty and non-finite input.
    """
    try:
        raw = np.asarray(series)
    except (TypeError, ValueError) as exc:
        raise InvalidSeriesError(f"{name} must contain only real numbers") from exc

    if raw.dtype.kind not in "iuf":
        raise InvalidSeriesError(f"{name} must contain only real numbers, got dtype {raw.dtype}")
    values = raw.astype(float)

    if values.ndim != 1:
        raise InvalidSeriesError(f"{name} must be one-dimensional, got shape {values.shape}")
    if values.size == 0:
        raise EmptySeriesError(f"{name} must be non-empty")
    if not np.all(np.isfinite(values)):
        raise InvalidSeriesError(f"{name} must contain only finite values")
    return values


def validate_window(window: int) -> int:
    if isinstance(window, bool) or not isinstance(window, (int, np.integer)):
        raise InvalidParameterError(f"window must be an integer, got {window!r}")
    if window <= 0:
        raise InvalidParameterError(f"window must be positive, got {window}")
    return int(window)


def validate_periods(periods: int) -> int:
    if isinstance(periods, bool) or not isinstance(periods, (int, np.integer)):
        raise InvalidParameterError(f"periods must be an integer, got {periods!r}")
    return int(periods)


def validate_alpha(alpha: float) -> float:
    if isinstance(alpha, bool) or not isinstance(alpha, (int, float, np.floating)):
        raise InvalidParameterError(f"alpha must be a real number, got {alpha!r}")
    if math.isnan(alpha) or not 0 < alpha <= 1:
        raise InvalidParameterError(f"alpha must be in (0, 1], got {alpha}")
    return float(alpha)


@dataclass(frozen=True)
class ForecastOptions:
    """Validated configuration for a single forecasting call."""

    method: ForecastMethod = ForecastMethod.EXPONENTIAL_SMOOTHING
    window: int = DEFAULT_WINDOW
    alpha: float = DEFAULT_ALPHA
    periods: int = DEFAULT_PERIODS

    def __post_init__(self):
        # frozen dataclass, so normalised values go through object.__setattr__
        object.__setattr__(self, "method", ForecastMethod.parse(self.method))
        object.__setattr__(self, "window", validate_window(self.window))
        object.__setattr__(self, "alpha", validate_alpha(self.alpha))

        periods = validate_periods(self.periods)
        if periods < 0:
            raise InvalidParameterError(f"periods must be zero or positive, got {periods}")
        object.__setattr__(self, "periods", periods)
