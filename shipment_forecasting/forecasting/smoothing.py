"""
Smoothing transforms over a historical series.

Both transforms return a fitted sequence aligned with the input: one value
per observation, same length as the series.
"""

from typing import List, Sequence

import pandas as pd

from .options import DEFAULT_ALPHA, DEFAULT_WINDOW, as_series, validate_alpha, validate_window


def moving_average(series: Sequence[float], window: int = DEFAULT_WINDOW) -> List[float]:
    """
    Trailing simple moving average.

    The first ``window - 1`` positions do not have enough history and are
    passed through unchanged; every later position is the mean of the
    ``window`` observations ending at (and including) that position.

    Args:
        series: Historical observations
        window: Number of observations to average (default: 3)

    Returns:
        Smoothed values, same length as ``series``
    """
    window = validate_window(window)
    values = pd.Series(as_series(series))

    averaged = values.rolling(window=window).mean()
    return averaged.fillna(values).tolist()


def exponential_smoothing(series: Sequence[float], alpha: float = DEFAULT_ALPHA) -> List[float]:
    """
    Simple exponential smoothing seeded with the first observation.

    ``out[0] = series[0]`` and ``out[i] = alpha * series[i] + (1 - alpha) * out[i - 1]``.

    Args:
        series: Historical observations
        alpha: Smoothing factor in (0, 1] (default: 0.3)

    Returns:
        Smoothed values, same length as ``series``
    """
    alpha = validate_alpha(alpha)
    values = pd.Series(as_series(series))

    return values.ewm(alpha=alpha, adjust=False).mean().tolist()
