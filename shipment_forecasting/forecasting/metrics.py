"""
Point-forecast accuracy metrics (MAE, RMSE, MAPE).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence
import logging
import math

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error

from .exceptions import EmptySeriesError
from .options import as_series

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Metrics:
    """
    Accuracy of a fitted or predicted sequence against actual values.

    ``mape`` is a percentage. Positions whose actual value is exactly zero
    are left out of the MAPE average and counted in ``mape_excluded``; when
    every position is left out, ``mape`` is NaN and ``mape_defined`` is False.
    """
    mae: float
    rmse: float
    mape: float
    n: int
    mape_excluded: int = 0

    @property
    def mape_defined(self) -> bool:
        return not math.isnan(self.mape)

    @property
    def accuracy(self) -> Optional[float]:
        """Headline accuracy percentage (100 - MAPE), None if MAPE is undefined."""
        if not self.mape_defined:
            return None
        return 100 - self.mape

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mae': self.mae,
            'rmse': self.rmse,
            'mape': self.mape if self.mape_defined else None,
            'mape_defined': self.mape_defined,
            'mape_excluded': self.mape_excluded,
            'n': self.n
        }


def calculate_metrics(actual: Sequence[float], predicted: Sequence[float]) -> Metrics:
    """
    Compare ``predicted`` against ``actual`` position by position.

    Inputs of different length are aligned on the shorter one; the tail of
    the longer sequence is ignored rather than treated as an error.

    Args:
        actual: Observed values
        predicted: Fitted or forecast values

    Returns:
        Metrics over the aligned positions
    """
    n = min(len(actual), len(predicted))
    if n == 0:
        raise EmptySeriesError("actual and predicted must both be non-empty")
    if len(actual) != len(predicted):
        log.debug("Truncating metric inputs to %d positions (actual=%d, predicted=%d)",
                  n, len(actual), len(predicted))

    actual_values = as_series(actual[:n], name="actual")
    predicted_values = as_series(predicted[:n], name="predicted")

    mae = mean_absolute_error(actual_values, predicted_values)
    rmse = np.sqrt(mean_squared_error(actual_values, predicted_values))

    nonzero = actual_values != 0
    excluded = int(n - np.count_nonzero(nonzero))
    if excluded == n:
        log.debug("MAPE undefined: all %d actual values are zero", n)
        mape = float('nan')
    else:
        errors = np.abs(actual_values[nonzero] - predicted_values[nonzero])
        mape = float(np.mean(errors / np.abs(actual_values[nonzero])) * 100)

    return Metrics(
        mae=float(mae),
        rmse=float(rmse),
        mape=mape,
        n=n,
        mape_excluded=excluded
    )
