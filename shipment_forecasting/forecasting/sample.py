"""
Synthetic monthly shipment volumes for demos and smoke tests.
"""

from typing import List, Optional

import numpy as np

from .exceptions import InvalidParameterError


def generate_sample_shipment_data(months: int = 24,
                                  base_volume: float = 10000,
                                  trend: float = 50,
                                  seasonality: float = 2000,
                                  noise: float = 500,
                                  random_state: Optional[int] = None) -> List[float]:
    """
    Generate a trending, yearly-seasonal series with uniform noise.

    Each value is ``base_volume + trend * i + seasonality * sin(2*pi*i/12)``
    plus noise drawn uniformly from ``[-noise/2, noise/2)``. Output is random
    unless ``random_state`` is given.
    """
    if months < 0:
        raise InvalidParameterError(f"months must be zero or positive, got {months}")

    rng = np.random.default_rng(random_state)
    i = np.arange(months, dtype=float)

    trend_component = trend * i
    seasonal_component = seasonality * np.sin(2 * np.pi * i / 12)
    random_component = rng.uniform(-noise / 2, noise / 2, size=months)

    return (base_volume + trend_component + seasonal_component + random_component).tolist()
