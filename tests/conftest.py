import os
import sys

import pytest

# ensure workspace root is on sys.path so the package imports without installing
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def linear_series():
    return [10.0, 12.0, 14.0, 16.0]


@pytest.fixture
def shipment_series():
    # fixed values so engine tests never depend on the random sample generator
    return [
        10120.0, 11150.0, 11890.0, 12240.0, 11980.0, 11210.0,
        10330.0, 9280.0, 8410.0, 8170.0, 8560.0, 9390.0,
        10640.0, 11720.0, 12510.0, 12830.0, 12520.0, 11690.0,
    ]
