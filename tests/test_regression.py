"""
Tests for the least-squares trend estimator.
"""

import pytest

from shipment_forecasting.forecasting.exceptions import InsufficientDataError
from shipment_forecasting.forecasting.regression import linear_regression


def test_linear_regression_exact_line(linear_series):
    res = linear_regression(linear_series)
    assert res.slope == pytest.approx(2.0)
    assert res.intercept == pytest.approx(10.0)
    assert res.fitted == pytest.approx([10, 12, 14, 16])


@pytest.mark.parametrize("m,b", [(3.5, -7.0), (-0.25, 100.0), (0.0, 4.0)])
def test_linear_regression_recovers_parameters(m, b):
    series = [m * i + b for i in range(12)]
    res = linear_regression(series)
    assert res.slope == pytest.approx(m, abs=1e-9)
    assert res.intercept == pytest.approx(b, abs=1e-9)
    assert res.predict(12) == pytest.approx(m * 12 + b, abs=1e-9)


def test_linear_regression_noisy_series():
    res = linear_regression([1, 3, 2, 4])
    # x_mean=1.5, y_mean=2.5, Sxy=4, Sxx=5
    assert res.slope == pytest.approx(0.8)
    assert res.intercept == pytest.approx(1.3)
    assert len(res.fitted) == 4


def test_linear_regression_single_point_fails():
    with pytest.raises(InsufficientDataError) as exc:
        linear_regression([5.0])
    assert exc.value.required == 2
    assert exc.value.actual == 1


def test_regression_to_dict(linear_series):
    data = linear_regression(linear_series).to_dict()
    assert set(data) == {"slope", "intercept", "fitted"}
