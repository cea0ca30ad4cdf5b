"""
Tests for fitting dispatch, forecasting with confidence bands and the engine facade.
"""

import pytest

from shipment_forecasting.forecasting.exceptions import (
    EmptySeriesError,
    InsufficientDataError,
    InvalidParameterError,
    UnknownMethodError,
)
from shipment_forecasting.forecasting.models import (
    CONFIDENCE_Z,
    ForecastingEngine,
    fit_series,
    forecast_with_confidence,
    residual_std_dev,
)
from shipment_forecasting.forecasting.options import ForecastMethod, ForecastOptions
from shipment_forecasting.forecasting.regression import linear_regression
from shipment_forecasting.forecasting.smoothing import exponential_smoothing, moving_average

ALL_METHODS = [m.value for m in ForecastMethod]


def test_fit_series_dispatch(shipment_series):
    assert fit_series(shipment_series, "ma") == moving_average(shipment_series, 3)
    assert fit_series(shipment_series, "es") == exponential_smoothing(shipment_series, 0.3)
    assert fit_series(shipment_series, "lr") == linear_regression(shipment_series).fitted


def test_fit_series_methods_are_distinct(shipment_series):
    fits = [tuple(fit_series(shipment_series, m)) for m in ALL_METHODS]
    assert len(set(fits)) == 3


def test_linear_regression_forecast_example(linear_series):
    points = forecast_with_confidence(linear_series, 2, "linear-regression")
    assert [p.offset for p in points] == [1, 2]
    assert [p.predicted for p in points] == pytest.approx([18.0, 20.0])
    for p in points:
        # zero residuals -> zero-width band
        assert p.lower == p.upper == p.predicted


@pytest.mark.parametrize("method", ALL_METHODS)
def test_bounds_contain_prediction(shipment_series, method):
    for p in forecast_with_confidence(shipment_series, 12, method):
        assert p.lower <= p.predicted <= p.upper


@pytest.mark.parametrize("method", ALL_METHODS)
def test_band_width_is_constant_across_horizon(shipment_series, method):
    points = forecast_with_confidence(shipment_series, 8, method)
    fitted = fit_series(shipment_series, method)
    expected = 2 * CONFIDENCE_Z * residual_std_dev(shipment_series, fitted)
    for p in points:
        assert p.width == pytest.approx(expected)


def test_forecast_extrapolates_last_fitted_step(shipment_series):
    fitted = exponential_smoothing(shipment_series, 0.3)
    step = fitted[-1] - fitted[-2]
    points = forecast_with_confidence(shipment_series, 3, "es")
    assert [p.predicted for p in points] == pytest.approx(
        [fitted[-1] + step * k for k in (1, 2, 3)]
    )


def test_residual_std_dev_is_rms():
    assert residual_std_dev([1, 2, 3], [1, 4, 3]) == pytest.approx((4 / 3) ** 0.5)


@pytest.mark.parametrize("periods", [0, -3])
def test_non_positive_periods_give_empty_forecast(linear_series, periods):
    assert forecast_with_confidence(linear_series, periods, "lr") == []


@pytest.mark.parametrize("method", ALL_METHODS)
def test_forecast_needs_two_observations(method):
    with pytest.raises(InsufficientDataError):
        forecast_with_confidence([100.0], 3, method)


def test_forecast_empty_series():
    with pytest.raises(EmptySeriesError):
        forecast_with_confidence([], 3)


def test_forecast_unknown_method(linear_series):
    with pytest.raises(UnknownMethodError):
        forecast_with_confidence(linear_series, 3, "holt-winters")


def test_forecast_point_to_dict(linear_series):
    point = forecast_with_confidence(linear_series, 1, "lr")[0]
    assert point.to_dict() == {
        "offset": 1,
        "predicted": pytest.approx(18.0),
        "confidence": {"lower": pytest.approx(18.0), "upper": pytest.approx(18.0)},
    }


class TestForecastingEngine:

    def test_defaults(self):
        engine = ForecastingEngine()
        info = engine.get_model_info()
        assert info["default_method"] == "exponential-smoothing"
        assert info["supported_methods"] == ALL_METHODS
        assert info["window"] == 3
        assert info["alpha"] == 0.3

    def test_rejects_unknown_default(self):
        with pytest.raises(UnknownMethodError):
            ForecastingEngine(default_method="holt_winters")

    def test_from_options(self):
        engine = ForecastingEngine.from_options(ForecastOptions(method="ma", window=5, alpha=0.6))
        assert engine.default_method is ForecastMethod.MOVING_AVERAGE
        assert engine.window == 5
        assert engine.alpha == 0.6

    def test_forecast_result(self, linear_series):
        engine = ForecastingEngine(default_method="lr")
        result = engine.forecast(linear_series, periods=2)
        assert result.method is ForecastMethod.LINEAR_REGRESSION
        assert result.fitted == pytest.approx(linear_series)
        assert result.metrics.mae == pytest.approx(0.0)

        df = result.to_dataframe()
        assert list(df.columns) == ["offset", "predicted", "lower", "upper"]
        assert df["predicted"].tolist() == pytest.approx([18.0, 20.0])

        data = result.to_dict()
        assert data["method"] == "linear-regression"
        assert len(data["forecasts"]) == 2

    def test_forecast_zero_periods_keeps_fit(self, shipment_series):
        result = ForecastingEngine().forecast(shipment_series, periods=0)
        assert result.forecasts == []
        assert len(result.fitted) == len(shipment_series)

    def test_method_override(self, shipment_series):
        engine = ForecastingEngine(default_method="es", window=4)
        assert engine.fit(shipment_series, "ma") == moving_average(shipment_series, 4)

    def test_engine_matches_function(self, shipment_series):
        engine = ForecastingEngine()
        result = engine.forecast(shipment_series, periods=4, method="ma")
        expected = forecast_with_confidence(shipment_series, 4, "ma")
        assert result.forecasts == expected

    def test_compare_models(self, shipment_series):
        comparisons = ForecastingEngine().compare_models(shipment_series)
        assert [c.method.value for c in comparisons] == ALL_METHODS
        assert [c.name for c in comparisons] == [
            "Moving Average", "Exponential Smoothing", "Linear Regression"
        ]
        for c in comparisons:
            assert c.metrics.mae >= 0
            assert c.accuracy == pytest.approx(100 - c.metrics.mape)
            assert c.to_dict()["method"] == c.method.value

    def test_evaluate_model_single_point_regression(self):
        with pytest.raises(InsufficientDataError):
            ForecastingEngine().evaluate_model([1.0], "lr")


@pytest.mark.parametrize("periods", [2.5, 2.0, "3", True, None])
def test_forecast_rejects_non_integer_periods(linear_series, periods):
    with pytest.raises(InvalidParameterError):
        forecast_with_confidence(linear_series, periods, "lr")
    with pytest.raises(InvalidParameterError):
        ForecastingEngine().forecast(linear_series, periods=periods)


def test_engine_rejects_empty_method_selector(linear_series):
    engine = ForecastingEngine(default_method="lr")
    with pytest.raises(UnknownMethodError):
        engine.fit(linear_series, "")
    with pytest.raises(UnknownMethodError):
        engine.forecast(linear_series, periods=2, method="")
