#!/usr/bin/env python3
"""
Example usage of the Shipment Forecasting engine.

This script generates a sample shipment series, fits it with each model,
prints a six-month forecast with confidence bands and compares model
accuracy.
"""

from shipment_forecasting import ForecastingEngine
from shipment_forecasting.forecasting import (
    ForecastingError,
    calculate_metrics,
    generate_sample_shipment_data,
    linear_regression,
)


def main():
    print("=== Shipment Forecasting Demo ===\n")

    # 1. Generate sample shipment data
    print("1. Generating sample shipment data...")
    history = generate_sample_shipment_data(months=24, random_state=42)
    print(f"Generated {len(history)} monthly observations")
    print(f"   First: {history[0]:,.0f}  Last: {history[-1]:,.0f}")

    # 2. Fit a linear trend
    print("\n2. Fitting linear trend...")
    regression = linear_regression(history)
    print(f"   Slope: {regression.slope:,.1f} per month, intercept: {regression.intercept:,.0f}")

    # 3. Forecast with the default method
    print("\n3. Generating shipment forecast...")
    forecaster = ForecastingEngine(default_method='exponential-smoothing')
    result = forecaster.forecast(history, periods=6)

    print(f"   Forecast ({result.method.label}):")
    for _, row in result.to_dataframe().iterrows():
        print(f"     Month +{int(row['offset'])}: {row['predicted']:,.0f} "
              f"[{row['lower']:,.0f} - {row['upper']:,.0f}]")

    # 4. Compare models
    print("\n4. Comparing models...")
    for comparison in forecaster.compare_models(history):
        m = comparison.metrics
        print(f"   {comparison.name:<22} MAE {m.mae:8.1f}  RMSE {m.rmse:8.1f}  "
              f"MAPE {m.mape:5.2f}%  accuracy {comparison.accuracy:5.1f}%")

    # 5. Metrics on explicit values
    print("\n5. Scoring a hand-made prediction...")
    metrics = calculate_metrics([100, 200, 300], [110, 190, 300])
    print(f"   MAE {metrics.mae:.2f}  RMSE {metrics.rmse:.2f}  MAPE {metrics.mape:.2f}%")

    # 6. Precondition failures are typed
    print("\n6. Forecasting a single observation...")
    try:
        forecaster.forecast([history[0]], periods=3)
    except ForecastingError as e:
        print(f"   Rejected: {e}")

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
