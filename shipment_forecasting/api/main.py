"""
FastAPI application for the shipment forecasting service.

Provides REST API endpoints for:
- Forecasting sample or caller-supplied series
- Comparing model accuracy
- Calculating accuracy metrics
- Proxying economic indicators from FRED
"""

from typing import List, Dict, Any, Optional
from datetime import datetime, timezone
import logging

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from ..config import settings
from ..economic_data.client import FredClient
from ..economic_data.exceptions import EconomicDataError, UnknownIndicatorError
from ..forecasting.exceptions import ForecastingError
from ..forecasting.metrics import calculate_metrics
from ..forecasting.models import ForecastingEngine
from ..forecasting.options import ForecastOptions
from ..forecasting.sample import generate_sample_shipment_data

log = logging.getLogger(__name__)

API_VERSION = "0.1.0"


# Pydantic models for API
class ForecastRequest(BaseModel):
    series: List[float]
    periods: int = settings.default_periods
    method: Optional[str] = None
    window: int = settings.window
    alpha: float = settings.alpha


class MetricsRequest(BaseModel):
    actual: List[float]
    predicted: List[float]


class HistoricalPoint(BaseModel):
    label: str
    actual: float
    predicted: float


class ForecastResponse(BaseModel):
    historical: List[HistoricalPoint]
    forecasts: List[Dict[str, Any]]
    metrics: Dict[str, Any]
    method: str


class ModelsResponse(BaseModel):
    models: List[Dict[str, Any]]


class EconomicDataResponse(BaseModel):
    indicators: List[Dict[str, Any]]
    last_updated: str


class HealthResponse(BaseModel):
    status: str
    version: str
    supported_methods: List[str] = Field(default_factory=list)


# Initialize FastAPI app
app = FastAPI(
    title="Shipment Forecasting API",
    description="API for shipment volume forecasting and model accuracy",
    version=API_VERSION
)

forecasting_engine = ForecastingEngine(
    default_method=settings.default_method,
    window=settings.window,
    alpha=settings.alpha
)


def get_fred_client() -> FredClient:
    """Build the FRED client from application settings."""
    return FredClient(
        api_key=settings.fred_api_key,
        base_url=settings.fred_base_url,
        timeout=settings.fred_timeout,
        observation_start=settings.fred_observation_start
    )


def _forecast_response(engine: ForecastingEngine,
                       series: List[float],
                       periods: int,
                       method: Optional[str]) -> ForecastResponse:
    result = engine.forecast(series, periods=periods, method=method)

    historical = [
        HistoricalPoint(label=f"Month {i + 1}", actual=actual, predicted=predicted)
        for i, (actual, predicted) in enumerate(zip(series, result.fitted))
    ]
    return ForecastResponse(
        historical=historical,
        forecasts=[p.to_dict() for p in result.forecasts],
        metrics=result.metrics.to_dict(),
        method=result.method.value
    )


@app.get("/", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        supported_methods=ForecastingEngine.SUPPORTED_METHODS
    )


@app.get("/forecast", response_model=ForecastResponse)
async def sample_forecast(method: Optional[str] = None,
                          periods: int = Query(default=settings.default_periods, ge=0),
                          months: int = Query(default=settings.default_history_months, ge=0)):
    """
    Forecast a generated sample shipment series.
    """
    try:
        historical_data = generate_sample_shipment_data(months)
        return _forecast_response(forecasting_engine, historical_data, periods, method)

    except ForecastingError as e:
        log.info("Rejected sample forecast: %s", e)
        raise HTTPException(status_code=400, detail=f"Error generating forecast: {str(e)}")


@app.post("/forecast", response_model=ForecastResponse)
async def create_forecast(request: ForecastRequest):
    """
    Forecast a caller-supplied series.
    """
    try:
        options = ForecastOptions(
            method=request.method if request.method is not None else forecasting_engine.default_method,
            window=request.window,
            alpha=request.alpha,
            periods=request.periods
        )
        engine = ForecastingEngine.from_options(options)
        return _forecast_response(engine, request.series, options.periods, None)

    except ForecastingError as e:
        log.info("Rejected forecast request: %s", e)
        raise HTTPException(status_code=400, detail=f"Error generating forecast: {str(e)}")


@app.get("/metrics", response_model=ModelsResponse)
async def compare_models(months: int = Query(default=settings.default_history_months, ge=0)):
    """
    Compare in-sample accuracy of every model on a generated sample series.
    """
    try:
        historical_data = generate_sample_shipment_data(months)
        comparisons = forecasting_engine.compare_models(historical_data)
        return ModelsResponse(models=[c.to_dict() for c in comparisons])

    except ForecastingError as e:
        log.info("Rejected model comparison: %s", e)
        raise HTTPException(status_code=400, detail=f"Error calculating metrics: {str(e)}")


@app.post("/metrics")
async def create_metrics(request: MetricsRequest):
    """
    Calculate MAE, RMSE and MAPE between actual and predicted values.
    """
    try:
        return calculate_metrics(request.actual, request.predicted).to_dict()

    except ForecastingError as e:
        raise HTTPException(status_code=400, detail=f"Error calculating metrics: {str(e)}")


@app.get("/models/info")
async def get_model_info():
    """
    Get information about available forecasting models.
    """
    return forecasting_engine.get_model_info()


@app.get("/economic-data", response_model=EconomicDataResponse)
async def get_economic_data(indicator: str = "all",
                            client: FredClient = Depends(get_fred_client)):
    """
    Fetch economic indicators from FRED.
    """
    try:
        series = await client.fetch_indicators(indicator)

    except UnknownIndicatorError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EconomicDataError as e:
        log.warning("Economic data request failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to fetch economic data: {str(e)}")

    return EconomicDataResponse(
        indicators=[s.to_dict() for s in series],
        last_updated=datetime.now(timezone.utc).isoformat()
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
