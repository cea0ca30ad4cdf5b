"""
Application settings for the shipment forecasting service.

Values are read from ``SHIPMENT_FORECAST_*`` environment variables (or a
``.env`` file) once, by the application layer. The forecasting engine and
the FRED client never look at the environment: they receive these values
as constructor and call arguments.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


FRED_BASE_URL = "https://api.stlouisfed.org/fred"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SHIPMENT_FORECAST_", env_file=".env", extra="ignore")

    fred_api_key: str = "demo"
    fred_base_url: str = FRED_BASE_URL
    fred_timeout: int = 30
    fred_observation_start: str = "2023-01-01"

    default_method: str = "exponential-smoothing"
    default_periods: int = 6
    default_history_months: int = 24
    window: int = 3
    alpha: float = 0.3

    log_level: str = "INFO"


settings = Settings()
