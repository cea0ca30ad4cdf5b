"""
Async client for the FRED (Federal Reserve Economic Data) observations API.

All connection details are passed in at construction time; the client does
not read API keys or URLs from the environment.
"""

from typing import Dict, Iterable, List, Optional
import asyncio
import logging

import httpx
import pandas as pd

from .exceptions import UnknownIndicatorError, UpstreamError, UpstreamUnavailable
from .models import MISSING_VALUE, SERIES_IDS, IndicatorSeries, Observation

log = logging.getLogger(__name__)

OBSERVATIONS_PATH = "/series/observations"


class FredClient:
    """
    Fetches indicator observations from FRED.

    Args:
        api_key: FRED API key
        base_url: FRED API root, e.g. https://api.stlouisfed.org/fred
        timeout: Request timeout in seconds
        observation_start: Earliest observation date (YYYY-MM-DD)
        transport: Optional httpx transport, used to stub the network in tests
    """

    def __init__(self,
                 api_key: str,
                 base_url: str,
                 timeout: int = 30,
                 observation_start: str = "2023-01-01",
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.base_url = str(base_url).rstrip("/")
        self.timeout = timeout
        self.observation_start = observation_start
        self._transport = transport

    @property
    def observations_url(self) -> str:
        return f"{self.base_url}{OBSERVATIONS_PATH}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def fetch_series(self, series_id: str) -> List[Observation]:
        """
        Fetch all observations of one FRED series since ``observation_start``.

        Missing values are dropped.
        """
        params = {
            "series_id": series_id,
            "api_key": self.api_key,
            "file_type": "json",
            "observation_start": self.observation_start,
        }
        log.info("Fetching %s from FRED", series_id)

        try:
            async with self._client() as client:
                resp = await client.get(self.observations_url, params=params)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            log.warning("FRED request for %s failed with status %s", series_id, e.response.status_code)
            raise UpstreamError(
                f"Failed to fetch {series_id} [{e.response.status_code}]",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            log.warning("FRED request for %s timed out", series_id)
            raise UpstreamUnavailable(f"FRED request for {series_id} timed out") from e
        except httpx.RequestError as e:
            log.warning("Cannot reach FRED for %s: %s", series_id, e)
            raise UpstreamUnavailable(f"Cannot reach FRED at {self.observations_url}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            log.warning("FRED response for %s is not JSON", series_id)
            raise UpstreamError(f"FRED response for {series_id} is not JSON", status_code=resp.status_code) from e

        if not isinstance(payload, dict) or "observations" not in payload:
            raise UpstreamError(f"FRED response for {series_id} has no observations", status_code=resp.status_code)

        try:
            observations = [
                Observation.from_dict(obs)
                for obs in payload["observations"]
                if obs.get("value") != MISSING_VALUE
            ]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            log.warning("Malformed observation in FRED response for %s: %s", series_id, e)
            raise UpstreamError(
                f"FRED response for {series_id} has a malformed observation",
                status_code=resp.status_code,
            ) from e
        log.info("Fetched %d observations for %s", len(observations), series_id)
        return observations

    async def fetch_indicators(self, indicator: str = "all") -> List[IndicatorSeries]:
        """
        Fetch one named indicator, or every known indicator when ``indicator`` is "all".

        Series are fetched concurrently.
        """
        if indicator == "all":
            selected = list(SERIES_IDS.items())
        elif indicator in SERIES_IDS:
            selected = [(indicator, SERIES_IDS[indicator])]
        else:
            raise UnknownIndicatorError(
                f"Unknown indicator {indicator!r}; must be 'all' or one of {list(SERIES_IDS)}"
            )

        results = await asyncio.gather(*(self.fetch_series(series_id) for _, series_id in selected))
        return [
            IndicatorSeries(indicator=name, series_id=series_id, observations=observations)
            for (name, series_id), observations in zip(selected, results)
        ]

    async def fetch_combined(self, indicators: Optional[Iterable[str]] = None) -> pd.DataFrame:
        """
        Fetch several indicators and merge them on date.

        Returns:
            DataFrame with a ``date`` column and one column per indicator,
            sorted by date. Dates missing from a series are NaN.
        """
        names = list(indicators) if indicators is not None else list(SERIES_IDS)
        unknown = [name for name in names if name not in SERIES_IDS]
        if unknown:
            raise UnknownIndicatorError(f"Unknown indicators: {unknown}")

        results = await asyncio.gather(*(self.fetch_series(SERIES_IDS[name]) for name in names))

        columns: Dict[str, pd.Series] = {}
        for name, observations in zip(names, results):
            columns[name] = pd.Series(
                [obs.value for obs in observations],
                index=[obs.date for obs in observations],
                dtype=float,
            )

        combined = pd.DataFrame(columns).sort_index()
        combined.index.name = "date"
        return combined.reset_index()
