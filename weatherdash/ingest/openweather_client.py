"""OpenWeatherMap client for the current-conditions and 5-day/3-hour endpoints."""

import logging
from typing import Any

import httpx

from weatherdash import __version__
from weatherdash.config.schema import OPENWEATHER_BASE_URL, Units

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"weatherdash/{__version__}"
CURRENT_WEATHER_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"


class OpenWeatherClient:
    """Thin async wrapper over httpx.

    The user agent and timeout are sent with every request, so they also
    apply when an existing ``httpx.AsyncClient`` is passed as ``http``.

    Errors are raised, never absorbed: ``httpx.RequestError`` for transport
    failures, ``httpx.HTTPStatusError`` for non-2xx responses and
    ``ValueError`` for bodies that are not a JSON object.
    """

    def __init__(
        self,
        base_url: str = OPENWEATHER_BASE_URL,
        units: Units | str = Units.METRIC,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.units = str(units)
        self.user_agent = user_agent
        self.timeout = timeout
        self._http = http or httpx.AsyncClient()

    async def get_current_weather(self, lat: float, lon: float, api_key: str) -> dict:
        return await self._get(CURRENT_WEATHER_PATH, lat, lon, api_key)

    async def get_forecast(self, lat: float, lon: float, api_key: str) -> dict:
        """Fetch the 5-day forecast in 3-hour steps."""
        return await self._get(FORECAST_PATH, lat, lon, api_key)

    async def _get(self, path: str, lat: float, lon: float, api_key: str) -> dict:
        url = f"{self.base_url}{path}"
        params: dict[str, Any] = {
            "lat": lat,
            "lon": lon,
            "appid": api_key,
            "units": self.units,
        }
        logger.debug("GET %s lat=%s lon=%s", url, lat, lon)
        resp = await self._http.get(
            url,
            params=params,
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected JSON object from {path}, got {type(data).__name__}"
            )
        return data

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "OpenWeatherClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
