"""WeatherAggregator: selected city plus current, hourly and daily weather state."""

import asyncio
import logging
from collections.abc import Sequence

from weatherdash.config.defaults import DEFAULT_CITIES
from weatherdash.config.schema import CityConfig
from weatherdash.ingest.daily_reduction import reduce_daily_forecast
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.models.weather import CurrentWeather, Forecast
from weatherdash.state.observable import StateField

logger = logging.getLogger(__name__)


class WeatherAggregator:
    """Owns the city catalog and the weather state for the selected city.

    Fetch failures never reach the caller: the affected field is reset to
    None and the error is logged. Every fetch is stamped with the selection
    generation at issue time and its result is dropped if the user picked
    another city before it completed.
    """

    def __init__(
        self,
        client: OpenWeatherClient,
        api_key: str | None,
        cities: Sequence[CityConfig] | None = None,
    ):
        self.client = client
        self._api_key = api_key or None
        self._cities: tuple[CityConfig, ...] = tuple(cities or DEFAULT_CITIES)
        self._generation = 0
        self._tasks: set[asyncio.Task] = set()

        self.selected_city_field: StateField[CityConfig] = StateField(
            "selected_city", self._cities[0]
        )
        self.current_weather_field: StateField[CurrentWeather | None] = StateField(
            "current_weather", None
        )
        self.hourly_forecast_field: StateField[Forecast | None] = StateField(
            "hourly_forecast", None
        )
        self.daily_forecast_field: StateField[Forecast | None] = StateField(
            "daily_forecast", None
        )

        if self._api_key is None:
            logger.error(
                "OpenWeather API key not found; weather fetches are disabled"
            )

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @property
    def cities(self) -> tuple[CityConfig, ...]:
        return self._cities

    @property
    def selected_city(self) -> CityConfig:
        return self.selected_city_field.value

    @property
    def current_weather(self) -> CurrentWeather | None:
        return self.current_weather_field.value

    @property
    def hourly_forecast(self) -> Forecast | None:
        return self.hourly_forecast_field.value

    @property
    def daily_forecast(self) -> Forecast | None:
        return self.daily_forecast_field.value

    def select_city(self, city: CityConfig) -> asyncio.Task | None:
        """Select a city and start fetching its weather in the background.

        The returned task may be awaited but does not have to be. Outside a
        running event loop the selection still applies but nothing is
        scheduled; call fetch_all() from a loop to load it.
        """
        try:
            loop: asyncio.AbstractEventLoop | None = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        self._generation += 1
        self.selected_city_field.set(city)
        logger.info("Selected city %s", city.name)
        if self._api_key is None:
            return None
        if loop is None:
            logger.warning(
                "No running event loop, weather for %s not fetched", city.name
            )
            return None

        task = loop.create_task(self.fetch_all())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def fetch_all(self) -> None:
        """Fetch current, hourly and daily weather for the selected city, in sequence."""
        if self._api_key is None:
            return
        generation = self._generation
        city = self.selected_city
        steps = (
            self._fetch_current_weather,
            self._fetch_hourly_forecast,
            self._fetch_daily_forecast,
        )
        for step in steps:
            if generation != self._generation:
                logger.debug("Selection changed, abandoning fetch for %s", city.name)
                return
            await step(city.lat, city.lon, generation)

    fetch_weather_data = fetch_all

    async def fetch_current_weather(self, lat: float, lon: float) -> None:
        await self._fetch_current_weather(lat, lon, self._generation)

    async def fetch_hourly_forecast(self, lat: float, lon: float) -> None:
        await self._fetch_hourly_forecast(lat, lon, self._generation)

    async def fetch_daily_forecast(self, lat: float, lon: float) -> None:
        await self._fetch_daily_forecast(lat, lon, self._generation)

    async def _fetch_current_weather(
        self, lat: float, lon: float, generation: int
    ) -> None:
        if self._api_key is None:
            return
        result: CurrentWeather | None
        try:
            raw = await self.client.get_current_weather(lat, lon, self._api_key)
            result = CurrentWeather.model_validate(raw)
        except Exception:
            logger.exception("Failed to fetch current weather for %s,%s", lat, lon)
            result = None
        self._apply(self.current_weather_field, result, generation)

    async def _fetch_hourly_forecast(
        self, lat: float, lon: float, generation: int
    ) -> None:
        if self._api_key is None:
            return
        result: Forecast | None
        try:
            raw = await self.client.get_forecast(lat, lon, self._api_key)
            result = Forecast.model_validate(raw)
        except Exception:
            logger.exception("Failed to fetch hourly forecast for %s,%s", lat, lon)
            result = None
        self._apply(self.hourly_forecast_field, result, generation)

    async def _fetch_daily_forecast(
        self, lat: float, lon: float, generation: int
    ) -> None:
        # No dedicated daily endpoint on this plan; reduce the 3-hourly one.
        if self._api_key is None:
            return
        result: Forecast | None
        try:
            raw = await self.client.get_forecast(lat, lon, self._api_key)
            result = reduce_daily_forecast(Forecast.model_validate(raw))
        except Exception:
            logger.exception("Failed to fetch daily forecast for %s,%s", lat, lon)
            result = None
        self._apply(self.daily_forecast_field, result, generation)

    def _apply(self, field: StateField, value: object, generation: int) -> None:
        if generation != self._generation:
            logger.debug("Discarding stale %s result", field.name)
            return
        field.set(value)
