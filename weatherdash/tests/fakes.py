"""Payload builders and a scriptable stand-in for OpenWeatherClient."""

import asyncio
import json
from datetime import UTC, datetime
from pathlib import Path

import httpx

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def epoch(year: int, month: int, day: int, hour: int = 0) -> int:
    return int(datetime(year, month, day, hour, tzinfo=UTC).timestamp())


def forecast_item(ts: int, temp: float = 20.0, description: str = "clear sky") -> dict:
    return {
        "dt": ts,
        "main": {"temp": temp},
        "weather": [{"description": description, "icon": "01d"}],
    }


def forecast_payload(
    day: tuple[int, int, int], hours_by_day: list[list[int]]
) -> dict:
    """Forecast envelope with one item per (day offset, hour).

    ``hours_by_day[0]`` holds the hours for ``day``, ``hours_by_day[1]``
    for the following day, and so on. Temperatures encode the day offset
    and hour so entries are easy to tell apart.
    """
    base = epoch(*day)
    items = []
    for offset, hours in enumerate(hours_by_day):
        for hour in hours:
            ts = base + offset * 86400 + hour * 3600
            items.append(forecast_item(ts, temp=offset * 100 + hour))
    return {"cod": "200", "cnt": len(items), "list": items}


def current_payload(name: str, temp: float = 21.5) -> dict:
    return {
        "name": name,
        "main": {"temp": temp, "humidity": 55},
        "weather": [{"description": "clear sky", "icon": "01d"}],
        "wind": {"speed": 3.2},
    }


class FakeOpenWeatherClient:
    """Records calls and serves canned payloads keyed by coordinates.

    A payload may be an exception instance, which is raised instead. An
    ``asyncio.Event`` registered in ``gates`` for a coordinate pair holds
    requests for that location until it is set.
    """

    def __init__(self):
        self.calls: list[tuple[str, float, float, str]] = []
        self.current: dict[tuple[float, float], object] = {}
        self.forecast: dict[tuple[float, float], object] = {}
        self.gates: dict[tuple[float, float], asyncio.Event] = {}

    async def get_current_weather(self, lat: float, lon: float, api_key: str) -> dict:
        return await self._serve("weather", self.current, lat, lon, api_key)

    async def get_forecast(self, lat: float, lon: float, api_key: str) -> dict:
        return await self._serve("forecast", self.forecast, lat, lon, api_key)

    async def _serve(self, kind, table, lat, lon, api_key) -> dict:
        self.calls.append((kind, lat, lon, api_key))
        gate = self.gates.get((lat, lon))
        if gate is not None:
            await gate.wait()
        payload = table.get((lat, lon))
        if payload is None:
            request = httpx.Request("GET", f"https://fake.test/{kind}")
            raise httpx.HTTPStatusError(
                "404 Not Found",
                request=request,
                response=httpx.Response(404, request=request),
            )
        if isinstance(payload, Exception):
            raise payload
        return payload
