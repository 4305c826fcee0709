"""Output formatters for aggregator state."""

import json

from weatherdash.config.schema import CityConfig
from weatherdash.models.weather import CurrentWeather, Forecast, ForecastEntry


def _describe(conditions: list) -> str:
    if conditions and conditions[0].description:
        return conditions[0].description
    return "n/a"


def _fmt(value: float | None, suffix: str = "") -> str:
    return "n/a" if value is None else f"{value:.1f}{suffix}"


def _entry_line(entry: ForecastEntry, fmt: str) -> str:
    return (
        f"  {entry.moment.strftime(fmt)}  {entry.temp:5.1f}  "
        f"{_describe(entry.weather)}"
    )


def format_weather_text(
    city: CityConfig,
    current: CurrentWeather | None,
    hourly: Forecast | None,
    daily: Forecast | None,
    hours: int = 8,
) -> str:
    """Plain text report for the terminal."""
    hours = max(hours, 0)
    lines = [f"=== {city.name} ({city.lat:.4f}, {city.lon:.4f}) ==="]

    if current is None:
        lines.append("Current: unavailable")
    else:
        main = current.main
        wind = current.wind
        lines.append(
            f"Current: {_fmt(main.temp if main else None, '°')} "
            f"{_describe(current.weather)} | "
            f"Humidity: {_fmt(main.humidity if main else None, '%')} | "
            f"Wind: {_fmt(wind.speed if wind else None)}"
        )

    if hourly is None:
        lines.append("Hourly: unavailable")
    else:
        lines.append(f"Hourly (next {min(hours, len(hourly.entries))}):")
        lines.extend(_entry_line(e, "%a %H:%M") for e in hourly.entries[:hours])

    if daily is None:
        lines.append("Daily: unavailable")
    else:
        lines.append(f"Daily ({len(daily.entries)} days):")
        lines.extend(_entry_line(e, "%a %Y-%m-%d") for e in daily.entries)

    return "\n".join(lines)


def format_weather_json(
    city: CityConfig,
    current: CurrentWeather | None,
    hourly: Forecast | None,
    daily: Forecast | None,
) -> str:
    """JSON dump in the provider's own field names."""
    data = {
        "city": city.model_dump(),
        "current_weather": current.model_dump() if current else None,
        "hourly_forecast": hourly.model_dump(by_alias=True) if hourly else None,
        "daily_forecast": daily.model_dump(by_alias=True) if daily else None,
    }
    return json.dumps(data, indent=2)
