"""Collapse a 3-hourly forecast into one near-noon entry per calendar day."""

from collections.abc import Iterable

from weatherdash.models.weather import Forecast, ForecastEntry

NOON_HOUR = 12


def reduce_daily(entries: Iterable[ForecastEntry]) -> list[ForecastEntry]:
    """Keep the first entry at or after noon (UTC) for each calendar day.

    Days with no such entry, typically the trailing partial day of the
    5-day window, are omitted. Input order is preserved, and running the
    reduction on its own output returns it unchanged.
    """
    daily: list[ForecastEntry] = []
    seen_days: set[str] = set()
    for entry in entries:
        moment = entry.moment
        day = moment.date().isoformat()
        if day not in seen_days and moment.hour >= NOON_HOUR:
            daily.append(entry)
            seen_days.add(day)
    return daily


def reduce_daily_forecast(forecast: Forecast) -> Forecast:
    return Forecast(entries=reduce_daily(forecast.entries))
