"""Tests for the daily reduction of 3-hourly forecasts."""

from datetime import UTC, datetime

from weatherdash.ingest.daily_reduction import reduce_daily, reduce_daily_forecast
from weatherdash.models.weather import Forecast
from weatherdash.tests.fakes import epoch, forecast_payload, load_fixture

ALL_HOURS = [0, 3, 6, 9, 12, 15, 18, 21]


def _entries(payload: dict):
    return Forecast.model_validate(payload).entries


class TestReduceDaily:
    def test_two_full_days_pick_noon(self):
        entries = _entries(forecast_payload((2026, 2, 11), [ALL_HOURS, ALL_HOURS]))
        daily = reduce_daily(entries)
        assert [e.dt for e in daily] == [
            epoch(2026, 2, 11, 12),
            epoch(2026, 2, 12, 12),
        ]

    def test_trailing_morning_only_day_omitted(self):
        entries = _entries(
            forecast_payload((2026, 2, 11), [ALL_HOURS, [0, 3, 6, 9]])
        )
        daily = reduce_daily(entries)
        assert len(daily) == 1
        assert daily[0].moment.date() == datetime(2026, 2, 11, tzinfo=UTC).date()

    def test_first_entry_after_noon_when_noon_missing(self):
        entries = _entries(forecast_payload((2026, 2, 11), [[9, 15, 18]]))
        daily = reduce_daily(entries)
        assert [e.moment.hour for e in daily] == [15]

    def test_idempotent(self):
        entries = _entries(forecast_payload((2026, 2, 11), [ALL_HOURS] * 3))
        once = reduce_daily(entries)
        twice = reduce_daily(once)
        assert twice == once
        assert len(twice) == 3

    def test_empty_input(self):
        assert reduce_daily([]) == []

    def test_entirely_before_noon(self):
        entries = _entries(forecast_payload((2026, 2, 11), [[0, 3, 6, 9]]))
        assert reduce_daily(entries) == []

    def test_uses_utc_calendar_day(self):
        # 23:00 UTC still belongs to the same UTC day as the noon entry
        entries = _entries(forecast_payload((2026, 2, 11), [[13, 23]]))
        daily = reduce_daily(entries)
        assert len(daily) == 1
        assert daily[0].moment.hour == 13


class TestReduceDailyForecast:
    def test_fixture(self):
        forecast = Forecast.model_validate(load_fixture("owm_forecast_rio.json"))
        daily = reduce_daily_forecast(forecast)
        assert [e.dt for e in daily.entries] == [1770811200, 1770897600]
        assert [e.temp for e in daily.entries] == [29.8, 28.3]

    def test_does_not_mutate_input(self):
        forecast = Forecast.model_validate(load_fixture("owm_forecast_rio.json"))
        reduce_daily_forecast(forecast)
        assert len(forecast.entries) == 16
