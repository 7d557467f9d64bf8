"""Tests for the forecast service."""

import random
from datetime import date, datetime, timedelta, timezone

import pytest

from home_manager.forecast.models import SUMMARIES
from home_manager.forecast.service import ForecastService


class TestGetForecasts:
    def test_returns_five_forecasts_by_default(self, forecast_service: ForecastService):
        assert len(forecast_service.get_forecasts()) == 5

    def test_dates_are_consecutive_starting_tomorrow(self, forecast_service: ForecastService, fixed_today: date):
        dates = [f.date for f in forecast_service.get_forecasts()]
        assert dates == [fixed_today + timedelta(days=offset) for offset in range(1, 6)]

    def test_values_within_bounds(self, fixed_today: date):
        service = ForecastService(days=200, rng=random.Random(7), today=lambda: fixed_today)
        for forecast in service.get_forecasts():
            assert -20 <= forecast.temperature_c <= 55
            assert forecast.summary in SUMMARIES

    def test_same_seed_gives_same_forecasts(self, fixed_today: date):
        first = ForecastService(rng=random.Random(99), today=lambda: fixed_today)
        second = ForecastService(rng=random.Random(99), today=lambda: fixed_today)
        assert first.get_forecasts() == second.get_forecasts()

    def test_custom_settings(self, fixed_today: date):
        service = ForecastService(
            days=3,
            min_temperature_c=4,
            max_temperature_c=4,
            summaries=["Mild"],
            today=lambda: fixed_today,
        )
        forecasts = service.get_forecasts()
        assert len(forecasts) == 3
        assert {f.temperature_c for f in forecasts} == {4}
        assert {f.summary for f in forecasts} == {"Mild"}

    def test_uses_configured_timezone_for_today(self):
        service = ForecastService(timezone_str="UTC")
        expected = datetime.now(timezone.utc).date() + timedelta(days=1)
        # Tolerate a date change during the test
        assert service.get_forecasts()[0].date in {expected, expected + timedelta(days=1)}

    def test_dates_after_minimum_date(self, forecast_service: ForecastService):
        assert all(f.date > date.min for f in forecast_service.get_forecasts())


class TestInvalidSettings:
    def test_rejects_zero_days(self):
        with pytest.raises(ValueError, match="at least one day"):
            ForecastService(days=0)

    def test_rejects_inverted_temperature_range(self):
        with pytest.raises(ValueError, match="Invalid temperature range"):
            ForecastService(min_temperature_c=10, max_temperature_c=-10)

    def test_rejects_empty_summaries(self):
        with pytest.raises(ValueError, match="must not be empty"):
            ForecastService(summaries=[])

    @pytest.mark.parametrize("timezone_str", ["Not/AZone", "../etc/passwd"])
    def test_rejects_unknown_timezone(self, timezone_str: str):
        with pytest.raises(ValueError, match="Unknown timezone"):
            ForecastService(timezone_str=timezone_str)
