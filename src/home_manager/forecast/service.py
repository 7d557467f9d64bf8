"""Forecast service producing the sample weather forecast."""

import logging
import random
import zoneinfo
from datetime import date, datetime, timedelta
from typing import Callable, List, Optional, Sequence

from home_manager.config import (
    FORECAST_DAYS, FORECAST_TIMEZONE,
    TEMPERATURE_MIN_C, TEMPERATURE_MAX_C
)
from home_manager.forecast.models import SUMMARIES, WeatherForecast

logger = logging.getLogger(__name__)


class ForecastService:
    """Service generating consecutive daily forecasts starting tomorrow."""

    def __init__(
        self,
        days: int = FORECAST_DAYS,
        min_temperature_c: int = TEMPERATURE_MIN_C,
        max_temperature_c: int = TEMPERATURE_MAX_C,
        summaries: Sequence[str] = SUMMARIES,
        timezone_str: str = FORECAST_TIMEZONE,
        rng: Optional[random.Random] = None,
        today: Optional[Callable[[], date]] = None
    ):
        """Initialize the forecast service.

        Args:
            days: Number of forecast records to produce
            min_temperature_c: Lowest temperature that can be drawn (inclusive)
            max_temperature_c: Highest temperature that can be drawn (inclusive)
            summaries: Vocabulary the summary is drawn from
            timezone_str: Timezone used to determine the current date
            rng: Random source (creates default if None)
            today: Callable returning the current date (uses timezone_str if None)

        Raises:
            ValueError: If the settings cannot produce a valid forecast
        """
        if days < 1:
            raise ValueError(f"Forecast must cover at least one day, got {days}")
        if min_temperature_c > max_temperature_c:
            raise ValueError(
                f"Invalid temperature range: min={min_temperature_c}, max={max_temperature_c}"
            )
        if not summaries:
            raise ValueError("Summary vocabulary must not be empty")
        try:
            self.timezone = zoneinfo.ZoneInfo(timezone_str)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{timezone_str}'") from e

        self.days = days
        self.min_temperature_c = min_temperature_c
        self.max_temperature_c = max_temperature_c
        self.summaries = tuple(summaries)
        self.timezone_str = timezone_str
        self.rng = rng or random.Random()
        self._today = today or self._current_date

    def _current_date(self) -> date:
        return datetime.now(self.timezone).date()

    def get_forecasts(self) -> List[WeatherForecast]:
        """Build the forecast sequence.

        Returns:
            List of `days` forecasts dated from tomorrow onwards
        """
        start = self._today()
        forecasts = [
            self._create_forecast(start + timedelta(days=offset))
            for offset in range(1, self.days + 1)
        ]

        logger.debug(f"Generated {len(forecasts)} forecasts starting {forecasts[0].date}")
        return forecasts

    def _create_forecast(self, forecast_date: date) -> WeatherForecast:
        return WeatherForecast(
            date=forecast_date,
            temperature_c=self.rng.randint(self.min_temperature_c, self.max_temperature_c),
            summary=self.rng.choice(self.summaries)
        )
