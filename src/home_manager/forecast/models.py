"""Data models for the weather forecast resource."""

import datetime as dt
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, computed_field, model_validator

SUMMARIES: tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

# Celsius per Fahrenheit degree, as used by the forecast wire format
FAHRENHEIT_DIVISOR = 0.5556


def celsius_to_fahrenheit(temperature_c: int) -> int:
    """Convert Celsius to Fahrenheit, truncating toward zero."""
    return 32 + int(temperature_c / FAHRENHEIT_DIVISOR)


def _normalize_key(key: str) -> str:
    return key.replace("_", "").lower()


class WeatherForecast(BaseModel):
    """Forecast record for a single day."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: dt.date = Field(..., description="Forecast date (ISO-8601, no time)")
    temperature_c: int = Field(..., alias="temperatureC", description="Temperature in Celsius")
    summary: Optional[str] = Field(None, description="Short description of the weather")

    @computed_field(alias="temperatureF", description="Temperature in Fahrenheit")
    @property
    def temperature_f(self) -> int:
        return celsius_to_fahrenheit(self.temperature_c)

    @model_validator(mode="before")
    @classmethod
    def _match_properties_case_insensitively(cls, data: Any) -> Any:
        """Map incoming property names onto fields regardless of case.

        The derived Fahrenheit value is dropped; it is always recomputed.
        """
        if not isinstance(data, dict):
            return data

        lookup = {}
        for name, field in cls.model_fields.items():
            lookup[_normalize_key(name)] = name
            if field.alias:
                lookup[_normalize_key(field.alias)] = name

        normalized = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            normalized_key = _normalize_key(key)
            if normalized_key == "temperaturef":
                continue
            normalized[lookup.get(normalized_key, key)] = value
        return normalized

    @classmethod
    def from_json(cls, payload: str | bytes) -> "WeatherForecast":
        """Parse a single forecast record from JSON."""
        return cls.model_validate_json(payload)


_forecast_list_adapter = TypeAdapter(List[WeatherForecast])


def parse_forecast_list(payload: str | bytes) -> List[WeatherForecast]:
    """Parse a JSON array of forecast records.

    Args:
        payload: JSON text as returned by GET /weatherforecast

    Returns:
        List of WeatherForecast records

    Raises:
        ValidationError: If the payload is not JSON or an element is not a forecast record
    """
    return _forecast_list_adapter.validate_json(payload)


class ForecastSettings(BaseModel):
    """Forecast generation settings reported by the info endpoint."""
    days: int = Field(..., ge=1, description="Number of forecast days")
    min_temperature_c: int = Field(..., description="Lowest generated temperature")
    max_temperature_c: int = Field(..., description="Highest generated temperature")
    timezone: str = Field(..., description="Timezone used to determine today's date")


class ServiceInfo(BaseModel):
    """Service information response model."""
    service: str
    version: str
    forecast: ForecastSettings
    features: List[str]


class HealthStatus(BaseModel):
    """Health check response model."""
    status: str
    service: str
