"""API endpoints for the home manager service."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from home_manager.config import (
    SERVICE_NAME, SERVICE_VERSION,
    FORECAST_DAYS, FORECAST_TIMEZONE,
    TEMPERATURE_MIN_C, TEMPERATURE_MAX_C
)
from home_manager.forecast.models import (
    ForecastSettings, HealthStatus, ServiceInfo, WeatherForecast
)
from home_manager.forecast.service import ForecastService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["forecast"])

FORECAST_FAILED_DETAIL = "Internal server error: forecast generation failed"


def get_forecast_service() -> ForecastService:
    """Dependency to get forecast service instance.

    Raises:
        HTTPException: If the configured settings cannot build a forecast
    """
    try:
        return ForecastService(timezone_str=FORECAST_TIMEZONE)
    except ValueError as e:
        logger.error(f"Invalid forecast settings: {e}")
        raise HTTPException(status_code=500, detail=FORECAST_FAILED_DETAIL)


@router.get(
    "/weatherforecast",
    response_model=List[WeatherForecast],
    operation_id="GetWeatherForecast",
    summary="Get the weather forecast for the coming days"
)
async def get_weather_forecast(
    forecast_service: ForecastService = Depends(get_forecast_service)
) -> List[WeatherForecast]:
    """Get the weather forecast.

    Returns:
        One forecast per day, starting tomorrow

    Raises:
        HTTPException: If the forecast cannot be built
    """
    try:
        forecasts = forecast_service.get_forecasts()

    except (ValueError, ValidationError) as e:
        logger.error(f"Error building forecast: {e}")
        raise HTTPException(status_code=500, detail=FORECAST_FAILED_DETAIL)

    logger.info(f"Returning forecast with {len(forecasts)} days")
    return forecasts


@router.get("/health", response_model=HealthStatus, tags=["service"])
async def health_check() -> HealthStatus:
    """Health check endpoint."""
    return HealthStatus(status="healthy", service="home-manager-api")


@router.get("/info", response_model=ServiceInfo, tags=["service"])
async def get_service_info() -> ServiceInfo:
    """Get service information.

    Returns:
        Service information including forecast settings and features
    """
    return ServiceInfo(
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        forecast=ForecastSettings(
            days=FORECAST_DAYS,
            min_temperature_c=TEMPERATURE_MIN_C,
            max_temperature_c=TEMPERATURE_MAX_C,
            timezone=FORECAST_TIMEZONE
        ),
        features=[
            "Daily weather forecast for the coming days",
            "Celsius and Fahrenheit temperatures"
        ]
    )
