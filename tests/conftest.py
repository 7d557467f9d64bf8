"""Pytest configuration and fixtures for home_manager tests."""

import random
from datetime import date

import pytest
from fastapi.testclient import TestClient

from home_manager.api.endpoints import get_forecast_service
from home_manager.forecast.service import ForecastService
from home_manager.main import create_app


@pytest.fixture
def fixed_today() -> date:
    """Date the deterministic forecast service treats as today."""
    return date(2026, 3, 14)


@pytest.fixture
def forecast_service(fixed_today: date) -> ForecastService:
    """Forecast service with a seeded random source and a fixed date."""
    return ForecastService(rng=random.Random(1234), today=lambda: fixed_today)


@pytest.fixture
def client():
    """Test client for the application."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def fixed_client(forecast_service: ForecastService):
    """Test client whose forecasts come from the deterministic service."""
    app = create_app()
    app.dependency_overrides[get_forecast_service] = lambda: forecast_service
    with TestClient(app) as test_client:
        yield test_client
