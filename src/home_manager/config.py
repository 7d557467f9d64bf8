"""Configuration settings for the home manager API."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME: Final[str] = "Home Manager API"
SERVICE_VERSION: Final[str] = "0.1.0"

# Forecast shape, fixed by the public contract of GET /weatherforecast
FORECAST_DAYS: Final[int] = 5
TEMPERATURE_MIN_C: Final[int] = -20
TEMPERATURE_MAX_C: Final[int] = 55

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()
DOCS_ENABLED: bool = os.getenv("DOCS_ENABLED", "true").lower() == "true"

# Timezone used to determine the first forecast date
FORECAST_TIMEZONE: str = os.getenv("FORECAST_TIMEZONE", "UTC")
