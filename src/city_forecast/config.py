"""Configuration settings for the city forecast service."""

import os
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

SERVICE_NAME: Final[str] = "City Forecast Service"
SERVICE_VERSION: Final[str] = "0.1.0"

# Upstream API configuration
GEOCODING_API_URL: str = os.getenv("GEOCODING_API_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_API_URL: str = os.getenv("FORECAST_API_URL", "https://api.open-meteo.com/v1/forecast")
USER_AGENT: str = os.getenv("USER_AGENT", "CityForecastService/0.1")
REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"))

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "3000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"


class Settings(BaseModel):
    """Immutable runtime settings, built once at startup."""
    model_config = ConfigDict(frozen=True)

    geocoding_api_url: str = Field(GEOCODING_API_URL, description="Geocoding search endpoint")
    forecast_api_url: str = Field(FORECAST_API_URL, description="Hourly forecast endpoint")
    user_agent: str = Field(USER_AGENT, description="User-Agent header for upstream requests")
    request_timeout: float = Field(REQUEST_TIMEOUT_SECONDS, gt=0, description="Per-call timeout in seconds")
