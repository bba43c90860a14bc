"""Weather service chaining geocoding, forecast fetching and formatting."""

import logging
from typing import Optional

import httpx

from city_forecast.config import Settings
from city_forecast.weather.client import ForecastClient
from city_forecast.weather.formatter import format_forecast
from city_forecast.weather.geocoding import GeocodingClient
from city_forecast.weather.models import WeatherDisplay

logger = logging.getLogger(__name__)


class WeatherService:
    """Per-request forecast pipeline for a city name."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the weather service.

        Args:
            settings: Runtime settings (defaults if None)
            transport: HTTP transport override, used to stub the upstream APIs
        """
        self.settings = settings or Settings()
        self.client = httpx.AsyncClient(
            headers={"User-Agent": self.settings.user_agent},
            timeout=self.settings.request_timeout,
            transport=transport
        )
        self.geocoding = GeocodingClient(self.client, self.settings.geocoding_api_url)
        self.forecasts = ForecastClient(self.client, self.settings.forecast_api_url)

    async def get_raw_forecast(self, city: str) -> str:
        """Geocode a city and fetch its forecast body untouched.

        Raises:
            ForecastError: From whichever step fails
        """
        coordinate = await self.geocoding.lookup_coordinates(city)
        return await self.forecasts.fetch_forecast(coordinate)

    async def get_weather_display(self, city: str) -> WeatherDisplay:
        """Geocode a city, fetch its forecast and format it for display.

        Args:
            city: City name as requested

        Returns:
            WeatherDisplay for the city

        Raises:
            ForecastError: From whichever step fails
        """
        raw = await self.get_raw_forecast(city)
        return format_forecast(city, raw)

    async def aclose(self):
        """Close the HTTP client."""
        try:
            await self.client.aclose()
        except Exception as e:
            logger.error(f"Error closing HTTP client: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
