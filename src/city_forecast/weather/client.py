"""HTTP client for the Open-Meteo forecast API."""

import logging

import httpx

from city_forecast.config import FORECAST_API_URL
from city_forecast.weather.exceptions import NetworkError, ReadError
from city_forecast.weather.models import Coordinate

logger = logging.getLogger(__name__)


class ForecastClient:
    """Fetches raw hourly temperature forecasts."""

    def __init__(self, client: httpx.AsyncClient, base_url: str = FORECAST_API_URL):
        """Initialize the forecast client.

        Args:
            client: Shared HTTP client, owned by the caller
            base_url: Forecast endpoint
        """
        self.client = client
        self.base_url = base_url

    async def fetch_forecast(self, coordinate: Coordinate) -> str:
        """Fetch the hourly temperature forecast for a coordinate.

        The body is returned exactly as received; decoding is left to the caller.

        Args:
            coordinate: Location to forecast

        Returns:
            Raw response body

        Raises:
            NetworkError: If the request cannot be sent or no response arrives
            ReadError: If the response body cannot be fully read
        """
        params = {
            "latitude": f"{coordinate.latitude:.6f}",
            "longitude": f"{coordinate.longitude:.6f}",
            "hourly": "temperature_2m",
        }

        logger.info(f"Fetching forecast for lat={params['latitude']}, lon={params['longitude']}")

        try:
            async with self.client.stream("GET", self.base_url, params=params) as response:
                try:
                    await response.aread()
                except httpx.TransportError as e:
                    logger.error(f"Error reading forecast response body: {e!r}")
                    raise ReadError(f"error reading forecast response body: {e}") from e
        except httpx.TransportError as e:
            logger.error(f"Request error to forecast API: {e!r}")
            raise NetworkError(f"error making request to forecast API: {e}") from e

        logger.info(f"Fetched forecast ({response.status_code}, {len(response.content)} bytes)")
        return response.text
