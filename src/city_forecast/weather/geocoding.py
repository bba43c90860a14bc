"""Geocoding client for the Open-Meteo search API."""

import logging

import httpx
from pydantic import ValidationError

from city_forecast.config import GEOCODING_API_URL
from city_forecast.weather.exceptions import DecodeError, NetworkError, NotFoundError
from city_forecast.weather.models import Coordinate, GeocodingResponse

logger = logging.getLogger(__name__)


class GeocodingClient:
    """Resolves city names to coordinates."""

    def __init__(self, client: httpx.AsyncClient, base_url: str = GEOCODING_API_URL):
        """Initialize the geocoding client.

        Args:
            client: Shared HTTP client, owned by the caller
            base_url: Geocoding search endpoint
        """
        self.client = client
        self.base_url = base_url

    async def lookup_coordinates(self, city: str) -> Coordinate:
        """Convert a city name to the coordinates of its best match.

        Args:
            city: Free-text city name, may be empty

        Returns:
            Coordinate of the first search result

        Raises:
            NetworkError: If the request cannot be completed
            DecodeError: If the response is not the expected JSON
            NotFoundError: If the search returns no results
        """
        params = {"name": city, "count": 1, "language": "en", "format": "json"}

        logger.info(f"Geocoding city: {city!r}")

        try:
            response = await self.client.get(self.base_url, params=params)
        except httpx.TransportError as e:
            logger.error(f"Request error to geocoding API: {e!r}")
            raise NetworkError(f"error making request to geocoding API: {e}") from e

        try:
            geo = GeocodingResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Invalid geocoding response (status {response.status_code}): {e}")
            raise DecodeError(f"error decoding geocoding response: {e}") from e

        if not geo.results:
            logger.info(f"No geocoding results for {city!r}")
            raise NotFoundError(f"no results found for city {city!r}")

        coordinate = geo.results[0]
        logger.info(f"Geocoded {city!r} to ({coordinate.latitude}, {coordinate.longitude})")
        return coordinate
