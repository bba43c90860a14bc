"""Turns raw hourly forecasts into display rows."""

import logging
import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import ValidationError

from city_forecast.weather.exceptions import DateParseError, DecodeError, MalformedPayloadError
from city_forecast.weather.models import Forecast, HourlyForecast, WeatherDisplay

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"
# Every field zero-padded; strptime alone accepts "2023-1-1T0:0"
TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}")

# Independent of LC_TIME
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_ONE_DECIMAL = Decimal("0.1")


def format_temperature(value: float) -> str:
    """Render a Celsius value with one decimal, rounding halves away from zero.

    Rounding works on the shortest decimal form of the float, so 6.55 gives
    "6.6°C" even though its binary value is slightly below 6.55.
    """
    rounded = Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return f"{rounded}°C"


def format_timestamp(timestamp: str) -> str:
    """Render "2023-10-01T00:00" as "Sun 00:00".

    Raises:
        DateParseError: If the timestamp does not match YYYY-MM-DDTHH:MM
    """
    if not TIMESTAMP_PATTERN.fullmatch(timestamp):
        raise DateParseError(f"error parsing forecast time {timestamp!r}: expected YYYY-MM-DDTHH:MM")
    try:
        parsed = datetime.strptime(timestamp, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise DateParseError(f"error parsing forecast time {timestamp!r}: {e}") from e
    return f"{WEEKDAY_NAMES[parsed.weekday()]} {parsed:%H:%M}"


def format_forecast(city: str, raw: str) -> WeatherDisplay:
    """Build the display model for a city from a raw forecast body.

    Args:
        city: City name to show, as requested
        raw: Forecast API response body

    Returns:
        WeatherDisplay with one row per hourly sample, in source order

    Raises:
        DecodeError: If the body is not a valid hourly forecast
        MalformedPayloadError: If the time and temperature series differ in length
        DateParseError: If any timestamp is malformed
    """
    try:
        forecast = HourlyForecast.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"Invalid forecast data format: {e}")
        raise DecodeError(f"error decoding weather response: {e}") from e

    times = forecast.hourly.time
    temperatures = forecast.hourly.temperature_2m
    if len(times) != len(temperatures):
        raise MalformedPayloadError(
            f"hourly series length mismatch: {len(times)} times, {len(temperatures)} temperatures"
        )

    forecasts = [
        Forecast(date=format_timestamp(t), temperature=format_temperature(temp))
        for t, temp in zip(times, temperatures)
    ]

    logger.info(f"Formatted {len(forecasts)} hourly forecasts for {city!r} ({forecast.timezone})")
    return WeatherDisplay(city=city, forecasts=forecasts)
