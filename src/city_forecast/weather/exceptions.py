"""Errors raised by the forecast pipeline."""


class ForecastError(Exception):
    """Base class for every failure surfaced to the HTTP layer."""
    pass


class NetworkError(ForecastError):
    """Raised when an outbound request cannot be completed."""
    pass


class ReadError(ForecastError):
    """Raised when a response body cannot be fully read."""
    pass


class DecodeError(ForecastError):
    """Raised when a response body is not the expected JSON."""
    pass


class NotFoundError(ForecastError):
    """Raised when geocoding returns no results."""
    pass


class DateParseError(ForecastError):
    """Raised when a forecast timestamp does not match the expected pattern."""
    pass


class MalformedPayloadError(ForecastError):
    """Raised when the hourly time and temperature series differ in length."""
    pass
