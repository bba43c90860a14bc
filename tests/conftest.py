"""Shared fixtures: canned Open-Meteo payloads and stub transports."""

import json

import httpx
import pytest

GEOCODING_HOST = "geocoding-api.open-meteo.com"
FORECAST_HOST = "api.open-meteo.com"


@pytest.fixture
def geocoding_payload():
    """Geocoding response with two matches; only the first should be used."""
    return {
        "results": [
            {
                "id": 2988507,
                "name": "Paris",
                "latitude": 48.85341,
                "longitude": 2.3488,
                "country_code": "FR",
                "timezone": "Europe/Paris",
                "country": "France",
            },
            {
                "id": 4717560,
                "name": "Paris",
                "latitude": 33.66094,
                "longitude": -95.55551,
                "country_code": "US",
                "timezone": "America/Chicago",
                "country": "United States",
            },
        ],
        "generationtime_ms": 0.59,
    }


@pytest.fixture
def forecast_payload():
    """Forecast response with three hourly samples."""
    return {
        "latitude": 48.86,
        "longitude": 2.3399997,
        "generationtime_ms": 0.064,
        "utc_offset_seconds": 0,
        "timezone": "GMT",
        "timezone_abbreviation": "GMT",
        "elevation": 43.0,
        "hourly_units": {"time": "iso8601", "temperature_2m": "°C"},
        "hourly": {
            "time": ["2023-10-01T00:00", "2023-10-01T01:00", "2023-10-01T02:00"],
            "temperature_2m": [6.6, 6.0, 6.55],
        },
    }


@pytest.fixture
def forecast_body(forecast_payload):
    """Forecast payload serialized the way the upstream sends it."""
    return json.dumps(forecast_payload)


@pytest.fixture
def open_meteo_handler(geocoding_payload, forecast_body):
    """Transport handler answering both upstream APIs and recording requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        handler.requests.append(request)
        if request.url.host == GEOCODING_HOST:
            return httpx.Response(200, json=geocoding_payload)
        if request.url.host == FORECAST_HOST:
            return httpx.Response(200, text=forecast_body)
        return httpx.Response(404)

    handler.requests = []
    return handler
