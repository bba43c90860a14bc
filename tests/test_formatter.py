"""Tests for the forecast formatter."""

import json
import locale

import pytest

from city_forecast.weather.exceptions import DateParseError, DecodeError, MalformedPayloadError
from city_forecast.weather.formatter import format_forecast, format_temperature, format_timestamp
from city_forecast.weather.models import Forecast


def hourly_body(times, temperatures, timezone="GMT"):
    return json.dumps({
        "latitude": 53.625,
        "longitude": 55.9375,
        "timezone": timezone,
        "hourly": {"time": times, "temperature_2m": temperatures},
    })


def test_single_sample():
    display = format_forecast("Ufa", hourly_body(["2023-10-01T00:00"], [6.6]))

    assert display.city == "Ufa"
    assert display.forecasts == [Forecast(date="Sun 00:00", temperature="6.6°C")]


def test_preserves_source_order(forecast_body):
    display = format_forecast("Paris", forecast_body)

    assert [f.date for f in display.forecasts] == ["Sun 00:00", "Sun 01:00", "Sun 02:00"]
    assert [f.temperature for f in display.forecasts] == ["6.6°C", "6.0°C", "6.6°C"]


def test_city_is_taken_from_input_not_payload():
    display = format_forecast("  paris ", hourly_body(["2023-10-02T13:00"], [15.9]))

    assert display.city == "  paris "
    assert display.forecasts[0].date == "Mon 13:00"


def test_timezone_is_not_applied():
    display = format_forecast("Tokyo", hourly_body(["2023-10-07T23:00"], [20.0], timezone="Asia/Tokyo"))

    assert display.forecasts[0].date == "Sat 23:00"


def test_empty_series():
    display = format_forecast("Nowhere", hourly_body([], []))

    assert display.forecasts == []


@pytest.mark.parametrize("value, expected", [
    (6.0, "6.0°C"),
    (6.55, "6.6°C"),
    (6.549, "6.5°C"),
    (-6.55, "-6.6°C"),
    (15, "15.0°C"),
    (0.05, "0.1°C"),
    (-12.34, "-12.3°C"),
])
def test_format_temperature(value, expected):
    assert format_temperature(value) == expected


def test_format_timestamp():
    assert format_timestamp("2024-02-29T07:05") == "Thu 07:05"


@pytest.mark.parametrize("timestamp, expected", [
    ("2023-10-02T00:00", "Mon 00:00"),
    ("2023-10-03T06:00", "Tue 06:00"),
    ("2023-10-04T12:00", "Wed 12:00"),
    ("2023-10-05T18:00", "Thu 18:00"),
    ("2023-10-06T23:00", "Fri 23:00"),
    ("2023-10-07T09:30", "Sat 09:30"),
    ("2023-10-08T00:59", "Sun 00:59"),
])
def test_format_timestamp_uses_english_weekdays(timestamp, expected):
    assert format_timestamp(timestamp) == expected


@pytest.fixture
def german_time_locale():
    """Switch LC_TIME to German for one test, if the host has it."""
    previous = locale.setlocale(locale.LC_TIME)
    for name in ("de_DE.UTF-8", "de_DE.utf8", "de_DE"):
        try:
            locale.setlocale(locale.LC_TIME, name)
            break
        except locale.Error:
            continue
    else:
        pytest.skip("no German locale installed")
    yield
    locale.setlocale(locale.LC_TIME, previous)


def test_format_timestamp_ignores_time_locale(german_time_locale):
    assert format_timestamp("2023-10-01T00:00") == "Sun 00:00"


@pytest.mark.parametrize("timestamp", [
    "not-a-date",
    "2023-10-01",
    "2023-10-01T00:00:00",
    "2023-10-01T00:00Z",
    "2023-13-01T00:00",
    "2023-1-1T0:0",
    "2023-10-1T00:00",
    "2023-10-01T1:00",
    "２０２３-10-01T00:00",
])
def test_format_timestamp_rejects_other_patterns(timestamp):
    with pytest.raises(DateParseError):
        format_timestamp(timestamp)


def test_malformed_timestamp_fails_whole_format():
    body = hourly_body(["2023-10-01T00:00", "2023-10-01T01:00", "not-a-date"], [6.6, 6.2, 5.6])

    with pytest.raises(DateParseError):
        format_forecast("Ufa", body)


def test_length_mismatch_raises_malformed_payload():
    body = hourly_body(["2023-10-01T00:00", "2023-10-01T01:00"], [6.6])

    with pytest.raises(MalformedPayloadError):
        format_forecast("Ufa", body)


@pytest.mark.parametrize("raw", [
    "",
    "not json",
    '{"latitude": 1.0, "longitude": 2.0, "timezone": "GMT"}',
    '{"error": true, "reason": "Latitude must be in range of -90 to 90°."}',
    hourly_body(["2023-10-01T00:00"], ["warm"]),
    hourly_body(["2023-10-01T00:00"], [None]),
])
def test_invalid_payload_raises_decode_error(raw):
    with pytest.raises(DecodeError):
        format_forecast("Ufa", raw)
