"""Data models for the city forecast service."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """Geographic coordinate of a geocoded city."""
    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")


class GeocodingResponse(BaseModel):
    """Raw response from the Open-Meteo geocoding API."""
    results: Optional[List[Coordinate]] = Field(None, description="Matching places, best first; null or absent when none")


class HourlySeries(BaseModel):
    """Parallel hourly arrays from the forecast API."""
    model_config = ConfigDict(allow_inf_nan=False)

    time: List[str] = Field(..., description="Local timestamps as YYYY-MM-DDTHH:MM")
    temperature_2m: List[float] = Field(..., description="Air temperature at 2 m in Celsius")


class HourlyForecast(BaseModel):
    """Raw response from the Open-Meteo forecast API."""
    latitude: float = Field(..., description="Latitude of the grid cell")
    longitude: float = Field(..., description="Longitude of the grid cell")
    timezone: str = Field(..., description="Timezone of the hourly timestamps")
    hourly: HourlySeries = Field(..., description="Hourly temperature series")


class Forecast(BaseModel):
    """One display row of the hourly forecast."""
    date: str = Field(..., description="Abbreviated weekday and time, e.g. 'Sun 00:00'")
    temperature: str = Field(..., description="Temperature with one decimal, e.g. '6.6°C'")


class WeatherDisplay(BaseModel):
    """Render-ready forecast for a city."""
    city: str = Field(..., description="City name as requested")
    forecasts: List[Forecast] = Field(..., description="Hourly forecasts in time order")


class WeatherDisplayResponse(BaseModel):
    """Successful JSON forecast response."""
    OK: WeatherDisplay


class RawForecastResponse(BaseModel):
    """Unformatted upstream forecast body."""
    weather: str = Field(..., description="Forecast API response body, verbatim")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
