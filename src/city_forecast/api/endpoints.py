"""API endpoints for the city forecast service."""

import logging
import os
from typing import AsyncGenerator

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from city_forecast.config import SERVICE_NAME
from city_forecast.weather.exceptions import ForecastError
from city_forecast.weather.models import (
    ErrorResponse, RawForecastResponse, WeatherDisplayResponse
)
from city_forecast.weather.service import WeatherService

logger = logging.getLogger(__name__)

TEMPLATES_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")
templates = Jinja2Templates(directory=TEMPLATES_PATH)

router = APIRouter()

ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Any upstream or formatting failure"}}


async def get_weather_service(request: Request) -> AsyncGenerator[WeatherService, None]:
    """Dependency yielding a weather service bound to the app settings."""
    async with WeatherService(request.app.state.settings) as service:
        yield service


def error_response(e: ForecastError) -> JSONResponse:
    """Flatten any pipeline failure to a 500 with its message."""
    logger.error(f"Forecast pipeline failed ({type(e).__name__}): {e}")
    return JSONResponse(status_code=500, content=ErrorResponse(error=str(e)).model_dump())


@router.get("/", response_class=HTMLResponse, tags=["root"])
async def index(request: Request):
    """Landing page with the city search form."""
    return templates.TemplateResponse(request, "index.html", {"service_name": SERVICE_NAME})


@router.get(
    "/weather",
    response_class=HTMLResponse,
    responses=ERROR_RESPONSES,
    tags=["weather"]
)
async def get_weather_page(
    request: Request,
    city: str = Query("", description="City name to forecast"),
    service: WeatherService = Depends(get_weather_service)
):
    """Render the hourly forecast for a city as an HTML table."""
    try:
        display = await service.get_weather_display(city)
    except ForecastError as e:
        return error_response(e)

    return templates.TemplateResponse(
        request,
        "weather.html",
        {"city": display.city, "forecasts": display.forecasts}
    )


@router.get(
    "/weatherJSON",
    response_model=WeatherDisplayResponse,
    responses=ERROR_RESPONSES,
    tags=["weather"]
)
async def get_weather_json(
    city: str = Query("", description="City name to forecast"),
    service: WeatherService = Depends(get_weather_service)
):
    """Return the formatted hourly forecast for a city as JSON."""
    try:
        display = await service.get_weather_display(city)
    except ForecastError as e:
        return error_response(e)

    logger.info(f"Returning {len(display.forecasts)} forecasts for {city!r}")
    return WeatherDisplayResponse(OK=display)


@router.get(
    "/weatherRaw",
    response_model=RawForecastResponse,
    responses=ERROR_RESPONSES,
    tags=["weather"]
)
async def get_weather_raw(
    city: str = Query("", description="City name to forecast"),
    service: WeatherService = Depends(get_weather_service)
):
    """Return the unformatted forecast API body for a city."""
    try:
        raw = await service.get_raw_forecast(city)
    except ForecastError as e:
        return error_response(e)

    return RawForecastResponse(weather=raw)


@router.get("/health", tags=["root"])
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status response
    """
    return {"status": "healthy", "service": "city-forecast"}
