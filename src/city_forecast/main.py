"""Main FastAPI application for the city forecast service."""

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from city_forecast.api.endpoints import router as weather_router
from city_forecast.config import DEBUG, HOST, PORT, SERVICE_NAME, SERVICE_VERSION, Settings
from city_forecast.logging_config import configure_logging

configure_logging(logging.DEBUG if DEBUG else logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = app.state.settings
    logger.info(f"Starting {SERVICE_NAME}")
    logger.info(f"Geocoding API: {settings.geocoding_api_url}")
    logger.info(f"Forecast API: {settings.forecast_api_url}")
    yield
    logger.info(f"Shutting down {SERVICE_NAME}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Runtime settings, read from the environment if None

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=SERVICE_NAME,
        description="Hourly temperature forecasts by city name, backed by the Open-Meteo APIs",
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.settings = settings or Settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(weather_router)

    static_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")
    app.mount("/static", StaticFiles(directory=static_path), name="static")

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the application."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        "city_forecast.main:app" if DEBUG else app,
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="info" if not DEBUG else "debug"
    )


if __name__ == "__main__":
    main()
