"""
API package.
"""
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from omegaconf import DictConfig

from .routes import forecast
from ...application.builder import ForecastApplicationBuilder
from ....common.config import ConfigManager
from ....common.logging import setup_logger

logger = setup_logger(__name__)

def create_app(config: Optional[DictConfig] = None, builder: Optional[ForecastApplicationBuilder] = None) -> FastAPI:
    """
    Creates the API application.
    A prepared builder takes precedence over the config (used by tests).
    """
    if builder is None:
        config = config if config is not None else ConfigManager().load()
        builder = ForecastApplicationBuilder(config)

    app = FastAPI(title="Mart Crowd Forecast API")

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # The form is served from a separate origin
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(forecast.app.router, tags=["forecast"])
    forecast.init_application(builder)

    @app.get("/health", tags=["meta"])
    async def health():
        return {
            "status": "ok",
            "timezone": builder.config.forecast.timezone,
        }

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app
