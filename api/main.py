"""
Main HTTP API for DietMind.

This FastAPI app exposes the endpoints that use the internal core
(dietmind_core.engine) to generate meal plans.

Usage:
    uvicorn api.main:app --reload --port 5000
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dietmind_core.config import Settings, get_settings

from .models.requests import HealthResponse
from .routes import meal_plans
from .routes.static import build_static_router

logger = logging.getLogger(__name__)

HEALTH_PAYLOAD = {"status": "ok", "message": "DietMind backend is healthy"}


def configure_logging(settings: Settings) -> None:
    log_level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to use. Defaults to `get_settings()`.
    """
    settings = settings or get_settings()
    logger.info(f"🚀 Starting API in environment: {settings.environment}")

    app = FastAPI(
        title="DietMind API",
        description="API to generate personalized Indian meal plans",
        version="0.1.0",
    )

    logger.info(f"🌐 CORS origins configured: {settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Health check endpoint."""
        return HEALTH_PAYLOAD

    # Register routes
    app.include_router(meal_plans.router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        logger.info(f"📦 Serving frontend from {static_dir.resolve()}")
        app.include_router(build_static_router(static_dir))
    else:
        @app.get("/", response_model=HealthResponse)
        async def root():
            """Health check endpoint (no frontend build available)."""
            return HEALTH_PAYLOAD

    return app


configure_logging(get_settings())
app = create_app()
