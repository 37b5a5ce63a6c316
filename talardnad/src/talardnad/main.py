"""
Main FastAPI application entry point.

Uses Application Factory Pattern: every app owns its own DI container.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from talardnad import __version__
from talardnad.config.settings import Settings, get_settings
from talardnad.di.container import DIContainer
from talardnad.domain.exceptions import TalardnadException
from talardnad.infrastructure.monitoring import get_logger, setup_logging
from talardnad.presentation.api.middleware import talardnad_exception_handler
from talardnad.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from talardnad.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)
from talardnad.presentation.api.routes import (
    auth,
    health,
    markets,
    payments,
    providers,
    users,
)

API_PREFIX = "/api/v1"


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)
        container: Optional pre-built container (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()
    if container is None:
        container = DIContainer(settings)

    # Structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(level=settings.LOG_LEVEL, json_logs=json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating Talardnad application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Talardnad application...")
        await container.initialize()
        logger.info("Talardnad application started successfully")

        yield

        logger.info("Shutting down Talardnad application...")
        await container.shutdown()
        logger.info("Talardnad application shutdown complete")

    app = FastAPI(
        title="Talardnad API",
        description="Marketplace API: providers, markets, users and payments",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    # Middleware chain (last added runs first)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        GZipMiddleware,
        minimum_size=1000,
        compresslevel=6,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(TalardnadException, talardnad_exception_handler)

    # Register routes
    app.include_router(auth.router, prefix=API_PREFIX)
    app.include_router(users.router, prefix=API_PREFIX)
    app.include_router(providers.router, prefix=API_PREFIX)
    app.include_router(markets.router, prefix=API_PREFIX)
    app.include_router(payments.router, prefix=API_PREFIX)
    app.include_router(health.router)

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": "Talardnad",
            "status": "running",
            "version": __version__,
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info("Talardnad application created successfully")

    return app


def get_app() -> FastAPI:
    """Factory used by uvicorn."""
    return create_app()


def main() -> None:
    """Run API server."""
    settings = get_settings()
    uvicorn.run(
        "talardnad.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
