"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance from an explicit
route table, registers exception handlers and lifespan events, and
provides the uvicorn entry point.
"""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.api.errors import register_error_handlers
from src.api.routes import ROUTES, Route, build_router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "pingme",
        "description": "PingMe API - greeting, health check and echo endpoints",
    },
]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def create_app(
    settings: Settings | None = None,
    routes: Sequence[Route] = ROUTES,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Application settings (defaults to cached environment settings)
        routes: Route table to serve; exactly these paths are routed
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        FastAPI lifespan context manager.

        Logs the served endpoints on startup and a notice on shutdown.
        Nothing is allocated, so there is nothing to close.
        """
        logger.info("%s starting on port %s...", settings.app_name, settings.port)
        logger.info("Endpoints available:")
        for route in routes:
            logger.info("  %-4s %s - %s", route.method, route.path, route.summary)

        yield

        logger.info("Shutting down %s...", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        description="PingMe API - Minimal greeting, health check and echo service "
        "with a uniform JSON envelope",
        version=settings.app_version,
        openapi_tags=tags_metadata,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.allowed_methods = {route.path: route.method for route in routes}
    register_error_handlers(app)
    app.include_router(build_router(routes))

    return app


app = create_app()


def run() -> None:
    """Start the HTTP server with uvicorn using environment settings."""
    settings = get_settings()

    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout_seconds,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
