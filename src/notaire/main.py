"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from notaire.config.settings import Settings, get_settings
from notaire.di import Container
from notaire.domain.exceptions import NotaireException
from notaire.infrastructure.monitoring import get_logger, setup_logging
from notaire.presentation.api.dependencies import set_container
from notaire.presentation.api.middleware import (
    RequestIDMiddleware,
    http_exception_handler,
    notaire_exception_handler,
    request_validation_exception_handler,
    unhandled_exception_handler,
)
from notaire.presentation.api.routes import health_router, signature_router


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)
        container: Optional pre-built Container (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = container.settings if container else get_settings()

    setup_logging(level=settings.LOG_LEVEL, json_logs=settings.use_json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating Notaire application (ENV={settings.ENV})")

    if container is None:
        container = Container(settings)
    set_container(container)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Notaire application...")
        await container.initialize()
        logger.info(
            "Authentication: "
            + ("ENABLED" if settings.REQUIRE_AUTH else "DISABLED")
        )
        logger.info(f"History backend: {settings.HISTORY_BACKEND}")

        yield

        logger.info("Shutting down Notaire application...")
        await container.shutdown()
        logger.info("Notaire application shutdown complete")

    app = FastAPI(
        title="Notaire API",
        description="Web3 message signature verification",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.container = container

    # Middleware chain: request id first, CORS outermost
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Exception handlers
    app.add_exception_handler(NotaireException, notaire_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routes are served both at the root and under /api
    app.include_router(health_router, prefix="/api")
    app.include_router(signature_router, prefix="/api")
    app.include_router(health_router, include_in_schema=False)
    app.include_router(signature_router, include_in_schema=False)

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint."""
        return {
            "service": settings.APP_NAME,
            "status": "running",
            "version": settings.APP_VERSION,
            "description": "Web3 message signature verification",
            "endpoints": {
                "health": "/api/health",
                "liveness": "/api/health/live",
                "readiness": "/api/health/ready",
                "verify": "POST /api/verify-signature",
                "history": "GET /api/signatures",
                "clear_history": "DELETE /api/signatures",
                "docs": "/docs",
            },
        }

    logger.info("Notaire application created successfully")

    return app


def get_app() -> FastAPI:
    """ASGI factory for uvicorn --factory."""
    return create_app()


def main(settings: Optional[Settings] = None):
    """
    Main entry point for Notaire application.

    Loads configuration and starts the server.
    """
    if settings is None:
        settings = get_settings()

    if settings.API_RELOAD:
        uvicorn.run(
            "notaire.main:get_app",
            factory=True,
            host=settings.API_HOST,
            port=settings.API_PORT,
            reload=True,
            log_level=settings.LOG_LEVEL.lower(),
        )
        return

    uvicorn.run(
        create_app(settings),
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
