"""
Health check API routes.

Kubernetes-compatible liveness and readiness probes.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError

from notaire.di import Container
from notaire.infrastructure.monitoring.logger import get_logger
from notaire.presentation.api.dependencies import get_container
from notaire.presentation.schemas import (
    HealthResponse,
    ProbeResponse,
    utc_timestamp,
)

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check_endpoint():
    """Basic health check."""
    return HealthResponse(status="ok", timestamp=utc_timestamp())


@router.get("/health/live", response_model=ProbeResponse)
async def liveness_probe(container: Container = Depends(get_container)):
    """
    Liveness probe endpoint.

    Returns 200 while the process can serve requests.
    """
    return ProbeResponse(
        status="healthy",
        service=container.settings.APP_NAME,
        version=container.settings.APP_VERSION,
        timestamp=utc_timestamp(),
    )


@router.get("/health/ready", response_model=ProbeResponse)
async def readiness_probe(
    response: Response,
    container: Container = Depends(get_container),
):
    """
    Readiness probe endpoint.

    Returns 200 if ready, 503 if not ready.

    Checks:
    - Signature history repository
    """
    try:
        history_ok = await container.history_repository.health_check()
    except (SQLAlchemyError, OSError, ValueError) as e:
        logger.warning(f"History repository check failed: {e}")
        history_ok = False

    if not history_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ProbeResponse(
        status="healthy" if history_ok else "unhealthy",
        service=container.settings.APP_NAME,
        version=container.settings.APP_VERSION,
        timestamp=utc_timestamp(),
        checks={
            "history": "healthy" if history_ok else "unhealthy",
            "backend": container.settings.HISTORY_BACKEND,
        },
    )
