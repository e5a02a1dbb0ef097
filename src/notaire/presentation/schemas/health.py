"""
Schemas for health endpoints.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str = Field(default="ok", description="Service status")
    timestamp: str = Field(..., description="Server time (ISO-8601)")


class ProbeResponse(BaseModel):
    """Liveness / readiness probe response."""

    status: str = Field(..., description="healthy or unhealthy")
    service: str
    version: str
    timestamp: str
    checks: Optional[Dict[str, str]] = Field(
        default=None, description="Per-dependency status"
    )
