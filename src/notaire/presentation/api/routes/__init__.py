"""
API routes.
"""

from notaire.presentation.api.routes.health import router as health_router
from notaire.presentation.api.routes.signature import (
    router as signature_router,
)

__all__ = ["health_router", "signature_router"]
