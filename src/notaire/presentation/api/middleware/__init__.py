"""
API middleware and exception handlers.
"""

from notaire.presentation.api.middleware.error_handler import (
    http_exception_handler,
    notaire_exception_handler,
    request_validation_exception_handler,
    unhandled_exception_handler,
)
from notaire.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "RequestIDMiddleware",
    "http_exception_handler",
    "notaire_exception_handler",
    "request_validation_exception_handler",
    "unhandled_exception_handler",
]
