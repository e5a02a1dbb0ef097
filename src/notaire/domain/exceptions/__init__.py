"""
Domain exceptions package.
"""

from notaire.domain.exceptions.auth import (
    AdditionalAuthRequiredError,
    AuthenticationError,
    MissingTokenError,
    TokenExpiredError,
    TokenInvalidError,
)
from notaire.domain.exceptions.base import (
    IdentityRequiredError,
    NotaireException,
    ValidationError,
)

__all__ = [
    # Base
    "NotaireException",
    "ValidationError",
    "IdentityRequiredError",
    # Auth
    "AuthenticationError",
    "MissingTokenError",
    "TokenExpiredError",
    "TokenInvalidError",
    "AdditionalAuthRequiredError",
]
