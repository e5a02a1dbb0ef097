"""
Authentication domain exceptions.
"""

from notaire.domain.exceptions.base import NotaireException


class AuthenticationError(NotaireException):
    """Raised when bearer token authentication fails."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTHENTICATION_ERROR")


class MissingTokenError(AuthenticationError):
    """Raised when the Authorization header is missing or malformed."""

    def __init__(self):
        super().__init__("Missing or invalid Authorization header")


class TokenExpiredError(AuthenticationError):
    """Raised when JWT token has expired."""

    def __init__(self):
        super().__init__("Token expired")


class TokenInvalidError(AuthenticationError):
    """Raised when JWT token is malformed or its signature is invalid."""

    def __init__(self, reason: str | None = None):
        message = "Invalid token"
        if reason:
            message = f"Invalid token: {reason}"
        super().__init__(message)


class AdditionalAuthRequiredError(AuthenticationError):
    """Raised when the identity provider demands a further auth step."""

    def __init__(self):
        super().__init__("Additional verification required")
