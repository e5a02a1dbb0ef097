"""
Base domain exceptions.
"""


class NotaireException(Exception):
    """Base exception for all Notaire domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(NotaireException):
    """Raised when a request fails boundary validation."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(reason, code="VALIDATION_ERROR")


class IdentityRequiredError(NotaireException):
    """Raised when an operation needs an authenticated user identity."""

    def __init__(self, message: str = "User identity is required"):
        super().__init__(message, code="IDENTITY_REQUIRED")
