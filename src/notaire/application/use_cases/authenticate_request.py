"""
Authenticate Request use case.

Resolves the bearer token of an incoming request into a TokenPayload.
"""

from typing import Optional

from starlette.concurrency import run_in_threadpool

from notaire.domain.auth import TokenPayload
from notaire.domain.exceptions import (
    AdditionalAuthRequiredError,
    MissingTokenError,
    TokenExpiredError,
    TokenInvalidError,
)
from notaire.infrastructure.auth.jwt_verifier import JWTVerifier
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

ADDITIONAL_AUTH_SCOPE = "requiresAdditionalAuth"


class AuthenticateRequest:
    """
    Authenticate a request from its Authorization header.

    Business rules:
    - Header must be "Bearer <token>"
    - Token must verify and not be expired
    - Tokens flagged for additional verification are rejected
    """

    def __init__(self, jwt_verifier: JWTVerifier):
        self.jwt_verifier = jwt_verifier

    async def execute(self, authorization_header: Optional[str]) -> TokenPayload:
        """
        Execute authentication.

        Args:
            authorization_header: Raw Authorization header value

        Returns:
            Verified TokenPayload

        Raises:
            MissingTokenError: If header is absent or not a bearer token
            TokenExpiredError: If token has expired
            TokenInvalidError: If token fails verification
            AdditionalAuthRequiredError: If the token demands step-up auth
        """
        token = self._extract_token(authorization_header)

        try:
            # A JWKS cache miss fetches keys over blocking HTTP
            payload = await run_in_threadpool(self.jwt_verifier.verify_token, token)
        except ValueError as e:
            if str(e) == "Token expired":
                raise TokenExpiredError()
            logger.debug(f"Token rejected: {e}")
            raise TokenInvalidError()

        if ADDITIONAL_AUTH_SCOPE in payload.scopes:
            raise AdditionalAuthRequiredError()

        return payload

    @staticmethod
    def _extract_token(authorization_header: Optional[str]) -> str:
        if not authorization_header:
            raise MissingTokenError()

        parts = authorization_header.split(" ", 1)
        if len(parts) != 2 or parts[0] != "Bearer" or not parts[1].strip():
            raise MissingTokenError()

        return parts[1].strip()
