"""
JWT verification infrastructure for Notaire.

Validates bearer tokens against a JWKS endpoint, or against a shared
secret when no JWKS endpoint is configured.
"""

from typing import List, Optional

import jwt
from jwt import PyJWKClient

from notaire.domain.auth import TokenPayload


class JWTVerifier:
    """
    JWT token verifier.

    Attributes:
        jwks_url: JSON Web Key Set endpoint (preferred key source)
        secret: Shared secret used when jwks_url is not set
        algorithms: Accepted signing algorithms
        audience: Expected audience claim (not checked when None)
    """

    def __init__(
        self,
        jwks_url: Optional[str] = None,
        secret: Optional[str] = None,
        algorithms: Optional[List[str]] = None,
        audience: Optional[str] = None,
        cache_max_entries: int = 5,
        cache_max_age: int = 600,
        jwks_client: Optional[PyJWKClient] = None,
    ):
        """
        Initialize JWT verifier.

        Args:
            jwks_url: JWKS endpoint URL
            secret: Shared secret (HS* algorithms)
            algorithms: Accepted algorithms (default: RS256 for JWKS,
                HS256 for shared secrets)
            audience: Expected audience
            cache_max_entries: Max signing keys kept in the JWKS cache
            cache_max_age: JWKS cache lifetime in seconds
            jwks_client: Pre-built JWKS client (for testing)

        Raises:
            ValueError: If neither jwks_url nor secret is provided
        """
        if not jwks_url and not secret and jwks_client is None:
            raise ValueError("JWKS_URL or JWT_SECRET_KEY must be configured")

        self.jwks_url = jwks_url
        self.secret = secret
        self.audience = audience

        if algorithms:
            self.algorithms = list(algorithms)
        elif jwks_url or jwks_client is not None:
            self.algorithms = ["RS256"]
        else:
            self.algorithms = ["HS256"]

        self._jwks_client = jwks_client
        if self._jwks_client is None and jwks_url:
            self._jwks_client = PyJWKClient(
                jwks_url,
                cache_keys=True,
                max_cached_keys=cache_max_entries,
                lifespan=cache_max_age,
            )

    def _resolve_key(self, token: str):
        if self._jwks_client is not None:
            return self._jwks_client.get_signing_key_from_jwt(token).key
        return self.secret

    def verify_token(self, token: str) -> TokenPayload:
        """
        Verify JWT token and return payload.

        Args:
            token: JWT token string

        Returns:
            Validated TokenPayload

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            key = self._resolve_key(token)
            payload = jwt.decode(
                token,
                key,
                algorithms=self.algorithms,
                audience=self.audience,
                options={
                    "require": ["exp"],
                    "verify_aud": self.audience is not None,
                },
            )
            return TokenPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ValueError("Token expired")
        except jwt.PyJWKClientError as e:
            raise ValueError(f"Invalid token: {str(e)}")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
