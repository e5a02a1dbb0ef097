"""
Dependency Injection container for Notaire.

Manages lifecycle and dependencies of all application components.
"""

from typing import Optional

from notaire.application.use_cases import (
    AuthenticateRequest,
    ClearSignatureHistory,
    GetSignatureHistory,
    VerifySignature,
)
from notaire.config.settings import Settings
from notaire.domain.repositories.i_signature_history_repository import (
    ISignatureHistoryRepository,
)
from notaire.domain.services.i_signature_verifier import ISignatureVerifier
from notaire.infrastructure.auth import JWTVerifier
from notaire.infrastructure.crypto import EthereumSignatureVerifier
from notaire.infrastructure.monitoring.logger import get_logger
from notaire.infrastructure.persistence.database import Database
from notaire.infrastructure.persistence.repositories import (
    InMemorySignatureHistoryRepository,
    SqlSignatureHistoryRepository,
)

logger = get_logger(__name__)


class Container:
    """
    Dependency Injection container.

    Creates and manages all application dependencies.
    Shared resources are created lazily and kept for the container
    lifetime.
    """

    def __init__(self, settings: Settings):
        """
        Initialize container with settings.

        Args:
            settings: Application settings
        """
        self.settings = settings

        self._signature_verifier: Optional[ISignatureVerifier] = None
        self._jwt_verifier: Optional[JWTVerifier] = None
        self._database: Optional[Database] = None
        self._history_repository: Optional[ISignatureHistoryRepository] = None

    @property
    def signature_verifier(self) -> ISignatureVerifier:
        """Get signature verifier singleton."""
        if self._signature_verifier is None:
            self._signature_verifier = EthereumSignatureVerifier()
        return self._signature_verifier

    @property
    def jwt_verifier(self) -> Optional[JWTVerifier]:
        """
        Get JWTVerifier singleton.

        Returns:
            JWTVerifier instance if auth enabled, None otherwise

        Raises:
            ValueError: If auth is enabled without a key source
        """
        if not self.settings.REQUIRE_AUTH:
            return None

        if self._jwt_verifier is None:
            if not self.settings.JWKS_URL and not self.settings.JWT_SECRET_KEY:
                raise ValueError(
                    "Authentication enabled but neither JWKS_URL nor "
                    "JWT_SECRET_KEY is configured"
                )

            self._jwt_verifier = JWTVerifier(
                jwks_url=self.settings.JWKS_URL,
                secret=self.settings.JWT_SECRET_KEY,
                algorithms=self.settings.jwt_algorithms
                if self.settings.JWKS_URL
                else None,
                audience=self.settings.JWT_AUDIENCE,
                cache_max_entries=self.settings.JWKS_CACHE_MAX_ENTRIES,
                cache_max_age=self.settings.JWKS_CACHE_MAX_AGE,
            )

        return self._jwt_verifier

    @property
    def database(self) -> Optional[Database]:
        """
        Get Database singleton.

        Returns:
            Database if the database history backend is selected,
            None otherwise
        """
        if self.settings.HISTORY_BACKEND != "database":
            return None

        if self._database is None:
            if not self.settings.DATABASE_URL:
                raise ValueError(
                    "HISTORY_BACKEND is 'database' but DATABASE_URL is not set"
                )
            self._database = Database(
                database_url=self.settings.DATABASE_URL,
                echo=self.settings.DATABASE_ECHO,
            )
        return self._database

    @property
    def history_repository(self) -> ISignatureHistoryRepository:
        """Get signature history repository for the configured backend."""
        if self._history_repository is None:
            if self.settings.HISTORY_BACKEND == "database":
                self._history_repository = SqlSignatureHistoryRepository(
                    self.database,
                    max_entries_per_user=self.settings.HISTORY_LIMIT,
                )
            else:
                self._history_repository = InMemorySignatureHistoryRepository(
                    max_entries_per_user=self.settings.HISTORY_LIMIT,
                )
        return self._history_repository

    def get_verify_signature_use_case(self) -> VerifySignature:
        """Get VerifySignature use case."""
        return VerifySignature(
            signature_verifier=self.signature_verifier,
            history_repository=self.history_repository,
            max_message_length=self.settings.MESSAGE_MAX_LENGTH,
            strict_signature_format=self.settings.STRICT_SIGNATURE_FORMAT,
        )

    def get_signature_history_use_case(self) -> GetSignatureHistory:
        """Get GetSignatureHistory use case."""
        return GetSignatureHistory(self.history_repository)

    def get_clear_signature_history_use_case(self) -> ClearSignatureHistory:
        """Get ClearSignatureHistory use case."""
        return ClearSignatureHistory(self.history_repository)

    def get_authenticate_use_case(self) -> Optional[AuthenticateRequest]:
        """
        Get AuthenticateRequest use case.

        Returns:
            Use case instance if auth enabled, None otherwise
        """
        if not self.settings.REQUIRE_AUTH:
            return None

        return AuthenticateRequest(self.jwt_verifier)

    async def initialize(self) -> None:
        """Connect external resources (database backend only)."""
        database = self.database
        if database is not None:
            await database.connect()
            await database.create_tables()
            logger.info("Signature history database ready")

    async def shutdown(self) -> None:
        """Release external resources."""
        if self._database is not None:
            await self._database.disconnect()
