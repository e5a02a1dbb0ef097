"""
FastAPI dependencies for Notaire API.

Provides dependency injection for routes.
"""

from typing import Optional

from fastapi import Depends, Header

from notaire.di import Container
from notaire.domain.auth import TokenPayload

# Global container (initialized in main.create_app)
_container: Optional[Container] = None


def get_container() -> Container:
    """
    Get DI container instance.

    Returns:
        Container instance

    Raises:
        RuntimeError: If container not initialized
    """
    if _container is None:
        raise RuntimeError("Container not initialized")
    return _container


def set_container(container: Optional[Container]) -> None:
    """
    Set DI container (called from create_app).

    Args:
        container: Container instance to set globally
    """
    global _container
    _container = container


async def get_current_user(
    authorization: Optional[str] = Header(None),
    container: Container = Depends(get_container),
) -> Optional[TokenPayload]:
    """
    Authenticate the caller from its bearer token.

    Returns:
        TokenPayload if authenticated, None if auth not required

    Raises:
        AuthenticationError: On missing, expired or invalid token
    """
    auth_use_case = container.get_authenticate_use_case()
    if auth_use_case is None:
        return None

    return await auth_use_case.execute(authorization)


async def get_current_identity(
    user: Optional[TokenPayload] = Depends(get_current_user),
) -> Optional[str]:
    """History identity of the caller (email, else subject)."""
    if user is None:
        return None
    return user.identity
