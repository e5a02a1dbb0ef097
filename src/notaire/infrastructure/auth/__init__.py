"""
Authentication infrastructure.
"""

from notaire.infrastructure.auth.jwt_verifier import JWTVerifier

__all__ = ["JWTVerifier"]
