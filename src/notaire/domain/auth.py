"""
Authentication domain models for Notaire.

Defines the bearer token payload issued by the identity provider.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TokenPayload(BaseModel):
    """
    JWT token payload structure.

    Attributes:
        sub: Subject (identity provider user id)
        email: User email, preferred as history identity
        scopes: Granted scopes
        exp: Token expiration timestamp (Unix epoch)
        iat: Token issued at timestamp (Unix epoch)
    """

    model_config = ConfigDict(extra="allow")

    sub: Optional[str] = Field(default=None, description="Subject")
    email: Optional[str] = Field(default=None, description="User email")
    scopes: List[str] = Field(default_factory=list, description="Scopes")
    exp: int = Field(..., description="Expiration time (Unix timestamp)")
    iat: Optional[int] = Field(default=None, description="Issued at time")

    @field_validator("scopes", mode="before")
    @classmethod
    def split_scopes(cls, v):
        """Accept space separated scope strings."""
        if v is None:
            return []
        if isinstance(v, str):
            return v.split()
        return v

    @property
    def identity(self) -> Optional[str]:
        """User identity used to key the signature history."""
        return self.email or self.sub or None
