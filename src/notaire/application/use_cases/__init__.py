"""
Application use cases.
"""

from notaire.application.use_cases.authenticate_request import (
    AuthenticateRequest,
)
from notaire.application.use_cases.clear_signature_history import (
    ClearSignatureHistory,
)
from notaire.application.use_cases.get_signature_history import (
    GetSignatureHistory,
)
from notaire.application.use_cases.verify_signature import VerifySignature

__all__ = [
    "AuthenticateRequest",
    "ClearSignatureHistory",
    "GetSignatureHistory",
    "VerifySignature",
]
