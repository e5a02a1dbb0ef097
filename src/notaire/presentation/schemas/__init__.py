"""
Request/Response schemas for Notaire API.
"""

from notaire.presentation.schemas.health import HealthResponse, ProbeResponse
from notaire.presentation.schemas.signature import (
    ClearHistoryResponse,
    SignatureHistoryResponse,
    SignatureRecordResponse,
    VerifySignatureRequest,
    VerifySignatureResponse,
    utc_timestamp,
)

__all__ = [
    "VerifySignatureRequest",
    "VerifySignatureResponse",
    "SignatureRecordResponse",
    "SignatureHistoryResponse",
    "ClearHistoryResponse",
    "HealthResponse",
    "ProbeResponse",
    "utc_timestamp",
]
