"""
Client toolkit: local signer, API client and local history.
"""

from notaire.client.api_client import (
    ApiError,
    NotaireClient,
    NotaireClientError,
    TransportError,
)
from notaire.client.history_store import (
    HISTORY_KEY,
    MAX_HISTORY_ENTRIES,
    LocalHistoryStore,
)
from notaire.client.signer import MessageSigner, SignedMessage

__all__ = [
    "ApiError",
    "HISTORY_KEY",
    "LocalHistoryStore",
    "MAX_HISTORY_ENTRIES",
    "MessageSigner",
    "NotaireClient",
    "NotaireClientError",
    "SignedMessage",
    "TransportError",
]
