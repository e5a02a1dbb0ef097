"""
Cryptographic infrastructure for Notaire.
"""

from notaire.infrastructure.crypto.ethereum_signature_verifier import (
    EthereumSignatureVerifier,
)

__all__ = ["EthereumSignatureVerifier"]
