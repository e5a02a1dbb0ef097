"""
Unit tests for MessageSigner.
"""

import pytest

from notaire.client import MessageSigner
from notaire.infrastructure.crypto import EthereumSignatureVerifier
from tests.helpers.sign_message import ALICE_ADDRESS, ALICE_PRIVATE_KEY, sign_message


def test_address_from_known_key():
    assert MessageSigner(ALICE_PRIVATE_KEY).address == ALICE_ADDRESS


def test_signature_matches_reference_signing():
    signed = MessageSigner(ALICE_PRIVATE_KEY).sign("Hello, Web3 World!")

    assert signed.signature == sign_message("Hello, Web3 World!")
    assert signed.signature.startswith("0x")
    assert len(signed.signature) == 132
    assert signed.address == ALICE_ADDRESS


def test_generated_key_round_trips_through_verifier():
    signer = MessageSigner.generate()
    signed = signer.sign("Hello, Web3 World!")

    result = EthereumSignatureVerifier().verify(signed.message, signed.signature)

    assert result.is_valid is True
    assert result.signer == signer.address


def test_private_key_export_restores_same_address():
    signer = MessageSigner.generate()

    assert MessageSigner(signer.private_key).address == signer.address


def test_generated_keys_differ():
    assert MessageSigner.generate().address != MessageSigner.generate().address


@pytest.mark.parametrize("key", ["0x1234", "not-a-key"])
def test_rejects_malformed_key(key):
    with pytest.raises(ValueError):
        MessageSigner(key)
