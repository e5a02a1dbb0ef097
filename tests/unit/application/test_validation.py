"""
Unit tests for request boundary validation.
"""

import pytest

from notaire.application.validation import (
    SIGNATURE_FORMAT_ERROR,
    validate_verification_request,
)
from notaire.domain.exceptions import ValidationError
from tests.helpers.sign_message import sign_message


def test_valid_request():
    signature = sign_message("hello")

    request = validate_verification_request("hello", signature)

    assert request.message == "hello"
    assert request.signature == signature


@pytest.mark.parametrize(
    "message,reason",
    [
        (None, "Message cannot be empty"),
        ("", "Message cannot be empty"),
        (42, "Message cannot be empty"),
        ("   \n\t", "Message cannot be only whitespace"),
        ("hi \ud800", "Message must be valid UTF-8"),
    ],
)
def test_rejects_bad_message(message, reason):
    with pytest.raises(ValidationError) as exc_info:
        validate_verification_request(message, "0xabc")

    assert exc_info.value.field == "message"
    assert exc_info.value.reason == reason


def test_rejects_long_message():
    with pytest.raises(ValidationError, match="Message too long"):
        validate_verification_request("x" * 11, "0xabc", max_message_length=10)


def test_accepts_message_at_limit():
    request = validate_verification_request("x" * 10, "0xabc", max_message_length=10)
    assert len(request.message) == 10


@pytest.mark.parametrize("signature", [None, "", 123])
def test_rejects_missing_signature(signature):
    with pytest.raises(ValidationError) as exc_info:
        validate_verification_request("test", signature)

    assert exc_info.value.field == "signature"
    assert exc_info.value.reason == "Signature is required"


def test_lenient_mode_passes_malformed_signature_through():
    request = validate_verification_request("test", "0xinvalidsignature")
    assert request.signature == "0xinvalidsignature"


def test_strict_mode_rejects_malformed_signature():
    with pytest.raises(ValidationError) as exc_info:
        validate_verification_request(
            "test", "0xinvalidsignature", strict_signature_format=True
        )

    assert exc_info.value.reason == SIGNATURE_FORMAT_ERROR


def test_strict_mode_accepts_canonical_signature():
    signature = sign_message("test")

    request = validate_verification_request(
        "test", signature, strict_signature_format=True
    )

    assert request.signature == signature
