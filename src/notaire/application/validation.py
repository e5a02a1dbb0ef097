"""
Request boundary validation.

Turns untrusted (message, signature) input into a VerificationRequest
or raises ValidationError. This is the only place request fields are
checked; the verifier itself only sees validated input.
"""

import re
from typing import Any

from notaire.domain.exceptions import ValidationError
from notaire.domain.value_objects.verification_result import VerificationRequest

DEFAULT_MESSAGE_MAX_LENGTH = 10_000

SIGNATURE_PATTERN = re.compile(r"^0x[a-fA-F0-9]{130}$")
SIGNATURE_FORMAT_ERROR = (
    "Signature format is invalid. Need 0x followed by 130 hex characters."
)


def validate_verification_request(
    message: Any,
    signature: Any,
    *,
    max_message_length: int = DEFAULT_MESSAGE_MAX_LENGTH,
    strict_signature_format: bool = False,
) -> VerificationRequest:
    """
    Validate a verification request.

    Args:
        message: Signed message text
        signature: Hex signature
        max_message_length: Longest accepted message (characters)
        strict_signature_format: Require 0x + 130 hex characters

    Returns:
        VerificationRequest

    Raises:
        ValidationError: If a field is missing or malformed
    """
    if message is None or not isinstance(message, str) or message == "":
        raise ValidationError("message", "Message cannot be empty")
    if not message.strip():
        raise ValidationError("message", "Message cannot be only whitespace")
    if len(message) > max_message_length:
        raise ValidationError("message", "Message too long")
    if not _is_valid_utf8(message):
        raise ValidationError("message", "Message must be valid UTF-8")

    if signature is None or not isinstance(signature, str) or signature == "":
        raise ValidationError("signature", "Signature is required")
    if not _is_valid_utf8(signature):
        raise ValidationError("signature", "Signature must be valid UTF-8")
    if strict_signature_format and not SIGNATURE_PATTERN.match(signature):
        raise ValidationError("signature", SIGNATURE_FORMAT_ERROR)

    return VerificationRequest(message=message, signature=signature)


def _is_valid_utf8(value: str) -> bool:
    # JSON "\ud800" escapes decode to lone surrogates
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
