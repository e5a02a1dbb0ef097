"""
RecoverableSignature value object - Immutable secp256k1 (r, s, v) signature.
"""

import re
from dataclasses import dataclass

SIGNATURE_LENGTH = 65

# Order of the secp256k1 group
SECP256K1_N = int(
    "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141", 16
)

VALID_RECOVERY_IDS = (0, 1, 27, 28)

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True)
class RecoverableSignature:
    """
    Value object representing a decoded recoverable ECDSA signature.

    Business rules:
    - Exactly 65 bytes laid out as r (32) | s (32) | v (1)
    - r and s within [1, n - 1] of secp256k1
    - v is a recovery id: 0/1 or the legacy 27/28
    """

    r: int
    s: int
    v: int

    def __post_init__(self):
        """Validate signature components on creation."""
        if not 1 <= self.r < SECP256K1_N:
            raise ValueError("Signature r value out of range")

        if not 1 <= self.s < SECP256K1_N:
            raise ValueError("Signature s value out of range")

        if self.v not in VALID_RECOVERY_IDS:
            raise ValueError(f"Invalid recovery id: {self.v}")

    @classmethod
    def from_hex(cls, signature: str) -> "RecoverableSignature":
        """
        Decode a 0x-prefixed hex signature.

        Args:
            signature: Hex string, 0x + 130 hex characters

        Returns:
            RecoverableSignature instance

        Raises:
            ValueError: If the string is not 0x-prefixed hex of 65 bytes
                or a component is out of range
        """
        if not isinstance(signature, str) or not signature.startswith("0x"):
            raise ValueError("Signature must be a 0x-prefixed hex string")

        body = signature[2:]
        if len(body) % 2 or not _HEX_RE.fullmatch(body):
            raise ValueError("Signature is not valid hex")

        raw = bytes.fromhex(body)

        return cls.from_bytes(raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "RecoverableSignature":
        """
        Decode raw r | s | v signature bytes.

        Raises:
            ValueError: If length is not 65 bytes or a component is invalid
        """
        if len(raw) != SIGNATURE_LENGTH:
            raise ValueError(
                f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(raw)}"
            )

        return cls(
            r=int.from_bytes(raw[0:32], "big"),
            s=int.from_bytes(raw[32:64], "big"),
            v=raw[64],
        )

    def to_bytes(self) -> bytes:
        """Encode back to the 65-byte r | s | v layout."""
        return (
            self.r.to_bytes(32, "big")
            + self.s.to_bytes(32, "big")
            + bytes([self.v])
        )

    def to_hex(self) -> str:
        """Encode as 0x-prefixed hex."""
        return "0x" + self.to_bytes().hex()
