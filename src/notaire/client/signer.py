"""
Local EIP-191 message signer.

Stands in for the browser wallet: signs personal_sign messages with a
private key held by the caller.
"""

from dataclasses import dataclass

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_keys.exceptions import ValidationError as KeysValidationError


@dataclass(frozen=True)
class SignedMessage:
    """Message signed by a MessageSigner."""

    message: str
    signature: str
    address: str


class MessageSigner:
    """
    Sign text messages with an Ethereum private key.

    Attributes:
        address: EIP-55 checksum address of the key
    """

    def __init__(self, private_key: str | bytes):
        """
        Args:
            private_key: 32-byte key as bytes or hex string

        Raises:
            ValueError: If the key is malformed
        """
        try:
            self._account = Account.from_key(private_key)
        except KeysValidationError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def generate(cls) -> "MessageSigner":
        """Create a signer for a fresh random key."""
        account = Account.create()
        return cls(account.key)

    @property
    def address(self) -> str:
        return self._account.address

    @property
    def private_key(self) -> str:
        """Hex private key (0x prefixed)."""
        return "0x" + bytes(self._account.key).hex()

    def sign(self, message: str) -> SignedMessage:
        """
        Sign a message with the Ethereum signed-message prefix.

        Args:
            message: Text to sign

        Returns:
            SignedMessage with a 0x + 130 hex character signature
        """
        signed = self._account.sign_message(encode_defunct(text=message))
        return SignedMessage(
            message=message,
            signature="0x" + bytes(signed.signature).hex(),
            address=self.address,
        )
