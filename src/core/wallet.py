"""
Ed25519 keypair generation, message signing and verification.
"""

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from core.codec import b58_encode, parse_secret


class Wallet:
    """Wraps a Solana keypair for signing operations."""

    def __init__(self, keypair: Keypair):
        """Initialize wallet from an already parsed keypair.

        Args:
            keypair: Ed25519 keypair
        """
        self._keypair = keypair

    @classmethod
    def generate(cls) -> "Wallet":
        """Create a wallet from a freshly sampled random seed."""
        return cls(generate_keypair())

    @classmethod
    def from_secret(cls, secret: str) -> "Wallet":
        """Load a wallet from a base58 encoded 64-byte secret key.

        Args:
            secret: Base58 encoded secret key

        Returns:
            Wallet for the keypair
        """
        return cls(parse_secret(secret))

    @property
    def pubkey(self) -> Pubkey:
        """Get the public key of the wallet."""
        return self._keypair.pubkey()

    @property
    def secret_bytes(self) -> bytes:
        """Get the 64-byte secret key (seed followed by public key)."""
        return bytes(self._keypair)

    def export_secret(self) -> str:
        """Get the secret key as base58."""
        return b58_encode(self.secret_bytes)

    def sign_message(self, message: bytes) -> bytes:
        """Produce a detached signature over the raw message bytes."""
        return sign(self._keypair, message)


def generate_keypair() -> Keypair:
    """Generate a new keypair from the operating system's CSPRNG."""
    return Keypair()


def sign(keypair: Keypair, message: bytes) -> bytes:
    """Sign message bytes with pure Ed25519.

    Args:
        keypair: Signing keypair
        message: Raw message bytes

    Returns:
        64-byte signature
    """
    return bytes(keypair.sign_message(message))


def verify(pubkey: Pubkey, message: bytes, signature: bytes) -> bool:
    """Verify a detached Ed25519 signature.

    A cryptographically invalid signature yields False rather than raising.

    Args:
        pubkey: Signer's public key
        message: Raw message bytes
        signature: 64-byte signature

    Returns:
        True if the signature is valid for this key and message
    """
    return Signature.from_bytes(signature).verify(pubkey, message)
