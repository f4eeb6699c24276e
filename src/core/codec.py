"""
Base58/base64 envelopes and parsing of client-supplied keys and signatures.
"""

import base64
import binascii

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from core.errors import ErrorKind, HelperError, InvalidEncodingError
from core.pubkeys import PUBKEY_LENGTH, SECRET_KEY_LENGTH, SIGNATURE_LENGTH


def b58_encode(data: bytes) -> str:
    return base58.b58encode(data).decode("ascii")


def b58_decode(value: str) -> bytes:
    """Decode a base58 string.

    Raises:
        InvalidEncodingError: If the value is not a base58 string
    """
    if not isinstance(value, str):
        raise InvalidEncodingError("base58 value must be a string")
    try:
        return base58.b58decode(value)
    except ValueError as e:
        raise InvalidEncodingError(str(e)) from e


def b64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64_decode(value: str) -> bytes:
    """Decode a standard-alphabet base64 string; padding is required.

    Raises:
        InvalidEncodingError: If the value is not strict base64
    """
    if not isinstance(value, str):
        raise InvalidEncodingError("base64 value must be a string")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(str(e)) from e


def parse_pubkey(value: str, field: str = "pubkey") -> Pubkey:
    """Parse a base58 public key.

    Args:
        value: Base58 encoded 32-byte key
        field: Request field name, used in the error

    Returns:
        Parsed public key

    Raises:
        HelperError: INVALID_ADDRESS if decoding fails or the length is not 32
    """
    try:
        raw = b58_decode(value)
    except InvalidEncodingError as e:
        raise HelperError(ErrorKind.INVALID_ADDRESS, field, str(e)) from e

    if len(raw) != PUBKEY_LENGTH:
        raise HelperError(
            ErrorKind.INVALID_ADDRESS, field, f"expected 32 bytes, got {len(raw)}"
        )
    return Pubkey.from_bytes(raw)


def parse_secret(value: str, field: str = "secret") -> Keypair:
    """Parse a base58 64-byte secret key (32-byte seed + 32-byte public key).

    The trailing half must equal the public key derived from the seed.

    Raises:
        HelperError: INVALID_SECRET on decode, length or consistency failure
    """
    try:
        raw = b58_decode(value)
    except InvalidEncodingError as e:
        raise HelperError(ErrorKind.INVALID_SECRET, field, str(e)) from e

    if len(raw) != SECRET_KEY_LENGTH:
        raise HelperError(
            ErrorKind.INVALID_SECRET, field, f"expected 64 bytes, got {len(raw)}"
        )

    keypair = Keypair.from_seed(raw[:32])
    if bytes(keypair.pubkey()) != raw[32:]:
        raise HelperError(
            ErrorKind.INVALID_SECRET, field, "public key does not match seed"
        )
    return keypair


def parse_signature(value: str, field: str = "signature") -> bytes:
    """Parse a base64 detached signature into its 64 raw bytes.

    Raises:
        HelperError: INVALID_SIGNATURE_ENCODING if base64 decoding fails,
            INVALID_SIGNATURE_FORMAT if the decoded length is not 64
    """
    try:
        raw = b64_decode(value)
    except InvalidEncodingError as e:
        raise HelperError(ErrorKind.INVALID_SIGNATURE_ENCODING, field, str(e)) from e

    if len(raw) != SIGNATURE_LENGTH:
        raise HelperError(
            ErrorKind.INVALID_SIGNATURE_FORMAT,
            field,
            f"expected 64 bytes, got {len(raw)}",
        )
    return raw
