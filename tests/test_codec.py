"""Tests for base58/base64 envelopes and key/signature parsing."""

import base58
import pytest

from core.codec import (
    b58_decode,
    b58_encode,
    b64_decode,
    b64_encode,
    parse_pubkey,
    parse_secret,
    parse_signature,
)
from core.errors import ErrorKind, HelperError, InvalidEncodingError
from core.pubkeys import SYSTEM_PROGRAM


@pytest.mark.parametrize(
    "data",
    [b"", b"\x00", b"\x00\x00\x01", b"hello world", bytes(range(256))],
)
def test_round_trips(data: bytes) -> None:
    assert b58_decode(b58_encode(data)) == data
    assert b64_decode(b64_encode(data)) == data


def test_b58_leading_zeros_become_ones() -> None:
    assert b58_encode(bytes(32)) == "1" * 32


def test_b58_decode_rejects_invalid_alphabet() -> None:
    # 0, O, I and l are not part of the base58 alphabet
    with pytest.raises(InvalidEncodingError):
        b58_decode("0OIl")


def test_b58_decode_rejects_non_string() -> None:
    with pytest.raises(InvalidEncodingError):
        b58_decode(123)


def test_b64_decode_requires_padding() -> None:
    assert b64_decode("aGk=") == b"hi"
    with pytest.raises(InvalidEncodingError):
        b64_decode("aGk")


def test_b64_decode_rejects_foreign_characters() -> None:
    with pytest.raises(InvalidEncodingError):
        b64_decode("a$k=")


def test_parse_pubkey(alice) -> None:
    encoded = str(alice.pubkey())
    assert parse_pubkey(encoded) == alice.pubkey()
    assert parse_pubkey("11111111111111111111111111111111") == SYSTEM_PROGRAM


@pytest.mark.parametrize("value", ["not-base58", "", "1111", 42, None])
def test_parse_pubkey_rejects(value) -> None:
    with pytest.raises(HelperError) as exc_info:
        parse_pubkey(value, "mint")
    assert exc_info.value.kind == ErrorKind.INVALID_ADDRESS
    assert exc_info.value.field == "mint"


def test_parse_secret(alice) -> None:
    keypair = parse_secret(b58_encode(bytes(alice)))
    assert keypair.pubkey() == alice.pubkey()
    assert bytes(keypair) == bytes(alice)


def test_parse_secret_rejects_wrong_length(alice) -> None:
    with pytest.raises(HelperError) as exc_info:
        parse_secret(b58_encode(bytes(alice)[:32]))
    assert exc_info.value.kind == ErrorKind.INVALID_SECRET


def test_parse_secret_rejects_mismatched_public_half(alice, bob) -> None:
    forged = bytes(alice)[:32] + bytes(bob.pubkey())
    with pytest.raises(HelperError) as exc_info:
        parse_secret(base58.b58encode(forged).decode())
    assert exc_info.value.kind == ErrorKind.INVALID_SECRET


def test_parse_secret_rejects_bad_encoding() -> None:
    with pytest.raises(HelperError) as exc_info:
        parse_secret("not-base58!")
    assert exc_info.value.kind == ErrorKind.INVALID_SECRET


def test_parse_signature() -> None:
    raw = bytes(range(64))
    assert parse_signature(b64_encode(raw)) == raw


def test_parse_signature_errors() -> None:
    with pytest.raises(HelperError) as exc_info:
        parse_signature("***")
    assert exc_info.value.kind == ErrorKind.INVALID_SIGNATURE_ENCODING

    with pytest.raises(HelperError) as exc_info:
        parse_signature(b64_encode(bytes(63)))
    assert exc_info.value.kind == ErrorKind.INVALID_SIGNATURE_FORMAT
