"""Tests for request decoding, dispatch and error rendering."""

import pytest

from api.dispatcher import dispatch
from api.requests import decode_request, parse_body, require_string
from core.codec import b58_encode, b64_decode
from core.errors import ErrorKind, HelperError
from interfaces.core import (
    CreateTokenRequest,
    Failure,
    KeypairRequest,
    Operation,
    SendSolRequest,
    SignMessageRequest,
    Success,
)


def test_parse_body() -> None:
    assert parse_body("") == {}
    assert parse_body("  ") == {}
    assert parse_body('{"a": 1}') == {"a": 1}


@pytest.mark.parametrize("text", ["not json", "[1, 2]", '"string"', "{"])
def test_parse_body_rejects(text: str) -> None:
    with pytest.raises(HelperError) as exc_info:
        parse_body(text)
    assert exc_info.value.kind == ErrorKind.INVALID_BODY


def test_decode_maps_wire_names() -> None:
    request = decode_request(
        Operation.SEND_SOL, {"from": "a", "to": "b", "lamports": 5, "extra": True}
    )
    assert request == SendSolRequest(sender="a", recipient="b", lamports=5)

    request = decode_request(
        Operation.CREATE_TOKEN, {"mint": "m", "mintAuthority": "a", "decimals": 0}
    )
    assert request == CreateTokenRequest(mint_authority="a", mint="m", decimals=0)


def test_decode_reports_missing_before_invalid() -> None:
    # "mint" is invalid but "decimals" is missing: missing wins
    with pytest.raises(HelperError) as exc_info:
        decode_request(Operation.CREATE_TOKEN, {"mint": "bad", "mintAuthority": None})
    assert exc_info.value.kind == ErrorKind.MISSING_FIELD


def test_keypair_needs_no_fields() -> None:
    assert decode_request(Operation.KEYPAIR, {}) == KeypairRequest()


def test_dispatch_keypair() -> None:
    reply = dispatch(KeypairRequest())
    assert isinstance(reply, Success)
    assert set(reply.data) == {"pubkey", "secret"}


def test_dispatch_renders_address_error(alice) -> None:
    reply = dispatch(
        CreateTokenRequest(
            mint_authority=str(alice.pubkey()), mint="not-base58", decimals=9
        )
    )
    assert reply == Failure("Invalid mint address")
    assert reply.to_dict() == {"success": False, "error": "Invalid mint address"}


@pytest.mark.parametrize(
    "lamports, error",
    [
        (-1, "Invalid lamports"),
        (2**64, "Invalid lamports"),
        (1.5, "Invalid lamports"),
        ("1000", "Invalid lamports"),
        (True, "Invalid lamports"),
    ],
)
def test_dispatch_rejects_bad_lamports(alice, bob, lamports, error) -> None:
    request = SendSolRequest(
        sender=str(alice.pubkey()), recipient=str(bob.pubkey()), lamports=lamports
    )
    assert dispatch(request) == Failure(error)


def test_dispatch_send_sol_order_of_errors(alice) -> None:
    request = SendSolRequest(sender="bad", recipient="bad", lamports=1)
    assert dispatch(request) == Failure("Invalid sender address")

    request = SendSolRequest(sender=str(alice.pubkey()), recipient="bad", lamports=1)
    assert dispatch(request) == Failure("Invalid recipient address")


def test_dispatch_send_sol(alice, bob) -> None:
    reply = dispatch(
        SendSolRequest(
            sender=str(alice.pubkey()), recipient=str(bob.pubkey()), lamports=7
        )
    )
    assert isinstance(reply, Success)
    assert reply.data["program_id"] == b58_encode(bytes(32))
    assert reply.data["accounts"] == [str(alice.pubkey()), str(bob.pubkey())]
    assert b64_decode(reply.data["instruction_data"])[4:] == (7).to_bytes(8, "little")


def test_parse_body_rejects_invalid_utf8() -> None:
    with pytest.raises(HelperError) as exc_info:
        parse_body(b"\x80abc")
    assert exc_info.value.kind == ErrorKind.INVALID_BODY


def test_parse_body_rejects_deep_nesting() -> None:
    with pytest.raises(HelperError) as exc_info:
        parse_body("[" * 100_000 + "]" * 100_000)
    assert exc_info.value.kind == ErrorKind.INVALID_BODY


def test_require_string_rejects_lone_surrogate() -> None:
    assert require_string("héllo", "message") == "héllo"
    with pytest.raises(HelperError) as exc_info:
        require_string("\ud800", "message")
    assert exc_info.value.kind == ErrorKind.INVALID_VALUE
    assert exc_info.value.field == "message"


def test_dispatch_sign_rejects_unencodable_message(alice) -> None:
    request = SignMessageRequest(message="\ud800", secret=b58_encode(bytes(alice)))
    assert dispatch(request) == Failure("Invalid message")
