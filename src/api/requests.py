"""
Decoding of JSON request bodies into typed operation requests.
"""

import json
from typing import Any

from core.errors import ErrorKind, HelperError
from interfaces.core import (
    CreateTokenRequest,
    KeypairRequest,
    MintTokenRequest,
    Operation,
    OperationRequest,
    SendSolRequest,
    SendTokenRequest,
    SignMessageRequest,
    VerifyMessageRequest,
)

# Wire field name -> request attribute, in validation order
REQUEST_FIELDS: dict[Operation, dict[str, str]] = {
    Operation.KEYPAIR: {},
    Operation.SIGN_MESSAGE: {"message": "message", "secret": "secret"},
    Operation.VERIFY_MESSAGE: {
        "message": "message",
        "signature": "signature",
        "pubkey": "pubkey",
    },
    Operation.CREATE_TOKEN: {
        "mintAuthority": "mint_authority",
        "mint": "mint",
        "decimals": "decimals",
    },
    Operation.MINT_TOKEN: {
        "mint": "mint",
        "destination": "destination",
        "authority": "authority",
        "amount": "amount",
    },
    Operation.SEND_SOL: {"from": "sender", "to": "recipient", "lamports": "lamports"},
    Operation.SEND_TOKEN: {
        "destination": "destination",
        "mint": "mint",
        "owner": "owner",
        "amount": "amount",
    },
}

REQUEST_TYPES: dict[Operation, type] = {
    Operation.KEYPAIR: KeypairRequest,
    Operation.SIGN_MESSAGE: SignMessageRequest,
    Operation.VERIFY_MESSAGE: VerifyMessageRequest,
    Operation.CREATE_TOKEN: CreateTokenRequest,
    Operation.MINT_TOKEN: MintTokenRequest,
    Operation.SEND_SOL: SendSolRequest,
    Operation.SEND_TOKEN: SendTokenRequest,
}


def parse_body(raw: bytes | str) -> dict[str, Any]:
    """Parse a request body into a JSON object; an empty body is {}."""
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise HelperError(ErrorKind.INVALID_BODY, detail=str(e)) from e
    if not isinstance(body, dict):
        raise HelperError(ErrorKind.INVALID_BODY, detail="body must be a JSON object")
    return body


def decode_request(operation: Operation, body: dict[str, Any]) -> OperationRequest:
    """Build the typed request for an operation.

    All required fields are checked together before any value is inspected;
    a field that is absent or null counts as missing.

    Args:
        operation: Target operation
        body: Decoded JSON object

    Returns:
        Request dataclass for the operation

    Raises:
        HelperError: MISSING_FIELD if any required field is absent
    """
    fields = REQUEST_FIELDS[operation]
    missing = [name for name in fields if body.get(name) is None]
    if missing:
        raise HelperError(ErrorKind.MISSING_FIELD, ", ".join(missing))

    values = {attr: body[name] for name, attr in fields.items()}
    return REQUEST_TYPES[operation](**values)


def require_string(value: Any, field: str) -> str:
    """Validate a JSON string that can be encoded as UTF-8.

    JSON escapes can produce lone surrogates, which have no UTF-8 encoding.
    """
    if not isinstance(value, str):
        raise HelperError(ErrorKind.INVALID_VALUE, field, "expected a string")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise HelperError(ErrorKind.INVALID_VALUE, field, "not valid UTF-8") from e
    return value


def require_int(value: Any, field: str, minimum: int, maximum: int) -> int:
    """Validate a JSON integer within [minimum, maximum].

    Booleans and floats are rejected even though Python treats them as numbers.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise HelperError(ErrorKind.INVALID_VALUE, field, "expected an integer")
    if not minimum <= value <= maximum:
        raise HelperError(
            ErrorKind.INVALID_VALUE, field, f"must be between {minimum} and {maximum}"
        )
    return value
