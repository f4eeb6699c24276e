"""
Shaping of built instructions and crypto results into JSON reply envelopes.
"""

from enum import Enum
from typing import Any

from solders.instruction import AccountMeta, Instruction

from core.codec import b58_encode, b64_encode
from core.errors import ErrorKind, HelperError


class AccountStyle(Enum):
    """Wire shape of the accounts array.

    The three shapes are kept per endpoint for client compatibility.
    """
    FULL = "full"  # {pubkey, is_signer, is_writable}
    PUBKEY_ONLY = "pubkey_only"  # bare base58 strings
    SIGNER_ONLY = "signer_only"  # {pubkey, isSigner}


ADDRESS_LABELS: dict[str, str] = {
    "mint": "mint address",
    "mintAuthority": "mint authority address",
    "destination": "destination address",
    "authority": "authority address",
    "from": "sender address",
    "to": "recipient address",
    "owner": "owner address",
    "pubkey": "public key",
}

FIXED_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MISSING_FIELD: "Missing required fields",
    ErrorKind.INVALID_BODY: "Invalid JSON body",
    ErrorKind.INVALID_SECRET: "Invalid secret key",
    ErrorKind.INVALID_SIGNATURE_ENCODING: "Invalid signature encoding",
    ErrorKind.INVALID_SIGNATURE_FORMAT: "Invalid signature format",
}


def render_error(error: HelperError) -> str:
    """Render the human readable message for a core error."""
    if error.kind in FIXED_MESSAGES:
        return FIXED_MESSAGES[error.kind]
    if error.kind == ErrorKind.INVALID_ADDRESS:
        label = ADDRESS_LABELS.get(error.field or "", f"{error.field} address")
        return f"Invalid {label}"
    if error.kind == ErrorKind.BUILD_FAILED:
        return f"Failed to build {error.detail} instruction: invalid {error.field}"
    return f"Invalid {error.field}"


def shape_account(meta: AccountMeta, style: AccountStyle) -> Any:
    pubkey = b58_encode(bytes(meta.pubkey))
    if style == AccountStyle.PUBKEY_ONLY:
        return pubkey
    if style == AccountStyle.SIGNER_ONLY:
        return {"pubkey": pubkey, "isSigner": meta.is_signer}
    return {
        "pubkey": pubkey,
        "is_signer": meta.is_signer,
        "is_writable": meta.is_writable,
    }


def shape_instruction(
    instruction: Instruction, style: AccountStyle = AccountStyle.FULL
) -> dict[str, Any]:
    """Serialize an instruction into the reply envelope.

    Args:
        instruction: Built instruction
        style: Shape of each element in the accounts array

    Returns:
        Dictionary with program_id (base58), accounts and
        instruction_data (base64)
    """
    return {
        "program_id": b58_encode(bytes(instruction.program_id)),
        "accounts": [shape_account(meta, style) for meta in instruction.accounts],
        "instruction_data": b64_encode(bytes(instruction.data)),
    }
