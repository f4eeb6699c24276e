"""
Dispatch of typed requests to the pure core operations.

dispatch() is a total function from request variant to reply: every
HelperError is converted into a 400 Failure, anything else propagates.
"""

from collections.abc import Callable
from typing import Any

from api.requests import require_int, require_string
from api.responses import AccountStyle, render_error, shape_instruction
from core.address_provider import derive_ata
from core.codec import b58_encode, b64_encode, parse_pubkey, parse_signature
from core.errors import HelperError
from core.instruction_builder import InstructionBuilder
from core.wallet import Wallet, verify
from interfaces.core import (
    CreateTokenRequest,
    Failure,
    KeypairRequest,
    MintTokenRequest,
    OperationRequest,
    Reply,
    SendSolRequest,
    SendTokenRequest,
    SignMessageRequest,
    Success,
    VerifyMessageRequest,
)
from utils.logger import get_logger

logger = get_logger(__name__)

U8_MAX = 2**8 - 1
U64_MAX = 2**64 - 1

_builder = InstructionBuilder()


def handle_keypair(request: KeypairRequest) -> dict[str, Any]:
    wallet = Wallet.generate()
    return {
        "pubkey": b58_encode(bytes(wallet.pubkey)),
        "secret": wallet.export_secret(),
    }


def handle_sign_message(request: SignMessageRequest) -> dict[str, Any]:
    message = require_string(request.message, "message")
    wallet = Wallet.from_secret(request.secret)
    signature = wallet.sign_message(message.encode("utf-8"))
    return {
        "signature": b64_encode(signature),
        "public_key": b58_encode(bytes(wallet.pubkey)),
        "message": message,
    }


def handle_verify_message(request: VerifyMessageRequest) -> dict[str, Any]:
    message = require_string(request.message, "message")
    signature = parse_signature(request.signature, "signature")
    pubkey = parse_pubkey(request.pubkey, "pubkey")
    return {
        "valid": verify(pubkey, message.encode("utf-8"), signature),
        "message": message,
        "pubkey": b58_encode(bytes(pubkey)),
    }


def handle_create_token(request: CreateTokenRequest) -> dict[str, Any]:
    mint_authority = parse_pubkey(request.mint_authority, "mintAuthority")
    mint = parse_pubkey(request.mint, "mint")
    decimals = require_int(request.decimals, "decimals", 0, U8_MAX)

    instruction = _builder.build_initialize_mint(mint, mint_authority, decimals)
    return shape_instruction(instruction, AccountStyle.FULL)


def handle_mint_token(request: MintTokenRequest) -> dict[str, Any]:
    mint = parse_pubkey(request.mint, "mint")
    destination = parse_pubkey(request.destination, "destination")
    authority = parse_pubkey(request.authority, "authority")
    amount = require_int(request.amount, "amount", 0, U64_MAX)

    # The destination is used as the token account as given, not its ATA
    instruction = _builder.build_mint_to(mint, destination, authority, amount)
    return shape_instruction(instruction, AccountStyle.FULL)


def handle_send_sol(request: SendSolRequest) -> dict[str, Any]:
    sender = parse_pubkey(request.sender, "from")
    recipient = parse_pubkey(request.recipient, "to")
    lamports = require_int(request.lamports, "lamports", 0, U64_MAX)

    instruction = _builder.build_system_transfer(sender, recipient, lamports)
    return shape_instruction(instruction, AccountStyle.PUBKEY_ONLY)


def handle_send_token(request: SendTokenRequest) -> dict[str, Any]:
    destination = parse_pubkey(request.destination, "destination")
    mint = parse_pubkey(request.mint, "mint")
    owner = parse_pubkey(request.owner, "owner")
    amount = require_int(request.amount, "amount", 0, U64_MAX)

    source_ata = derive_ata(owner, mint)
    destination_ata = derive_ata(destination, mint)

    instruction = _builder.build_spl_transfer(source_ata, destination_ata, owner, amount)
    return shape_instruction(instruction, AccountStyle.SIGNER_ONLY)


HANDLERS: dict[type, Callable[[Any], dict[str, Any]]] = {
    KeypairRequest: handle_keypair,
    SignMessageRequest: handle_sign_message,
    VerifyMessageRequest: handle_verify_message,
    CreateTokenRequest: handle_create_token,
    MintTokenRequest: handle_mint_token,
    SendSolRequest: handle_send_sol,
    SendTokenRequest: handle_send_token,
}


def dispatch(request: OperationRequest) -> Reply:
    """Run the operation for a decoded request.

    Args:
        request: Typed request variant

    Returns:
        Success with the operation's data, or a 400 Failure
    """
    handler = HANDLERS[type(request)]
    try:
        return Success(handler(request))
    except HelperError as e:
        return failure_from_error(request.operation.value, e)


def failure_from_error(operation: str, error: HelperError) -> Failure:
    message = render_error(error)
    logger.warning(f"{operation} rejected: {message}")
    return Failure(message)
