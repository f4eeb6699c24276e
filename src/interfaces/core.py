"""
Typed request variants and replies exchanged between the HTTP layer and the core.

Every request field is optional at this stage: decoding only records what the
client sent, and the operation validates the values afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class Operation(Enum):
    """Supported operations."""
    KEYPAIR = "keypair"
    SIGN_MESSAGE = "sign_message"
    VERIFY_MESSAGE = "verify_message"
    CREATE_TOKEN = "create_token"
    MINT_TOKEN = "mint_token"
    SEND_SOL = "send_sol"
    SEND_TOKEN = "send_token"


@dataclass(frozen=True)
class KeypairRequest:
    operation: ClassVar[Operation] = Operation.KEYPAIR


@dataclass(frozen=True)
class SignMessageRequest:
    operation: ClassVar[Operation] = Operation.SIGN_MESSAGE

    message: Any = None
    secret: Any = None


@dataclass(frozen=True)
class VerifyMessageRequest:
    operation: ClassVar[Operation] = Operation.VERIFY_MESSAGE

    message: Any = None
    signature: Any = None
    pubkey: Any = None


@dataclass(frozen=True)
class CreateTokenRequest:
    operation: ClassVar[Operation] = Operation.CREATE_TOKEN

    mint_authority: Any = None
    mint: Any = None
    decimals: Any = None


@dataclass(frozen=True)
class MintTokenRequest:
    operation: ClassVar[Operation] = Operation.MINT_TOKEN

    mint: Any = None
    destination: Any = None
    authority: Any = None
    amount: Any = None


@dataclass(frozen=True)
class SendSolRequest:
    operation: ClassVar[Operation] = Operation.SEND_SOL

    sender: Any = None  # wire name "from"
    recipient: Any = None  # wire name "to"
    lamports: Any = None


@dataclass(frozen=True)
class SendTokenRequest:
    operation: ClassVar[Operation] = Operation.SEND_TOKEN

    destination: Any = None
    mint: Any = None
    owner: Any = None
    amount: Any = None


OperationRequest = (
    KeypairRequest
    | SignMessageRequest
    | VerifyMessageRequest
    | CreateTokenRequest
    | MintTokenRequest
    | SendSolRequest
    | SendTokenRequest
)


@dataclass
class Success:
    """Successful reply carrying operation-specific data."""
    data: dict[str, Any]
    status: int = 200

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "data": self.data}


@dataclass
class Failure:
    """Failed reply carrying a human readable error."""
    error: str
    status: int = 400

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "error": self.error}


Reply = Success | Failure
