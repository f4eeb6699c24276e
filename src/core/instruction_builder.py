"""
SPL-Token and System program instruction builders.

Each builder returns a solders Instruction whose program id, account order,
account flags and binary data layout follow the on-chain programs exactly.
"""

import struct
from enum import IntEnum

from solders import system_program
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from spl.token.instructions import mint_to, transfer
from spl.token.models import MintToParams, TransferParams

from core.errors import ErrorKind, HelperError
from core.pubkeys import SystemAddresses
from utils.logger import get_logger

logger = get_logger(__name__)


class TokenInstruction(IntEnum):
    """Token program instruction tags (first byte of instruction data)."""
    INITIALIZE_MINT = 0


# COption<Pubkey> tag for "no freeze authority"
NO_FREEZE_AUTHORITY = 0

U64_MAX = 2**64 - 1


class InstructionBuilder:
    """Builds token and system program instructions."""

    def __init__(self, token_program: Pubkey = SystemAddresses.TOKEN_PROGRAM):
        """Initialize the builder.

        Args:
            token_program: Program id that owns mints and token accounts
        """
        self.token_program = token_program

    def build_initialize_mint(
        self, mint: Pubkey, mint_authority: Pubkey, decimals: int
    ) -> Instruction:
        """Build an InitializeMint instruction without a freeze authority.

        Args:
            mint: Mint account to initialize
            mint_authority: Authority allowed to mint new tokens
            decimals: Number of base-10 digits to the right of the decimal point

        Returns:
            InitializeMint instruction
        """
        # Data ends at the freeze authority option tag: 35 bytes, no padding
        try:
            data = (
                struct.pack("<BB", TokenInstruction.INITIALIZE_MINT, decimals)
                + bytes(mint_authority)
                + struct.pack("<B", NO_FREEZE_AUTHORITY)
            )
        except struct.error as e:
            raise HelperError(ErrorKind.BUILD_FAILED, "decimals", "initialize_mint") from e

        accounts = [
            AccountMeta(pubkey=mint, is_signer=False, is_writable=True),
            AccountMeta(pubkey=SystemAddresses.RENT, is_signer=False, is_writable=False),
        ]

        return Instruction(
            program_id=self.token_program,
            data=data,
            accounts=accounts,
        )

    def build_system_transfer(
        self, sender: Pubkey, recipient: Pubkey, lamports: int
    ) -> Instruction:
        """Build a System program transfer of native lamports.

        Args:
            sender: Funding account (must sign)
            recipient: Receiving account
            lamports: Amount to move

        Returns:
            System transfer instruction
        """
        try:
            return system_program.transfer(
                system_program.TransferParams(
                    from_pubkey=sender, to_pubkey=recipient, lamports=lamports
                )
            )
        except (OverflowError, TypeError, ValueError) as e:
            raise HelperError(ErrorKind.BUILD_FAILED, "lamports", "transfer") from e

    def build_spl_transfer(
        self, source: Pubkey, destination: Pubkey, owner: Pubkey, amount: int
    ) -> Instruction:
        """Build a token Transfer between two token accounts.

        Args:
            source: Source token account
            destination: Destination token account
            owner: Owner of the source account (must sign)
            amount: Raw token amount

        Returns:
            Transfer instruction
        """
        self._check_amount(amount, "spl_transfer")
        return transfer(
            TransferParams(
                program_id=self.token_program,
                source=source,
                dest=destination,
                owner=owner,
                amount=amount,
            )
        )

    def build_mint_to(
        self, mint: Pubkey, destination: Pubkey, mint_authority: Pubkey, amount: int
    ) -> Instruction:
        """Build a MintTo instruction.

        Args:
            mint: Mint to issue from
            destination: Token account receiving the new tokens
            mint_authority: Mint authority (must sign)
            amount: Raw token amount

        Returns:
            MintTo instruction
        """
        self._check_amount(amount, "mint_to")
        return mint_to(
            MintToParams(
                program_id=self.token_program,
                mint=mint,
                dest=destination,
                mint_authority=mint_authority,
                amount=amount,
            )
        )

    @staticmethod
    def _check_amount(amount: int, builder: str) -> None:
        """Reject amounts that do not fit the u64 amount field."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise HelperError(ErrorKind.BUILD_FAILED, "amount", builder)
        if not 0 <= amount <= U64_MAX:
            logger.debug(f"Rejected amount for {builder}: {amount!r}")
            raise HelperError(ErrorKind.BUILD_FAILED, "amount", builder)
