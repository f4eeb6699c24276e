"""
Program-derived address derivation for associated token accounts.
"""

from solders.pubkey import Pubkey

from core.pubkeys import SystemAddresses


class AssociatedTokenAddressProvider:
    """Derives associated token account (ATA) addresses."""

    def __init__(
        self,
        token_program: Pubkey = SystemAddresses.TOKEN_PROGRAM,
        associated_token_program: Pubkey = SystemAddresses.ASSOCIATED_TOKEN_PROGRAM,
    ):
        self.token_program = token_program
        self.associated_token_program = associated_token_program

    def find_associated_token_address(
        self, owner: Pubkey, mint: Pubkey
    ) -> tuple[Pubkey, int]:
        """Derive the ATA and its bump seed.

        The seeds are [owner, token program, mint] under the associated token
        account program, with the bump found by descending search from 255.

        Args:
            owner: Wallet that owns the token account
            mint: Token mint address

        Returns:
            Tuple of (associated token address, bump seed)
        """
        return Pubkey.find_program_address(
            [bytes(owner), bytes(self.token_program), bytes(mint)],
            self.associated_token_program,
        )

    def derive_user_token_account(self, owner: Pubkey, mint: Pubkey) -> Pubkey:
        """Derive a user's associated token account address.

        Args:
            owner: Wallet that owns the token account
            mint: Token mint address

        Returns:
            Associated token account address
        """
        address, _ = self.find_associated_token_address(owner, mint)
        return address


_default_provider = AssociatedTokenAddressProvider()


def derive_ata(owner: Pubkey, mint: Pubkey) -> Pubkey:
    """Derive the SPL-Token associated token account for owner and mint."""
    return _default_provider.derive_user_token_account(owner, mint)
