"""
List Wallet Claims use case.
"""

from brasier.domain.entities.burn_claim import BurnClaim
from brasier.domain.exceptions import InvalidInputError
from brasier.domain.services.i_claim_ledger import IClaimLedger
from brasier.domain.value_objects.wallet_address import WalletAddress

MAX_LIMIT = 200


class ListWalletClaims:
    """List the claims redeemed by a wallet, newest first."""

    def __init__(self, claim_ledger: IClaimLedger):
        self.claim_ledger = claim_ledger

    async def execute(self, wallet_address: str, limit: int = 50) -> list[BurnClaim]:
        """
        List claims for a wallet.

        Args:
            wallet_address: Wallet that redeemed the burns
            limit: Maximum number of claims (1..200)

        Raises:
            InvalidInputError: If the wallet or limit is invalid
            StorageUnavailableError: If storage cannot be queried
        """
        try:
            WalletAddress(wallet_address)
        except ValueError as e:
            raise InvalidInputError("wallet", str(e))

        if limit < 1 or limit > MAX_LIMIT:
            raise InvalidInputError("limit", f"must be between 1 and {MAX_LIMIT}")

        return await self.claim_ledger.list_claims(wallet_address, limit)
