"""
Get Burn Claim use case.
"""

from brasier.domain.entities.burn_claim import BurnClaim
from brasier.domain.exceptions import ClaimNotFoundError, InvalidInputError
from brasier.domain.services.i_claim_ledger import IClaimLedger
from brasier.domain.value_objects.tx_signature import TransactionSignature


class GetBurnClaim:
    """Look up the claim recorded for a transaction signature."""

    def __init__(self, claim_ledger: IClaimLedger):
        self.claim_ledger = claim_ledger

    async def execute(self, tx_signature: str) -> BurnClaim:
        """
        Get a recorded claim.

        Raises:
            InvalidInputError: If the signature is malformed
            ClaimNotFoundError: If no claim exists for the signature
            StorageUnavailableError: If storage cannot be queried
        """
        try:
            TransactionSignature(tx_signature)
        except ValueError as e:
            raise InvalidInputError("signature", str(e))

        claim = await self.claim_ledger.get_claim(tx_signature)
        if claim is None:
            raise ClaimNotFoundError(tx_signature)
        return claim
