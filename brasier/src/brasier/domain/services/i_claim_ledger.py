"""
Claim ledger interface.

The claim ledger is the only writer of BurnClaim records.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from brasier.domain.entities.burn_claim import BurnClaim


class IClaimLedger(ABC):
    """
    Append-only registry of redeemed burn signatures.

    `record_claim` must be atomic against concurrent callers presenting the
    same signature, through a uniqueness constraint of the storage itself.
    """

    @abstractmethod
    async def has_claim(self, tx_signature: str) -> bool:
        """
        Check whether a signature was already redeemed.

        Raises:
            StorageUnavailableError: If storage cannot be queried
        """

    @abstractmethod
    async def record_claim(
        self,
        tx_signature: str,
        wallet_address: str,
        amount_burned: Decimal,
    ) -> BurnClaim:
        """
        Record a claim for a signature.

        Returns:
            The persisted BurnClaim

        Raises:
            AlreadyClaimedError: If the signature already has a claim
            StorageUnavailableError: If storage cannot be written
        """

    @abstractmethod
    async def get_claim(self, tx_signature: str) -> Optional[BurnClaim]:
        """Return the claim recorded for a signature, if any."""

    @abstractmethod
    async def list_claims(
        self, wallet_address: str, limit: int = 50
    ) -> list[BurnClaim]:
        """Return claims recorded for a wallet, newest first."""
