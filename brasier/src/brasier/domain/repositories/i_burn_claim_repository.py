"""
BurnClaim repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from brasier.domain.entities.burn_claim import BurnClaim


class IBurnClaimRepository(ABC):
    """Session-scoped persistence operations for BurnClaim rows."""

    @abstractmethod
    async def create(self, claim: BurnClaim) -> BurnClaim:
        """Insert a claim; the storage unique constraint rejects duplicates."""

    @abstractmethod
    async def get_by_signature(self, tx_signature: str) -> Optional[BurnClaim]:
        """Retrieve a claim by transaction signature."""

    @abstractmethod
    async def exists(self, tx_signature: str) -> bool:
        """Check whether a claim exists for the signature."""

    @abstractmethod
    async def list_by_wallet(
        self, wallet_address: str, limit: int = 50
    ) -> list[BurnClaim]:
        """List claims for a wallet, newest first."""
