"""
BurnClaim repository implementation using SQLAlchemy.
"""

from datetime import timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from brasier.domain.entities.burn_claim import BurnClaim
from brasier.domain.repositories.i_burn_claim_repository import (
    IBurnClaimRepository,
)
from brasier.infrastructure.persistence.models import BurnClaimModel


class BurnClaimRepository(IBurnClaimRepository):
    """
    SQLAlchemy implementation of the burn claim repository.

    Transaction boundaries belong to the caller's session.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, claim: BurnClaim) -> BurnClaim:
        """
        Insert a claim row.

        Raises:
            IntegrityError: If a claim with the same signature exists
        """
        model = BurnClaimModel(
            signature=claim.signature,
            wallet_address=claim.wallet_address,
            amount_burned=claim.amount_burned,
            recorded_at=claim.recorded_at,
        )

        self.session.add(model)
        await self.session.flush()

        return self._to_entity(model)

    async def get_by_signature(self, tx_signature: str) -> Optional[BurnClaim]:
        stmt = select(BurnClaimModel).where(BurnClaimModel.signature == tx_signature)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def exists(self, tx_signature: str) -> bool:
        stmt = select(BurnClaimModel.signature).where(
            BurnClaimModel.signature == tx_signature
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_by_wallet(
        self, wallet_address: str, limit: int = 50
    ) -> list[BurnClaim]:
        """
        List claims for a wallet, newest first.

        Args:
            wallet_address: Wallet that submitted the claims
            limit: Maximum number of rows

        Returns:
            List of BurnClaim entities
        """
        stmt = (
            select(BurnClaimModel)
            .where(BurnClaimModel.wallet_address == wallet_address)
            .order_by(BurnClaimModel.recorded_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    @staticmethod
    def _to_entity(model: BurnClaimModel) -> BurnClaim:
        """Convert database model to domain entity."""
        recorded_at = model.recorded_at
        if recorded_at.tzinfo is None:
            # SQLite drops tzinfo; values are always written in UTC
            recorded_at = recorded_at.replace(tzinfo=timezone.utc)

        return BurnClaim(
            signature=model.signature,
            wallet_address=model.wallet_address,
            amount_burned=_strip_zeros(Decimal(model.amount_burned)),
            recorded_at=recorded_at,
        )


def _strip_zeros(value: Decimal) -> Decimal:
    """Drop the column's trailing zero scale without switching to exponent form."""
    if value == value.to_integral_value():
        return value.quantize(Decimal(1))
    return value.normalize()
