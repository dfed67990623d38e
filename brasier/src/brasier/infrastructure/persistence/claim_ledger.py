"""
SQL-backed claim ledger.

Each operation runs in its own transaction, so a recorded claim is
committed before the caller sees success.
"""

import time
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from brasier.domain.entities.burn_claim import BurnClaim
from brasier.domain.exceptions import AlreadyClaimedError, StorageUnavailableError
from brasier.domain.services.i_claim_ledger import IClaimLedger
from brasier.infrastructure.monitoring.logger import get_logger, log_performance
from brasier.infrastructure.monitoring.metrics import (
    claim_conflicts_total,
    claims_recorded_total,
)
from brasier.infrastructure.persistence.database import Database
from brasier.infrastructure.persistence.repositories.burn_claim_repository import (
    BurnClaimRepository,
)

logger = get_logger(__name__)


class SqlClaimLedger(IClaimLedger):
    """
    Claim ledger backed by the ``burned_transactions`` table.

    At-most-once redemption relies on the primary key on ``signature``:
    of two concurrent inserts for one signature, the database rejects one.
    """

    def __init__(self, database: Database):
        self.database = database

    async def has_claim(self, tx_signature: str) -> bool:
        try:
            async with self.database.session() as session:
                return await BurnClaimRepository(session).exists(tx_signature)
        except (SQLAlchemyError, OSError, RuntimeError) as e:
            logger.error(f"Claim lookup failed for {tx_signature}: {e}")
            raise StorageUnavailableError("has_claim", str(e))

    async def record_claim(
        self,
        tx_signature: str,
        wallet_address: str,
        amount_burned: Decimal,
    ) -> BurnClaim:
        claim = BurnClaim(
            signature=tx_signature,
            wallet_address=wallet_address,
            amount_burned=amount_burned,
        )

        start = time.perf_counter()
        try:
            async with self.database.session() as session:
                created = await BurnClaimRepository(session).create(claim)
        except IntegrityError as e:
            # Only a committed row for this signature makes it a replay
            if not await self.has_claim(tx_signature):
                logger.error(f"Claim insert rejected for {tx_signature}: {e.orig}")
                raise StorageUnavailableError("record_claim", str(e.orig))
            claim_conflicts_total.inc()
            logger.info(f"Claim insert lost the race for {tx_signature}")
            raise AlreadyClaimedError(tx_signature)
        except (SQLAlchemyError, OSError, RuntimeError) as e:
            logger.error(f"Claim insert failed for {tx_signature}: {e}")
            raise StorageUnavailableError("record_claim", str(e))

        log_performance(logger, "record_claim", start)
        claims_recorded_total.inc()
        logger.info(
            f"Claim recorded for {tx_signature}",
            extra={"wallet_address": wallet_address},
        )
        return created

    async def get_claim(self, tx_signature: str) -> Optional[BurnClaim]:
        try:
            async with self.database.session() as session:
                return await BurnClaimRepository(session).get_by_signature(
                    tx_signature
                )
        except (SQLAlchemyError, OSError, RuntimeError) as e:
            logger.error(f"Claim fetch failed for {tx_signature}: {e}")
            raise StorageUnavailableError("get_claim", str(e))

    async def list_claims(
        self, wallet_address: str, limit: int = 50
    ) -> list[BurnClaim]:
        try:
            async with self.database.session() as session:
                return await BurnClaimRepository(session).list_by_wallet(
                    wallet_address, limit
                )
        except (SQLAlchemyError, OSError, RuntimeError) as e:
            logger.error(f"Claim listing failed for {wallet_address}: {e}")
            raise StorageUnavailableError("list_claims", str(e))
