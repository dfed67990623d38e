"""
BurnClaim entity - a recorded, one-time redemption of a burn transaction.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class BurnClaim:
    """
    BurnClaim entity.

    Business rules:
    - Signature is globally unique (primary key of the claim ledger)
    - Amount burned must be positive
    - Created once, never mutated, never deleted
    """

    signature: str
    wallet_address: str
    amount_burned: Decimal
    recorded_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        """Validate claim data after initialization."""
        if not self.signature:
            raise ValueError("Transaction signature is required")

        if not self.wallet_address:
            raise ValueError("Wallet address is required")

        if self.amount_burned <= 0:
            raise ValueError("Amount burned must be positive")

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "signature": self.signature,
            "wallet_address": self.wallet_address,
            "amount_burned": str(self.amount_burned),
            "recorded_at": self.recorded_at.isoformat(),
        }
