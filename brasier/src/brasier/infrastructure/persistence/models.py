"""
SQLAlchemy models for Brasier persistence.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""


class BurnClaimModel(Base):
    """Redeemed burn transaction. Rows are inserted once and never updated."""

    __tablename__ = "burned_transactions"
    __table_args__ = (
        CheckConstraint("amount_burned > 0", name="positive_amount_burned"),
    )

    signature: Mapped[str] = mapped_column(String(88), primary_key=True)
    wallet_address: Mapped[str] = mapped_column(
        String(44), index=True, nullable=False
    )
    amount_burned: Mapped[Decimal] = mapped_column(
        Numeric(38, 18), nullable=False
    )
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
