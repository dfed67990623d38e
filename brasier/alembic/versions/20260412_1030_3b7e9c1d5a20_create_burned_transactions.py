"""Create burned_transactions claim ledger table

Revision ID: 3b7e9c1d5a20
Revises:
Create Date: 2026-04-12 10:30:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b7e9c1d5a20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the claim ledger; the primary key enforces one claim per signature."""

    # =================================================================
    # TABLE: burned_transactions
    # =================================================================
    op.create_table(
        'burned_transactions',
        sa.Column('signature', sa.String(length=88), nullable=False),
        sa.Column('wallet_address', sa.String(length=44), nullable=False),
        sa.Column('amount_burned', sa.Numeric(precision=38, scale=18), nullable=False),
        sa.Column('recorded_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('signature'),
        sa.CheckConstraint(
            'amount_burned > 0',
            name='positive_amount_burned'
        )
    )
    op.create_index(
        op.f('ix_burned_transactions_wallet_address'),
        'burned_transactions',
        ['wallet_address'],
        unique=False
    )


def downgrade() -> None:
    """Drop the claim ledger."""
    op.drop_index(
        op.f('ix_burned_transactions_wallet_address'),
        table_name='burned_transactions'
    )
    op.drop_table('burned_transactions')
