"""
Infrastructure persistence package.
"""

from brasier.infrastructure.persistence.claim_ledger import SqlClaimLedger
from brasier.infrastructure.persistence.database import Database
from brasier.infrastructure.persistence.models import Base, BurnClaimModel

__all__ = [
    "Database",
    "Base",
    "BurnClaimModel",
    "SqlClaimLedger",
]
