"""
Repository implementations.
"""

from brasier.infrastructure.persistence.repositories.burn_claim_repository import (
    BurnClaimRepository,
)

__all__ = ["BurnClaimRepository"]
