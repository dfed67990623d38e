"""
Domain repository interfaces.
"""

from brasier.domain.repositories.i_burn_claim_repository import (
    IBurnClaimRepository,
)

__all__ = ["IBurnClaimRepository"]
