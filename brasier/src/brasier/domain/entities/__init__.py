"""
Domain entities.
"""

from brasier.domain.entities.burn_claim import BurnClaim

__all__ = ["BurnClaim"]
