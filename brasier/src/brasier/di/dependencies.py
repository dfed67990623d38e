"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
"""

from brasier.application.use_cases.get_burn_claim import GetBurnClaim
from brasier.application.use_cases.list_wallet_claims import ListWalletClaims
from brasier.application.use_cases.verify_burn import VerifyBurn
from brasier.di.container import get_container
from brasier.infrastructure.persistence.database import Database

# ================================================================
# Infrastructure Dependencies
# ================================================================


def get_database() -> Database:
    """Get Database dependency."""
    return get_container().database


# ================================================================
# Use Case Dependencies
# ================================================================


def get_verify_burn() -> VerifyBurn:
    """Get VerifyBurn use case dependency."""
    return get_container().get_verify_burn()


def get_get_burn_claim() -> GetBurnClaim:
    """Get GetBurnClaim use case dependency."""
    return get_container().get_get_burn_claim()


def get_list_wallet_claims() -> ListWalletClaims:
    """Get ListWalletClaims use case dependency."""
    return get_container().get_list_wallet_claims()
