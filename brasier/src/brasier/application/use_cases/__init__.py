"""
Application use cases.
"""

from brasier.application.use_cases.get_burn_claim import GetBurnClaim
from brasier.application.use_cases.list_wallet_claims import ListWalletClaims
from brasier.application.use_cases.verify_burn import VerifyBurn

__all__ = [
    "GetBurnClaim",
    "ListWalletClaims",
    "VerifyBurn",
]
