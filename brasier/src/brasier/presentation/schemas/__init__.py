"""
API request/response schemas.
"""

from brasier.presentation.schemas.burn_schemas import (
    BurnClaimListResponse,
    BurnClaimResponse,
    ErrorResponse,
    VerifyBurnRequest,
    VerifyBurnResponse,
    VerifyUnlockRequest,
)

__all__ = [
    "BurnClaimListResponse",
    "BurnClaimResponse",
    "ErrorResponse",
    "VerifyBurnRequest",
    "VerifyBurnResponse",
    "VerifyUnlockRequest",
]
