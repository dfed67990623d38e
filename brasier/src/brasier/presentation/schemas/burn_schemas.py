"""
API schemas for burn verification.

Request and response models for burn endpoints. Field names on the wire
are camelCase, matching the game client.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ================================================================
# Request Schemas
# ================================================================


class VerifyBurnRequest(BaseModel):
    """
    Request schema for verifying a burn.

    Fields are optional at the schema level; missing values are reported
    as INVALID_INPUT by the verification pipeline.
    """

    model_config = ConfigDict(populate_by_name=True)

    signature: Optional[str] = Field(
        default=None,
        description="Burn transaction signature (base58)",
    )
    user_wallet: Optional[str] = Field(
        default=None,
        alias="userWallet",
        description="Wallet that signed the burn",
    )
    required_amount: Optional[Decimal] = Field(
        default=None,
        alias="requiredAmount",
        description="Minimum (or exact) token amount the burn must cover",
    )


class VerifyUnlockRequest(BaseModel):
    """Request schema for an unlock burn; the amount is mandatory."""

    model_config = ConfigDict(populate_by_name=True)

    signature: Optional[str] = Field(default=None)
    user_wallet: Optional[str] = Field(default=None, alias="userWallet")
    amount_to_burn: Optional[Decimal] = Field(
        default=None,
        alias="amountToBurn",
        description="Token amount the unlock costs",
    )


# ================================================================
# Response Schemas
# ================================================================


class VerifyBurnResponse(BaseModel):
    """Response schema for a verified burn."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    amount_burned: float = Field(..., alias="amountBurned")
    signature: str
    reward: int
    message: str


class ErrorResponse(BaseModel):
    """Response schema for any rejected request."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = False
    error: str
    error_kind: Optional[str] = Field(default=None, alias="errorKind")


class BurnClaimResponse(BaseModel):
    """Response schema for a recorded claim."""

    model_config = ConfigDict(populate_by_name=True)

    signature: str
    wallet_address: str = Field(..., alias="walletAddress")
    amount_burned: float = Field(..., alias="amountBurned")
    recorded_at: datetime = Field(..., alias="recordedAt")


class BurnClaimListResponse(BaseModel):
    """Response schema for a wallet's claim history."""

    model_config = ConfigDict(populate_by_name=True)

    wallet_address: str = Field(..., alias="walletAddress")
    claims: list[BurnClaimResponse]
    count: int
