"""
Burn verification API routes.

Handles burn and unlock verification plus claim lookups.
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from brasier.application.use_cases.get_burn_claim import GetBurnClaim
from brasier.application.use_cases.list_wallet_claims import ListWalletClaims
from brasier.application.use_cases.verify_burn import VerifyBurn
from brasier.di.dependencies import (
    get_get_burn_claim,
    get_list_wallet_claims,
    get_verify_burn,
)
from brasier.domain.entities.burn_claim import BurnClaim
from brasier.domain.value_objects.verification import (
    VerificationRequest,
    VerificationResult,
)
from brasier.presentation.api.middleware.error_handler import (
    error_response,
    status_code_for,
)
from brasier.presentation.schemas.burn_schemas import (
    BurnClaimListResponse,
    BurnClaimResponse,
    ErrorResponse,
    VerifyBurnRequest,
    VerifyBurnResponse,
    VerifyUnlockRequest,
)

router = APIRouter(tags=["burns"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _verification_response(result: VerificationResult):
    """Map a verification verdict to its HTTP response."""
    if not result.success:
        return error_response(
            status_code_for(result.error_kind),
            result.message,
            result.error_kind,
        )

    return VerifyBurnResponse(
        amount_burned=float(result.amount_burned),
        signature=result.signature,
        reward=result.reward,
        message=result.message,
    )


def _claim_response(claim: BurnClaim) -> BurnClaimResponse:
    return BurnClaimResponse(
        signature=claim.signature,
        wallet_address=claim.wallet_address,
        amount_burned=float(claim.amount_burned),
        recorded_at=claim.recorded_at,
    )


# ================================================================
# Verification
# ================================================================


@router.post(
    "/verify-burn",
    response_model=VerifyBurnResponse,
    responses=ERROR_RESPONSES,
    status_code=status.HTTP_200_OK,
    summary="Verify a token burn",
    description="Verify a burn transaction on-chain and redeem it once",
)
async def verify_burn(
    request: VerifyBurnRequest,
    use_case: VerifyBurn = Depends(get_verify_burn),
):
    """
    Verify a burn transaction and record the claim.

    The amount check is applied only when requiredAmount is given.
    """
    result = await use_case.execute(
        VerificationRequest(
            signature=request.signature,
            wallet_address=request.user_wallet,
            required_amount=request.required_amount,
        )
    )
    return _verification_response(result)


@router.post(
    "/verify-unlock",
    response_model=VerifyBurnResponse,
    responses=ERROR_RESPONSES,
    status_code=status.HTTP_200_OK,
    summary="Verify an unlock burn",
    description="Verify a burn that pays for an unlock of a known cost",
)
async def verify_unlock(
    request: VerifyUnlockRequest,
    use_case: VerifyBurn = Depends(get_verify_burn),
):
    """Same pipeline as verify-burn, with the amount mandatory."""
    result = await use_case.execute(
        VerificationRequest(
            signature=request.signature,
            wallet_address=request.user_wallet,
            required_amount=request.amount_to_burn,
        ),
        amount_required=True,
    )
    return _verification_response(result)


# ================================================================
# Claim History
# ================================================================


@router.get(
    "/burns/{signature}",
    response_model=BurnClaimResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get a recorded claim",
)
async def get_burn_claim(
    signature: str,
    use_case: GetBurnClaim = Depends(get_get_burn_claim),
):
    """Return the claim recorded for a signature."""
    claim = await use_case.execute(signature)
    return _claim_response(claim)


@router.get(
    "/burns",
    response_model=BurnClaimListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List a wallet's claims",
)
async def list_wallet_claims(
    wallet: str = Query(..., description="Wallet address"),
    limit: int = Query(default=50, description="Maximum number of claims"),
    use_case: ListWalletClaims = Depends(get_list_wallet_claims),
):
    """List claims redeemed by a wallet, newest first."""
    claims = await use_case.execute(wallet, limit)
    return BurnClaimListResponse(
        wallet_address=wallet,
        claims=[_claim_response(claim) for claim in claims],
        count=len(claims),
    )
