"""
Verification request/result value objects and the pipeline states.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from brasier.domain.value_objects.error_kind import ErrorKind


class VerificationState(str, Enum):
    """States of a single verification, in pipeline order."""

    RECEIVED = "received"
    SIGNATURE_VALIDATED = "signature_validated"
    REPLAY_CHECKED = "replay_checked"
    CHAIN_FETCHED = "chain_fetched"
    SIGNER_VERIFIED = "signer_verified"
    BURN_EXTRACTED = "burn_extracted"
    AMOUNT_ACCEPTED = "amount_accepted"
    RECORDED = "recorded"
    COMPLETED = "completed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class VerificationRequest:
    """Caller-supplied input; validated before any chain call."""

    signature: Optional[str]
    wallet_address: Optional[str]
    required_amount: Optional[Decimal] = None


@dataclass(frozen=True)
class VerificationResult:
    """
    Verdict returned to the caller.

    Exactly one of (amount_burned, reward) or error_kind is populated,
    depending on success.
    """

    success: bool
    signature: Optional[str]
    message: str
    amount_burned: Optional[Decimal] = None
    reward: Optional[int] = None
    error_kind: Optional[ErrorKind] = None
    rejected_at: Optional[VerificationState] = None

    @classmethod
    def completed(
        cls, signature: str, amount_burned: Decimal, reward: int
    ) -> "VerificationResult":
        return cls(
            success=True,
            signature=signature,
            message="Burn verified and recorded successfully",
            amount_burned=amount_burned,
            reward=reward,
        )

    @classmethod
    def rejected(
        cls,
        signature: Optional[str],
        error_kind: ErrorKind,
        message: str,
        rejected_at: VerificationState,
    ) -> "VerificationResult":
        return cls(
            success=False,
            signature=signature,
            message=message,
            error_kind=error_kind,
            rejected_at=rejected_at,
        )
