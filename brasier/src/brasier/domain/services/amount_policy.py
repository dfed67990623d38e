"""
Comparison of burned amounts against a caller-required amount.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from brasier.domain.exceptions import AmountMismatchError, InsufficientAmountError


class AmountPolicy(str, Enum):
    """How a burned amount must relate to the required amount."""

    MINIMUM = "minimum"
    EXACT = "exact"


def check_amount(
    burned: Decimal,
    required: Optional[Decimal],
    policy: AmountPolicy = AmountPolicy.MINIMUM,
) -> None:
    """
    Accept or reject a burned amount.

    A missing required amount accepts any positive burn.

    Raises:
        InsufficientAmountError: MINIMUM policy and burned < required
        AmountMismatchError: EXACT policy and burned != required
    """
    if required is None:
        return

    if policy is AmountPolicy.EXACT:
        if burned != required:
            raise AmountMismatchError(
                f"Burn amount mismatch. Burned: {burned}, Required: {required}"
            )
        return

    if burned < required:
        raise InsufficientAmountError(burned=burned, required=required)
