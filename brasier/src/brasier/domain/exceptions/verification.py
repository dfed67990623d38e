"""
Burn verification rejections.
"""

from decimal import Decimal

from brasier.domain.exceptions.base import BrasierException
from brasier.domain.value_objects.error_kind import ErrorKind


class SignerMismatchError(BrasierException):
    """Raised when the caller's wallet did not sign the transaction."""

    kind = ErrorKind.SIGNER_MISMATCH

    def __init__(self, wallet_address: str):
        super().__init__("Transaction signer does not match wallet")
        self.wallet_address = wallet_address


class NoBurnFoundError(BrasierException):
    """Raised when no burn of the configured mint exists in the transaction."""

    kind = ErrorKind.NO_BURN_FOUND

    def __init__(self, mint: str):
        super().__init__("No valid token burns found for specified mint")
        self.mint = mint


class AmountMismatchError(BrasierException):
    """Raised when burned amount or decimals disagree with what is expected."""

    kind = ErrorKind.AMOUNT_MISMATCH

    def __init__(self, message: str):
        super().__init__(message)


class InsufficientAmountError(BrasierException):
    """Raised when less than the required amount was burned."""

    kind = ErrorKind.INSUFFICIENT_AMOUNT

    def __init__(self, burned: Decimal, required: Decimal):
        super().__init__(
            f"Insufficient burn amount: burned {burned}, required {required}"
        )
        self.burned = burned
        self.required = required
