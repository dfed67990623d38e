"""
Claim storage exceptions.
"""

from brasier.domain.exceptions.base import BrasierException
from brasier.domain.value_objects.error_kind import ErrorKind


class StorageUnavailableError(BrasierException):
    """Raised when the claim store cannot be read or written."""

    kind = ErrorKind.STORAGE_UNAVAILABLE

    def __init__(self, operation: str, reason: str = ""):
        super().__init__(f"Claim storage unavailable during {operation}")
        self.operation = operation
        self.reason = reason

    @property
    def public_message(self) -> str:
        return "Claim storage unavailable, try again later"


class AlreadyClaimedError(BrasierException):
    """Raised when a signature has already been redeemed."""

    kind = ErrorKind.ALREADY_CLAIMED

    def __init__(self, tx_signature: str):
        super().__init__("Transaction already claimed")
        self.tx_signature = tx_signature


class ClaimNotFoundError(BrasierException):
    """Raised when no claim is recorded for a signature."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, tx_signature: str):
        super().__init__("No claim recorded for transaction")
        self.tx_signature = tx_signature
