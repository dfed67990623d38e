"""
ErrorKind - rejection taxonomy for burn verification.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Every distinguishable reason a verification can be rejected."""

    INVALID_INPUT = "INVALID_INPUT"
    ALREADY_CLAIMED = "ALREADY_CLAIMED"
    NOT_FOUND = "NOT_FOUND"
    ON_CHAIN_FAILURE = "ON_CHAIN_FAILURE"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    SIGNER_MISMATCH = "SIGNER_MISMATCH"
    NO_BURN_FOUND = "NO_BURN_FOUND"
    AMOUNT_MISMATCH = "AMOUNT_MISMATCH"
    INSUFFICIENT_AMOUNT = "INSUFFICIENT_AMOUNT"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    MISCONFIGURED = "MISCONFIGURED"

    @property
    def retryable(self) -> bool:
        """True when the caller may safely resubmit the same request."""
        return self in (ErrorKind.UPSTREAM_UNAVAILABLE, ErrorKind.STORAGE_UNAVAILABLE)
