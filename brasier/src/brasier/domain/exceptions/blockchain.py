"""
Blockchain-related exceptions.

Raised by the chain reader when fetching a transaction by signature.
"""

from typing import Any, Optional

from brasier.domain.exceptions.base import BrasierException
from brasier.domain.value_objects.error_kind import ErrorKind


class BlockchainError(BrasierException):
    """Base exception for ledger RPC operations."""


class TransactionNotFoundError(BlockchainError):
    """Raised when the ledger has no record of the transaction."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, tx_signature: str):
        """
        Initialize transaction not found error.

        Args:
            tx_signature: Transaction signature that was not found
        """
        super().__init__(f"Transaction not found: {tx_signature}")
        self.tx_signature = tx_signature


class OnChainFailureError(BlockchainError):
    """Raised when the transaction exists but failed during execution."""

    kind = ErrorKind.ON_CHAIN_FAILURE

    def __init__(self, tx_signature: str, error: Any = None):
        """
        Initialize on-chain failure error.

        Args:
            tx_signature: Transaction signature
            error: The `meta.err` value reported by the ledger
        """
        super().__init__(f"Transaction failed on-chain: {tx_signature}")
        self.tx_signature = tx_signature
        self.error = error


class UpstreamUnavailableError(BlockchainError):
    """Raised on transport failures or timeouts talking to the RPC node."""

    kind = ErrorKind.UPSTREAM_UNAVAILABLE

    def __init__(self, reason: str, tx_signature: Optional[str] = None):
        """
        Initialize upstream unavailable error.

        Args:
            reason: Server-side description (never returned to callers)
            tx_signature: Optional transaction signature
        """
        super().__init__(f"Ledger RPC unavailable: {reason}")
        self.reason = reason
        self.tx_signature = tx_signature

    @property
    def public_message(self) -> str:
        return "Ledger RPC unavailable, try again later"
