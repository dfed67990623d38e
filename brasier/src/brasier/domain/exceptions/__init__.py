"""
Domain exceptions package.
"""

# Base exceptions
from brasier.domain.exceptions.base import (
    BrasierException,
    InvalidInputError,
    MisconfiguredError,
)

# Blockchain exceptions
from brasier.domain.exceptions.blockchain import (
    BlockchainError,
    OnChainFailureError,
    TransactionNotFoundError,
    UpstreamUnavailableError,
)

# Storage exceptions
from brasier.domain.exceptions.storage import (
    AlreadyClaimedError,
    ClaimNotFoundError,
    StorageUnavailableError,
)

# Verification exceptions
from brasier.domain.exceptions.verification import (
    AmountMismatchError,
    InsufficientAmountError,
    NoBurnFoundError,
    SignerMismatchError,
)

__all__ = [
    # Base
    "BrasierException",
    "InvalidInputError",
    "MisconfiguredError",
    # Blockchain
    "BlockchainError",
    "TransactionNotFoundError",
    "OnChainFailureError",
    "UpstreamUnavailableError",
    # Storage
    "AlreadyClaimedError",
    "ClaimNotFoundError",
    "StorageUnavailableError",
    # Verification
    "SignerMismatchError",
    "NoBurnFoundError",
    "AmountMismatchError",
    "InsufficientAmountError",
]
