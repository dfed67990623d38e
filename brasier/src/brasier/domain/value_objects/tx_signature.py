"""
TransactionSignature value object - Solana transaction identifier.
"""

from dataclasses import dataclass

import base58

from brasier.domain.value_objects.wallet_address import BASE58_ALPHABET

SIGNATURE_BYTES = 64


@dataclass(frozen=True)
class TransactionSignature:
    """
    Validated base58 transaction signature.

    A Solana signature is 64 raw bytes, which encodes to 64-88 base58
    characters (87-88 in practice).
    """

    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Transaction signature cannot be empty")

        if len(self.value) < 64 or len(self.value) > 88:
            raise ValueError(f"Invalid signature length: {len(self.value)}")

        if not all(c in BASE58_ALPHABET for c in self.value):
            raise ValueError("Signature contains invalid characters")

        if len(base58.b58decode(self.value)) != SIGNATURE_BYTES:
            raise ValueError(f"Signature must decode to {SIGNATURE_BYTES} bytes")

    def __str__(self) -> str:
        return self.value
