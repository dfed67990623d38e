"""
Chain reader interface.

Defines the read-only lookup of a parsed transaction by signature.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional


@dataclass(frozen=True)
class TokenBalance:
    """Token account balance snapshot from transaction metadata."""

    account_index: int
    mint: str
    owner: Optional[str]
    raw_amount: int
    decimals: Optional[int] = None


@dataclass(frozen=True)
class ParsedTransaction:
    """
    Parsed transaction record as returned by the ledger.

    Instructions are kept as the raw jsonParsed objects; they are decoded
    into Instruction variants by the burn extractor.
    """

    signature: str
    signers: frozenset
    account_keys: tuple = ()
    instructions: tuple = ()
    inner_instructions: tuple = ()
    pre_token_balances: tuple = ()
    post_token_balances: tuple = ()
    error: Any = None
    slot: Optional[int] = None
    block_time: Optional[int] = None
    log_messages: tuple = field(default=(), repr=False)

    @property
    def failed(self) -> bool:
        """True when the transaction executed but failed on-chain."""
        return self.error is not None

    def is_signed_by(self, wallet_address: str) -> bool:
        """Check that the wallet is an actual signer, not merely an account."""
        return wallet_address in self.signers

    def iter_instructions(self) -> Iterator[Mapping[str, Any]]:
        """Yield top-level instructions, then every inner instruction group."""
        yield from self.instructions
        for group in self.inner_instructions:
            yield from group


class IChainReader(ABC):
    """
    Abstract interface for fetching transactions from the ledger.

    Implementations perform a single bounded network call and never retry.
    """

    @abstractmethod
    async def fetch_transaction(
        self,
        tx_signature: str,
        commitment: Optional[str] = None,
    ) -> ParsedTransaction:
        """
        Fetch a parsed transaction by signature.

        Args:
            tx_signature: Base58 transaction signature
            commitment: Commitment level override (defaults to configured)

        Returns:
            ParsedTransaction

        Raises:
            InvalidInputError: If the signature is malformed
            TransactionNotFoundError: If the ledger has no record
            OnChainFailureError: If the transaction failed on-chain
            UpstreamUnavailableError: On transport failure or timeout
        """

    async def close(self) -> None:
        """Release network resources."""
