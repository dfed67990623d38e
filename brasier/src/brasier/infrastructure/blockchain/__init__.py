"""
Blockchain infrastructure components.
"""

from brasier.infrastructure.blockchain.solana_chain_reader import (
    SolanaChainReader,
    parse_transaction,
)

__all__ = [
    "SolanaChainReader",
    "parse_transaction",
]
