"""
Domain services and service interfaces.
"""

from brasier.domain.services.amount_policy import AmountPolicy, check_amount
from brasier.domain.services.burn_extractor import (
    BurnExtraction,
    balance_decrease,
    extract_burns,
    to_ui_amount,
)
from brasier.domain.services.i_chain_reader import (
    IChainReader,
    ParsedTransaction,
    TokenBalance,
)
from brasier.domain.services.i_claim_ledger import IClaimLedger
from brasier.domain.services.reward_policy import RewardPolicy

__all__ = [
    "AmountPolicy",
    "check_amount",
    "BurnExtraction",
    "balance_decrease",
    "extract_burns",
    "to_ui_amount",
    "IChainReader",
    "ParsedTransaction",
    "TokenBalance",
    "IClaimLedger",
    "RewardPolicy",
]
