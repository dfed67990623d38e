"""
Builders for jsonParsed getTransaction payloads.

Addresses and signatures are real base58 encodings of fixed byte
patterns, so they pass the same validation as mainnet values.
"""

from typing import Optional

import base58

from brasier.domain.services.i_chain_reader import ParsedTransaction
from brasier.domain.value_objects.instruction import SPL_TOKEN_PROGRAM_ID
from brasier.infrastructure.blockchain.solana_chain_reader import parse_transaction


def make_address(seed: int) -> str:
    """32-byte public key filled with `seed` (1..255)."""
    return base58.b58encode(bytes([seed]) * 32).decode()


def make_signature(seed: int) -> str:
    """64-byte transaction signature filled with `seed` (1..255)."""
    return base58.b58encode(bytes([seed]) * 64).decode()


MINT = make_address(11)
OTHER_MINT = make_address(12)
WALLET = make_address(21)
OTHER_WALLET = make_address(22)
TOKEN_ACCOUNT = make_address(31)
FEE_PAYER = make_address(41)

SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"


def burn_ix(
    mint: str = MINT,
    amount: int = 5_000_000_000,
    authority: str = WALLET,
    account: str = TOKEN_ACCOUNT,
) -> dict:
    """Plain `burn` instruction (no decimals)."""
    return {
        "program": "spl-token",
        "programId": SPL_TOKEN_PROGRAM_ID,
        "parsed": {
            "type": "burn",
            "info": {
                "account": account,
                "mint": mint,
                "authority": authority,
                "amount": str(amount),
            },
        },
        "stackHeight": None,
    }


def burn_checked_ix(
    mint: str = MINT,
    amount: int = 5_000_000_000,
    decimals: int = 9,
    authority: str = WALLET,
    account: str = TOKEN_ACCOUNT,
) -> dict:
    """`burnChecked` instruction carrying decimals."""
    return {
        "program": "spl-token",
        "programId": SPL_TOKEN_PROGRAM_ID,
        "parsed": {
            "type": "burnChecked",
            "info": {
                "account": account,
                "mint": mint,
                "authority": authority,
                "tokenAmount": {
                    "amount": str(amount),
                    "decimals": decimals,
                    "uiAmount": amount / 10**decimals,
                    "uiAmountString": str(amount / 10**decimals),
                },
            },
        },
        "stackHeight": None,
    }


def transfer_ix(source: str = WALLET, destination: str = OTHER_WALLET) -> dict:
    """System transfer, which must never count as a burn."""
    return {
        "program": "system",
        "programId": SYSTEM_PROGRAM_ID,
        "parsed": {
            "type": "transfer",
            "info": {
                "source": source,
                "destination": destination,
                "lamports": 5000,
            },
        },
        "stackHeight": None,
    }


def compute_budget_ix() -> dict:
    """Unparsed instruction as returned for programs without a parser."""
    return {
        "programId": "ComputeBudget111111111111111111111111111111",
        "accounts": [],
        "data": "3DTZbgwsozUF",
        "stackHeight": None,
    }


def token_balance(
    account_index: int,
    amount: int,
    owner: str = WALLET,
    mint: str = MINT,
    decimals: int = 9,
) -> dict:
    return {
        "accountIndex": account_index,
        "mint": mint,
        "owner": owner,
        "programId": SPL_TOKEN_PROGRAM_ID,
        "uiTokenAmount": {
            "amount": str(amount),
            "decimals": decimals,
            "uiAmount": amount / 10**decimals,
            "uiAmountString": str(amount / 10**decimals),
        },
    }


def rpc_result(
    instructions: Optional[list] = None,
    signers: tuple = (WALLET,),
    inner_instructions: Optional[list] = None,
    pre_token_balances: Optional[list] = None,
    post_token_balances: Optional[list] = None,
    err=None,
    slot: int = 250_000_000,
) -> dict:
    """
    Build the `result` object of a jsonParsed getTransaction response.

    Signers come first in accountKeys, followed by the token account, the
    mint and the token program.
    """
    account_keys = [
        {"pubkey": key, "signer": True, "writable": True, "source": "transaction"}
        for key in signers
    ]
    account_keys += [
        {
            "pubkey": TOKEN_ACCOUNT,
            "signer": False,
            "writable": True,
            "source": "transaction",
        },
        {"pubkey": MINT, "signer": False, "writable": True, "source": "transaction"},
        {
            "pubkey": SPL_TOKEN_PROGRAM_ID,
            "signer": False,
            "writable": False,
            "source": "transaction",
        },
    ]

    if instructions is None:
        instructions = [burn_checked_ix()]
    if pre_token_balances is None:
        pre_token_balances = [token_balance(len(signers), 10_000_000_000)]
    if post_token_balances is None:
        post_token_balances = [token_balance(len(signers), 5_000_000_000)]

    return {
        "slot": slot,
        "blockTime": 1_760_000_000,
        "version": 0,
        "meta": {
            "err": err,
            "status": {"Err": err} if err else {"Ok": None},
            "fee": 5000,
            "innerInstructions": inner_instructions or [],
            "logMessages": [],
            "preTokenBalances": pre_token_balances,
            "postTokenBalances": post_token_balances,
        },
        "transaction": {
            "signatures": [make_signature(1)],
            "message": {
                "accountKeys": account_keys,
                "instructions": instructions,
                "recentBlockhash": make_address(99),
            },
        },
    }


def parsed_tx(signature: Optional[str] = None, **kwargs) -> ParsedTransaction:
    """ParsedTransaction built through the real jsonParsed parser."""
    return parse_transaction(signature or make_signature(1), rpc_result(**kwargs))
