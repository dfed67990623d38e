"""
Solana chain reader implementation.

JSON-RPC client fetching parsed transactions from a Solana node.
"""

import asyncio
import time
from typing import Any, Optional

import aiohttp

from brasier.domain.exceptions import (
    InvalidInputError,
    OnChainFailureError,
    TransactionNotFoundError,
    UpstreamUnavailableError,
)
from brasier.domain.services.i_chain_reader import (
    IChainReader,
    ParsedTransaction,
    TokenBalance,
)
from brasier.domain.value_objects.tx_signature import TransactionSignature
from brasier.infrastructure.monitoring.logger import get_logger, log_performance
from brasier.infrastructure.monitoring.metrics import (
    blockchain_request_duration_seconds,
    blockchain_requests_total,
)

logger = get_logger(__name__)

SUPPORTED_COMMITMENTS = ("confirmed", "finalized")


class SolanaChainReader(IChainReader):
    """
    Solana RPC client for reading burn transactions.

    Issues exactly one getTransaction call per fetch, bounded by the
    configured timeout. Failures are surfaced, never retried.
    """

    def __init__(
        self,
        rpc_url: str,
        commitment: str = "confirmed",
        total_timeout: float = 10,
        connect_timeout: float = 3,
    ):
        """
        Initialize Solana chain reader.

        Args:
            rpc_url: Solana RPC endpoint URL
            commitment: Default commitment level (confirmed or finalized)
            total_timeout: Total request timeout in seconds (default: 10s)
            connect_timeout: Connection timeout in seconds (default: 3s)
        """
        if commitment not in SUPPORTED_COMMITMENTS:
            raise ValueError(f"Unsupported commitment: {commitment}")

        self.rpc_url = rpc_url
        self.commitment = commitment
        self.timeout = aiohttp.ClientTimeout(
            total=total_timeout,
            connect=connect_timeout,
        )
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                connector=aiohttp.TCPConnector(
                    limit=100,
                    limit_per_host=30,
                    ttl_dns_cache=300,
                ),
            )
        return self._session

    async def fetch_transaction(
        self,
        tx_signature: str,
        commitment: Optional[str] = None,
    ) -> ParsedTransaction:
        """
        Fetch a parsed transaction by signature.

        Args:
            tx_signature: Base58 transaction signature
            commitment: Commitment level override

        Returns:
            ParsedTransaction with signers, instructions and balances

        Raises:
            InvalidInputError: If the signature is malformed
            TransactionNotFoundError: If the transaction is unknown
            OnChainFailureError: If the transaction failed on-chain
            UpstreamUnavailableError: On transport failure or timeout
        """
        try:
            TransactionSignature(tx_signature)
        except ValueError as e:
            raise InvalidInputError("signature", str(e))

        commitment = commitment or self.commitment
        if commitment not in SUPPORTED_COMMITMENTS:
            raise ValueError(f"Unsupported commitment: {commitment}")

        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "getTransaction",
            "params": [
                tx_signature,
                {
                    "encoding": "jsonParsed",
                    "maxSupportedTransactionVersion": 0,
                    "commitment": commitment,
                },
            ],
        }

        start = time.perf_counter()
        try:
            data = await self._call_rpc(payload)
        except UpstreamUnavailableError as e:
            e.tx_signature = tx_signature
            blockchain_requests_total.labels(
                operation="getTransaction", outcome="unavailable"
            ).inc()
            logger.error(
                f"getTransaction failed for {tx_signature}: {e.reason}",
                extra={"tx_signature": tx_signature},
            )
            raise
        finally:
            blockchain_request_duration_seconds.labels(
                operation="getTransaction"
            ).observe(time.perf_counter() - start)
            log_performance(logger, "getTransaction", start)

        if "error" in data:
            blockchain_requests_total.labels(
                operation="getTransaction", outcome="rpc_error"
            ).inc()
            logger.error(
                f"getTransaction returned RPC error for {tx_signature}: "
                f"{data['error']}",
                extra={"tx_signature": tx_signature},
            )
            raise UpstreamUnavailableError(
                f"RPC error: {data['error']}", tx_signature=tx_signature
            )

        result = data.get("result")
        if not result or not result.get("meta"):
            blockchain_requests_total.labels(
                operation="getTransaction", outcome="not_found"
            ).inc()
            raise TransactionNotFoundError(tx_signature)

        transaction = parse_transaction(tx_signature, result)
        if transaction.failed:
            blockchain_requests_total.labels(
                operation="getTransaction", outcome="failed_on_chain"
            ).inc()
            raise OnChainFailureError(tx_signature, transaction.error)

        blockchain_requests_total.labels(
            operation="getTransaction", outcome="ok"
        ).inc()
        return transaction

    async def _call_rpc(self, payload: dict) -> dict:
        """
        POST a JSON-RPC payload and decode the response body.

        Raises:
            UpstreamUnavailableError: On any transport-level failure
        """
        session = await self._get_session()

        try:
            async with session.post(self.rpc_url, json=payload) as response:
                if response.status == 429 or response.status >= 500:
                    raise UpstreamUnavailableError(f"HTTP {response.status}")
                data = await response.json(content_type=None)
        except asyncio.TimeoutError:
            raise UpstreamUnavailableError("request timed out")
        except aiohttp.ClientError as e:
            raise UpstreamUnavailableError(f"{type(e).__name__}: {e}")
        except ValueError as e:
            raise UpstreamUnavailableError(f"malformed response: {e}")

        if not isinstance(data, dict):
            raise UpstreamUnavailableError("malformed response: not an object")
        return data

    async def close(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None


def parse_transaction(tx_signature: str, result: dict) -> ParsedTransaction:
    """
    Build a ParsedTransaction from a jsonParsed getTransaction result.

    Args:
        tx_signature: Transaction signature
        result: The ``result`` object of the RPC response

    Returns:
        ParsedTransaction
    """
    meta = result.get("meta") or {}
    message = (result.get("transaction") or {}).get("message") or {}

    account_keys = []
    signers = set()
    for key in message.get("accountKeys") or []:
        if isinstance(key, dict):
            pubkey = key.get("pubkey")
            if key.get("signer") and pubkey:
                signers.add(pubkey)
        else:
            pubkey = key
        if pubkey:
            account_keys.append(pubkey)

    inner_groups = tuple(
        tuple(group.get("instructions") or ())
        for group in meta.get("innerInstructions") or ()
    )

    return ParsedTransaction(
        signature=tx_signature,
        signers=frozenset(signers),
        account_keys=tuple(account_keys),
        instructions=tuple(message.get("instructions") or ()),
        inner_instructions=inner_groups,
        pre_token_balances=_token_balances(meta.get("preTokenBalances")),
        post_token_balances=_token_balances(meta.get("postTokenBalances")),
        error=meta.get("err"),
        slot=result.get("slot"),
        block_time=result.get("blockTime"),
        log_messages=tuple(meta.get("logMessages") or ()),
    )


def _token_balances(entries: Optional[list]) -> tuple:
    """Convert pre/post token balance entries, skipping unreadable ones."""
    balances = []
    for entry in entries or ():
        ui_amount: Any = entry.get("uiTokenAmount") or {}
        raw = ui_amount.get("amount")
        if not isinstance(raw, str) or not (raw.isascii() and raw.isdigit()):
            continue
        balances.append(
            TokenBalance(
                account_index=entry.get("accountIndex"),
                mint=entry.get("mint"),
                owner=entry.get("owner"),
                raw_amount=int(raw),
                decimals=ui_amount.get("decimals"),
            )
        )
    return tuple(balances)
