"""
Verify Burn use case.

Validates a token burn transaction against the ledger and records it as
redeemed, at most once per signature.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from brasier.domain.exceptions import (
    AlreadyClaimedError,
    AmountMismatchError,
    BrasierException,
    InvalidInputError,
    MisconfiguredError,
    NoBurnFoundError,
    SignerMismatchError,
)
from brasier.domain.services.amount_policy import AmountPolicy, check_amount
from brasier.domain.services.burn_extractor import balance_decrease, extract_burns
from brasier.domain.services.i_chain_reader import IChainReader, ParsedTransaction
from brasier.domain.services.i_claim_ledger import IClaimLedger
from brasier.domain.services.reward_policy import RewardPolicy
from brasier.domain.value_objects.error_kind import ErrorKind
from brasier.domain.value_objects.tx_signature import TransactionSignature
from brasier.domain.value_objects.verification import (
    VerificationRequest,
    VerificationResult,
    VerificationState,
)
from brasier.domain.value_objects.wallet_address import WalletAddress
from brasier.infrastructure.monitoring.logger import get_logger
from brasier.infrastructure.monitoring.metrics import verifications_total

logger = get_logger(__name__)

# Failures of the service itself rather than of the submitted burn
_SERVER_SIDE_KINDS = frozenset(
    {
        ErrorKind.UPSTREAM_UNAVAILABLE,
        ErrorKind.STORAGE_UNAVAILABLE,
        ErrorKind.MISCONFIGURED,
    }
)


class VerifyBurn:
    """
    Verify a burn transaction and record the claim.

    Business rules:
    - Signature and wallet must be well-formed before any chain call
    - A signature already in the claim ledger is rejected before fetching
    - The transaction must exist and must not have failed on-chain
    - The wallet must be one of the transaction's signers
    - Only burns of the configured mint count, decimals must match
    - The burned total must satisfy the amount policy
    - The claim is recorded before success is reported; losing a
      concurrent insert is AlreadyClaimed

    Every outcome is returned as a VerificationResult; domain errors do
    not escape execute(). Instances hold no per-request state.
    """

    def __init__(
        self,
        chain_reader: IChainReader,
        claim_ledger: IClaimLedger,
        target_mint: Optional[str],
        token_decimals: int = 9,
        amount_policy: AmountPolicy = AmountPolicy.MINIMUM,
        reward_policy: Optional[RewardPolicy] = None,
        require_balance_corroboration: bool = False,
        commitment: Optional[str] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            chain_reader: Reader for parsed ledger transactions
            claim_ledger: Registry of redeemed signatures
            target_mint: Mint whose burns are redeemable (None if unset)
            token_decimals: Configured decimals of the mint
            amount_policy: Comparison against the required amount
            reward_policy: Reward computation (default rate if omitted)
            require_balance_corroboration: Reject burns not matched by
                the wallet's token balance decrease
            commitment: Commitment level for chain reads
        """
        self.chain_reader = chain_reader
        self.claim_ledger = claim_ledger
        self.target_mint = target_mint
        self.token_decimals = token_decimals
        self.amount_policy = amount_policy
        self.reward_policy = reward_policy or RewardPolicy()
        self.require_balance_corroboration = require_balance_corroboration
        self.commitment = commitment

    async def execute(
        self,
        request: VerificationRequest,
        amount_required: bool = False,
    ) -> VerificationResult:
        """
        Run the verification pipeline for one request.

        Args:
            request: Signature, wallet and optional required amount
            amount_required: Treat a missing required amount as invalid
                input (unlock flow)

        Returns:
            Completed or rejected VerificationResult
        """
        reached = [VerificationState.RECEIVED]
        try:
            result = await self._verify(request, amount_required, reached)
        except BrasierException as e:
            return self._reject(request, e, reached[-1])

        verifications_total.labels(outcome="completed").inc()
        return result

    async def _verify(
        self,
        request: VerificationRequest,
        amount_required: bool,
        reached: list,
    ) -> VerificationResult:
        self._check_configuration()

        signature, wallet, required = self._validate(request, amount_required)
        self._enter(reached, VerificationState.SIGNATURE_VALIDATED, signature)

        if await self.claim_ledger.has_claim(signature):
            raise AlreadyClaimedError(signature)
        self._enter(reached, VerificationState.REPLAY_CHECKED, signature)

        transaction = await self.chain_reader.fetch_transaction(
            signature, self.commitment
        )
        self._enter(reached, VerificationState.CHAIN_FETCHED, signature)

        if not transaction.is_signed_by(wallet):
            raise SignerMismatchError(wallet)
        self._enter(reached, VerificationState.SIGNER_VERIFIED, signature)

        extraction = extract_burns(transaction, self.target_mint, self.token_decimals)
        if extraction.other_mint_events:
            logger.info(
                f"Ignoring {extraction.other_mint_events} burn(s) of other mints "
                f"in {signature}",
                extra={"tx_signature": signature},
            )
        if not extraction.found:
            raise NoBurnFoundError(self.target_mint)
        self._corroborate(transaction, wallet, extraction.raw_total)
        self._enter(reached, VerificationState.BURN_EXTRACTED, signature)

        amount_burned = extraction.amount
        check_amount(amount_burned, required, self.amount_policy)
        self._enter(reached, VerificationState.AMOUNT_ACCEPTED, signature)

        await self.claim_ledger.record_claim(signature, wallet, amount_burned)
        self._enter(reached, VerificationState.RECORDED, signature)

        reward = self.reward_policy.reward(amount_burned)
        self._enter(reached, VerificationState.COMPLETED, signature)
        logger.info(
            f"Burn verified: {signature} burned {amount_burned}, reward {reward}",
            extra={"tx_signature": signature, "wallet_address": wallet},
        )
        return VerificationResult.completed(signature, amount_burned, reward)

    @staticmethod
    def _enter(reached: list, state: VerificationState, signature: str) -> None:
        reached.append(state)
        logger.debug(
            f"Verification of {signature} entered {state.value}",
            extra={"tx_signature": signature, "state": state.value},
        )

    def _check_configuration(self) -> None:
        if not self.target_mint:
            raise MisconfiguredError("TOKEN_MINT_ADDRESS")
        try:
            WalletAddress(self.target_mint)
        except ValueError:
            raise MisconfiguredError("TOKEN_MINT_ADDRESS", "is not a valid address")

    @staticmethod
    def _validate(
        request: VerificationRequest, amount_required: bool
    ) -> tuple[str, str, Optional[Decimal]]:
        """
        Validate request fields.

        Raises:
            InvalidInputError: On any missing or malformed field
        """
        if not request.signature:
            raise InvalidInputError("signature", "is required")
        if not request.wallet_address:
            raise InvalidInputError("userWallet", "is required")

        try:
            TransactionSignature(request.signature)
        except ValueError as e:
            raise InvalidInputError("signature", str(e))

        try:
            WalletAddress(request.wallet_address)
        except ValueError as e:
            raise InvalidInputError("userWallet", str(e))

        required = request.required_amount
        if required is None:
            if amount_required:
                raise InvalidInputError("amount", "is required")
            return request.signature, request.wallet_address, None

        try:
            required = Decimal(required)
        except (InvalidOperation, TypeError, ValueError):
            raise InvalidInputError("amount", "must be a number")
        if not required.is_finite() or required <= 0:
            raise InvalidInputError("amount", "must be a positive number")

        return request.signature, request.wallet_address, required

    def _corroborate(
        self, transaction: ParsedTransaction, wallet: str, raw_total: int
    ) -> None:
        """
        Compare the instruction total with the wallet's balance decrease.

        Raises:
            AmountMismatchError: If corroboration is required and the
                balance decreased by less than the burned total
        """
        decrease = balance_decrease(transaction, wallet, self.target_mint)
        if decrease >= raw_total:
            return

        if self.require_balance_corroboration:
            raise AmountMismatchError(
                "Burned amount is not reflected in the wallet's token balance"
            )
        logger.warning(
            f"Balance decrease {decrease} is below burned total {raw_total} "
            f"for {transaction.signature}",
            extra={"tx_signature": transaction.signature},
        )

    @staticmethod
    def _reject(
        request: VerificationRequest,
        error: BrasierException,
        state: VerificationState,
    ) -> VerificationResult:
        kind = error.kind
        verifications_total.labels(outcome=kind.value).inc()

        extra = {
            "tx_signature": request.signature,
            "error_kind": kind.value,
            "retryable": kind.retryable,
        }
        if kind in _SERVER_SIDE_KINDS:
            logger.error(
                f"Verification of {request.signature} failed after "
                f"{state.value}: {error.message}",
                extra=extra,
            )
        else:
            logger.info(
                f"Verification of {request.signature} rejected after "
                f"{state.value}: {error.message}",
                extra=extra,
            )

        return VerificationResult.rejected(
            signature=request.signature,
            error_kind=kind,
            message=error.public_message,
            rejected_at=state,
        )
