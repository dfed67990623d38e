"""
Burn extraction from parsed transactions.

Instruction-based extraction is authoritative: only burn/burnChecked
instructions of the target mint count, from top-level and inner
instructions alike. Token balance deltas are computed separately and
only ever used to corroborate the instruction total.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from brasier.domain.exceptions import AmountMismatchError
from brasier.domain.services.i_chain_reader import ParsedTransaction
from brasier.domain.value_objects.instruction import (
    BurnInstruction,
    Instruction,
    MalformedInstructionError,
    ParsedBurnEvent,
    decode_instruction,
    instruction_mint,
)


def to_ui_amount(raw_amount: int, decimals: int) -> Decimal:
    """
    Convert base units to token units without binary floating point.

    Example: to_ui_amount(1234567890, 9) == Decimal("1.23456789")
    """
    return Decimal(raw_amount).scaleb(-decimals)


@dataclass(frozen=True)
class BurnExtraction:
    """Burns of one mint found in a single transaction."""

    mint: str
    decimals: int
    events: tuple
    raw_total: int
    other_mint_events: int = 0

    @property
    def found(self) -> bool:
        return self.raw_total > 0

    @property
    def amount(self) -> Decimal:
        return to_ui_amount(self.raw_total, self.decimals)


def decode_for_mint(
    transaction: ParsedTransaction, target_mint: str
) -> Iterator[Instruction]:
    """
    Decode every top-level and inner instruction of a transaction.

    A burn of another mint whose amounts cannot be read is skipped; it
    can never count toward the target mint.

    Raises:
        AmountMismatchError: If a burn of `target_mint` carries unusable
            amounts
    """
    for raw in transaction.iter_instructions():
        try:
            yield decode_instruction(raw)
        except MalformedInstructionError as e:
            if instruction_mint(raw) != target_mint:
                continue
            raise AmountMismatchError(f"Malformed burn instruction: {e}") from e


def extract_burns(
    transaction: ParsedTransaction,
    target_mint: str,
    expected_decimals: int,
) -> BurnExtraction:
    """
    Sum the burns of `target_mint` in a transaction (instruction-based).

    Args:
        transaction: Parsed transaction from the chain reader
        target_mint: Configured token mint address
        expected_decimals: Configured decimals of the mint (authoritative)

    Returns:
        BurnExtraction (raw_total is 0 when nothing matched)

    Raises:
        AmountMismatchError: If a matching burn reports different decimals,
            or a burn instruction is malformed
    """
    matched: list[ParsedBurnEvent] = []
    other_mint_events = 0

    for instruction in decode_for_mint(transaction, target_mint):
        if not isinstance(instruction, BurnInstruction):
            continue

        if instruction.mint != target_mint:
            other_mint_events += 1
            continue

        if (
            instruction.decimals is not None
            and instruction.decimals != expected_decimals
        ):
            raise AmountMismatchError(
                f"Burn decimals {instruction.decimals} do not match "
                f"configured decimals {expected_decimals}"
            )

        matched.append(instruction.to_event())

    return BurnExtraction(
        mint=target_mint,
        decimals=expected_decimals,
        events=tuple(matched),
        raw_total=sum(event.raw_amount for event in matched),
        other_mint_events=other_mint_events,
    )


def balance_decrease(
    transaction: ParsedTransaction,
    owner: str,
    target_mint: str,
) -> int:
    """
    Sum positive balance decreases of the owner's accounts for a mint.

    Computed per account index as `pre - post`. A decrease can also come
    from a transfer out, so this is a secondary signal only.

    Returns:
        Total decrease in base units (0 when nothing decreased)
    """

    def _by_index(balances) -> dict[int, int]:
        return {
            b.account_index: b.raw_amount
            for b in balances
            if b.owner == owner and b.mint == target_mint
        }

    pre = _by_index(transaction.pre_token_balances)
    post = _by_index(transaction.post_token_balances)

    total = 0
    for index, pre_amount in pre.items():
        # A missing post balance means the account was closed
        delta = pre_amount - post.get(index, 0)
        if delta > 0:
            total += delta
    return total
