"""
Token instruction variants decoded from jsonParsed RPC output.

Raw instruction dicts are decoded exactly once, at the edge, into one of
BurnInstruction, BurnCheckedInstruction or OtherInstruction. Business
logic only ever matches on these types.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

SPL_TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
SPL_TOKEN_2022_PROGRAM_ID = "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"
TOKEN_PROGRAM_IDS = frozenset({SPL_TOKEN_PROGRAM_ID, SPL_TOKEN_2022_PROGRAM_ID})

# jsonParsed reports both token programs under this name
SPL_TOKEN_PROGRAM_NAME = "spl-token"


class MalformedInstructionError(ValueError):
    """Raised when a token burn instruction carries unusable amount data."""


@dataclass(frozen=True)
class ParsedBurnEvent:
    """A single burn of `raw_amount` base units of `mint`."""

    mint: Optional[str]
    raw_amount: int
    decimals: Optional[int]


@dataclass(frozen=True)
class BurnInstruction:
    """SPL token `burn` (no decimals carried by the instruction)."""

    kind = "burn"

    mint: Optional[str]
    raw_amount: int
    decimals: Optional[int] = None
    account: Optional[str] = None
    authority: Optional[str] = None

    def to_event(self) -> ParsedBurnEvent:
        return ParsedBurnEvent(
            mint=self.mint,
            raw_amount=self.raw_amount,
            decimals=self.decimals,
        )


@dataclass(frozen=True)
class BurnCheckedInstruction(BurnInstruction):
    """SPL token `burnChecked`, which asserts the mint decimals."""

    kind = "burnChecked"


@dataclass(frozen=True)
class OtherInstruction:
    """Any instruction that is not a token burn."""

    program: Optional[str] = None
    instruction_type: Optional[str] = None


Instruction = Union[BurnInstruction, BurnCheckedInstruction, OtherInstruction]


def is_token_program(raw: Mapping[str, Any]) -> bool:
    """Check whether an instruction targets the SPL Token or Token-2022 program."""
    return (
        raw.get("program") == SPL_TOKEN_PROGRAM_NAME
        or raw.get("programId") in TOKEN_PROGRAM_IDS
    )


def instruction_mint(raw: Mapping[str, Any]) -> Optional[str]:
    """Mint named by a jsonParsed instruction, read without decoding amounts."""
    parsed = raw.get("parsed")
    if not isinstance(parsed, Mapping):
        return None
    info = parsed.get("info")
    if not isinstance(info, Mapping):
        return None
    return info.get("mint")


def _parse_raw_amount(value: Any) -> int:
    # bool is an int subclass; floats lose precision
    if isinstance(value, bool) or value is None or isinstance(value, float):
        raise MalformedInstructionError(f"Unusable burn amount: {value!r}")
    if isinstance(value, int):
        amount = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        amount = int(value)
    else:
        raise MalformedInstructionError(f"Unusable burn amount: {value!r}")
    if amount < 0:
        raise MalformedInstructionError(f"Negative burn amount: {amount}")
    return amount


def _parse_decimals(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedInstructionError(f"Unusable decimals: {value!r}")
    return value


def decode_instruction(raw: Mapping[str, Any]) -> Instruction:
    """
    Decode one jsonParsed instruction into an Instruction variant.

    Args:
        raw: Instruction object from `getTransaction` (jsonParsed encoding)

    Returns:
        BurnInstruction, BurnCheckedInstruction or OtherInstruction

    Raises:
        MalformedInstructionError: If a token burn has unusable amount data
    """
    parsed = raw.get("parsed")
    program = raw.get("program") or raw.get("programId")

    if not isinstance(parsed, Mapping):
        return OtherInstruction(program=program)

    instruction_type = parsed.get("type")
    if not is_token_program(raw) or instruction_type not in ("burn", "burnChecked"):
        return OtherInstruction(program=program, instruction_type=instruction_type)

    info = parsed.get("info") or {}
    authority = info.get("authority") or info.get("multisigAuthority")

    if instruction_type == "burn":
        return BurnInstruction(
            mint=info.get("mint"),
            raw_amount=_parse_raw_amount(info.get("amount")),
            account=info.get("account"),
            authority=authority,
        )

    token_amount = info.get("tokenAmount") or {}
    return BurnCheckedInstruction(
        mint=info.get("mint"),
        raw_amount=_parse_raw_amount(token_amount.get("amount", info.get("amount"))),
        decimals=_parse_decimals(token_amount.get("decimals", info.get("decimals"))),
        account=info.get("account"),
        authority=authority,
    )
