"""
Domain value objects.
"""

from brasier.domain.value_objects.error_kind import ErrorKind
from brasier.domain.value_objects.instruction import (
    BurnCheckedInstruction,
    BurnInstruction,
    Instruction,
    MalformedInstructionError,
    OtherInstruction,
    ParsedBurnEvent,
    decode_instruction,
)
from brasier.domain.value_objects.tx_signature import TransactionSignature
from brasier.domain.value_objects.verification import (
    VerificationRequest,
    VerificationResult,
    VerificationState,
)
from brasier.domain.value_objects.wallet_address import WalletAddress

__all__ = [
    "ErrorKind",
    "BurnInstruction",
    "BurnCheckedInstruction",
    "OtherInstruction",
    "Instruction",
    "MalformedInstructionError",
    "ParsedBurnEvent",
    "decode_instruction",
    "TransactionSignature",
    "VerificationRequest",
    "VerificationResult",
    "VerificationState",
    "WalletAddress",
]
