"""
Base domain exceptions.
"""

from typing import Optional

from brasier.domain.value_objects.error_kind import ErrorKind


class BrasierException(Exception):
    """Base exception for all Brasier domain errors."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or (self.kind.value if self.kind else self.__class__.__name__)
        super().__init__(self.message)

    @property
    def public_message(self) -> str:
        """Text safe to return to API callers."""
        return self.message


class InvalidInputError(BrasierException):
    """Raised when a request is missing fields or is malformed."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


class MisconfiguredError(BrasierException):
    """Raised when the service lacks configuration required to verify burns."""

    kind = ErrorKind.MISCONFIGURED

    def __init__(self, setting: str, reason: str = "not set"):
        super().__init__(f"Server misconfigured: {setting} {reason}")
        self.setting = setting

    @property
    def public_message(self) -> str:
        return "Server misconfigured"
