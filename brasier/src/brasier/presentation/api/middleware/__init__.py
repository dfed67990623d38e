"""
API middleware for Brasier.
"""

from brasier.presentation.api.middleware.error_handler import (
    STATUS_CODE_MAP,
    brasier_exception_handler,
    error_response,
    http_exception_handler,
    status_code_for,
    unhandled_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "STATUS_CODE_MAP",
    "brasier_exception_handler",
    "error_response",
    "http_exception_handler",
    "status_code_for",
    "unhandled_exception_handler",
    "validation_exception_handler",
]
