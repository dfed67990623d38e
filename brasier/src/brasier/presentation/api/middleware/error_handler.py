"""
Global error handling middleware.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from brasier.domain.exceptions import BrasierException
from brasier.domain.value_objects.error_kind import ErrorKind
from brasier.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_CLAIMED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ON_CHAIN_FAILURE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NO_BURN_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AMOUNT_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INSUFFICIENT_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.SIGNER_MISMATCH: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UPSTREAM_UNAVAILABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.STORAGE_UNAVAILABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.MISCONFIGURED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(kind: ErrorKind) -> int:
    """HTTP status for an error kind."""
    return STATUS_CODE_MAP.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_response(status_code: int, error: str, error_kind=None) -> JSONResponse:
    """Build the `{success: false, error, errorKind}` body."""
    content = {"success": False, "error": error}
    if error_kind is not None:
        content["errorKind"] = error_kind.value
    return JSONResponse(status_code=status_code, content=content)


async def brasier_exception_handler(
    request: Request, exc: BrasierException
) -> JSONResponse:
    """
    Handle Brasier domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    if exc.kind is None:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    else:
        status_code = status_code_for(exc.kind)
    return error_response(status_code, exc.public_message, exc.kind)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as invalid input."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part != "body"
        )
        message = f"Invalid {location or 'request'}: {first.get('msg', 'malformed')}"
    else:
        message = "Invalid request"
    return error_response(
        status.HTTP_400_BAD_REQUEST, message, ErrorKind.INVALID_INPUT
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Keep framework errors (unknown route, wrong method) in the API shape."""
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the failure, return no internals."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )
