"""Global exception handlers for consistent error responses.

This module maps the faucet's domain errors onto HTTP responses so routes can
simply let them propagate.

Design:
- InvalidAddressError / request validation errors → 400 ``{"error"}``
- RateLimitedError → 429 ``{"error", "nextRequest"}`` plus Retry-After
- TransactionFailedError → 500 ``{"error", "details"}``
- Unexpected Exception → generic 500 (safety net, no internals leaked)
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.address_validation import invalid_address_error
from app.core.errors import AppError, InvalidAddressError, RateLimitedError, TransactionFailedError
from app.core.logging import get_request_id
from app.utils.timefmt import isoformat_utc

logger = logging.getLogger(__name__)


def _status_for(exc: AppError) -> int:
    if isinstance(exc, RateLimitedError):
        return 429
    if isinstance(exc, TransactionFailedError):
        return 500
    if isinstance(exc, InvalidAddressError):
        return 400
    # Other AppErrors are configuration/wiring problems, not client faults
    return 500


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle domain application errors.

    Args:
        request: FastAPI request object.
        exc: AppError instance (or subclass).

    Returns:
        JSONResponse with the status code and body shape of the error kind.
    """
    status_code = _status_for(exc)

    logger.warning(
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "error_message": exc.message,
            "status_code": status_code,
            "has_details": bool(exc.details),
            "request_id": get_request_id(),
        },
    )

    content: dict[str, object] = {"error": exc.message}
    headers: dict[str, str] = {}

    if isinstance(exc, RateLimitedError):
        if exc.retry_at is not None:
            content["nextRequest"] = isoformat_utc(exc.retry_at)
        retry_after = (exc.details or {}).get("retry_after")
        if retry_after is not None:
            headers["Retry-After"] = str(retry_after)
    elif isinstance(exc, TransactionFailedError):
        content["details"] = exc.error_detail

    return JSONResponse(status_code=status_code, content=content, headers=headers or None)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Treat unparseable bodies the same as a missing address."""
    logger.info(
        "request_validation_failed",
        extra={
            "request_path": request.url.path,
            "error_count": len(exc.errors()),
        },
    )
    return await app_error_handler(request, invalid_address_error("unparseable_body"))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unexpected errors (safety net).

    Logs detailed information for debugging while returning a generic message.

    Args:
        request: FastAPI request object.
        exc: Exception instance (unexpected).

    Returns:
        JSONResponse with a generic error.
    """
    logger.error(
        "unhandled_exception",
        extra={
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
            "request_path": request.url.path,
            "request_method": request.method,
            "request_id": get_request_id(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred. Please try again later."},
    )


def setup_exception_handlers(app) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.exception_handler(AppError)(app_error_handler)
    app.exception_handler(RequestValidationError)(request_validation_handler)
    app.exception_handler(Exception)(general_exception_handler)
