"""Application-level exception types.

This module defines the faucet's error taxonomy. Each error maps to one HTTP
status in ``app.core.exception_handlers``; none of them is fatal to the
service process.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, NotRequired, TypedDict


class ErrorDetails(TypedDict, total=False):
    """Structured error context for observability.

    Fields are optional; only what is known at raise time is filled in.
    """

    code: str
    message: str
    hint: str
    address: str
    exit_code: int
    retry_after: int
    request_id: str
    context: NotRequired[dict[str, Any]]


@dataclass
class AppError(Exception):
    """Base error for application/domain failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message.
        details: Optional structured details for debugging/observability.
    """

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        # Populate Exception args so str(error) is useful in logs/tracebacks.
        super().__init__(self.message)


class InvalidAddressError(AppError):
    """Raised when the recipient address is missing or malformed."""


@dataclass
class RateLimitedError(AppError):
    """Raised when the address already received tokens inside the window.

    Attributes:
        retry_at: UTC instant from which the address is eligible again.
    """

    retry_at: datetime | None = None


@dataclass
class TransactionFailedError(AppError):
    """Raised when the wallet CLI fails to send the transaction.

    Attributes:
        error_detail: Failure output, already truncated for client exposure.
    """

    error_detail: str = ""
