"""Pydantic schemas for the faucet and health endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FaucetRequest(BaseModel):
    """Body of ``POST /faucet``.

    ``address`` is optional at the schema level so a missing value reaches the
    service and gets the same 400 response as a malformed one.
    """

    address: str | None = Field(
        default=None,
        description="Recipient address (e.g. 'akash1...').",
    )


class FaucetResponse(BaseModel):
    """Successful dispense."""

    success: bool = Field(True, description="Always true for a 200 response.")
    txhash: str = Field(
        ..., description="Transaction hash reported by the wallet CLI, or 'unknown'."
    )
    amount: str = Field(..., description="Amount sent, including denom.")
    message: str = Field(..., description="Human-readable confirmation.")


class ErrorResponse(BaseModel):
    """Invalid address (400) or unexpected server error."""

    error: str


class RateLimitedResponse(BaseModel):
    """Address already served inside the rate-limit window (429)."""

    model_config = ConfigDict(populate_by_name=True)

    error: str
    next_request: str = Field(
        ...,
        alias="nextRequest",
        description="ISO-8601 UTC instant from which the address is eligible again.",
    )


class TransactionFailedResponse(BaseModel):
    """Wallet CLI failure (500)."""

    error: str
    details: str = Field(..., description="Failure output, truncated.")


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: str
