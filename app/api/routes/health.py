from __future__ import annotations

from fastapi import APIRouter

from app.schemas.faucet import HealthResponse
from app.utils.timefmt import isoformat_utc, utc_now

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint.

    Used by load balancers and monitoring systems to determine service health.

    Returns:
        HealthResponse: ``{"status": "healthy", "timestamp": <ISO-8601>}``.
    """

    return HealthResponse(status="healthy", timestamp=isoformat_utc(utc_now()))
