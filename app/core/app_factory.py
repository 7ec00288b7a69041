from __future__ import annotations

"""Application factory for the faucet FastAPI app.

Centralizes app construction (metadata, middleware, handlers, routers and the
faucet service) so tests can build isolated apps with their own wallet and
rate-limit state.
"""

import logging

from fastapi import FastAPI

from app.adapters.rate_limit.in_memory import InMemoryAddressRateLimiter
from app.adapters.wallet.factory import create_wallet_client
from app.api.routes import faucet_router, health_router, ui_router
from app.core.config import settings
from app.core.exception_handlers import setup_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import request_id_middleware
from app.core.openapi import apply_openapi_customizations
from app.services.faucet_service import FaucetService

logger = logging.getLogger(__name__)


def build_faucet_service() -> FaucetService:
    """Wire the faucet service from global settings."""
    return FaucetService(
        wallet=create_wallet_client(settings.faucet, settings.chain),
        rate_limiter=InMemoryAddressRateLimiter(
            window_seconds=settings.faucet.rate_limit_window_seconds,
        ),
        config=settings.faucet,
    )


def create_app(faucet_service: FaucetService | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Args:
        faucet_service: Pre-built service (tests inject fakes here); built
            from settings when omitted.

    Returns:
        Configured FastAPI app with middleware, handlers and routers.
    """
    # Logging first so subsequent init logs are formatted as desired
    configure_logging(settings.log)

    app = FastAPI(
        title="Akash Testnet Faucet",
        description=(
            f"Sends {settings.faucet.amount_display} on chain {settings.chain.chain_id} "
            "to an address, at most once per address per rate-limit window."
        ),
        version="0.1.0",
        debug=settings.app.debug,
    )

    app.state.faucet_service = faucet_service or build_faucet_service()

    # Middleware
    app.middleware("http")(request_id_middleware)

    # Exception handlers
    setup_exception_handlers(app)

    # Routers
    app.include_router(faucet_router)
    app.include_router(health_router)
    app.include_router(ui_router)

    apply_openapi_customizations(app)

    logger.info(
        "app.created",
        extra={
            "app_env": settings.app_env,
            "chain_id": settings.chain.chain_id,
            "node": settings.chain.node,
            "amount": settings.faucet.amount,
        },
    )

    return app
