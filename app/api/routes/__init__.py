from __future__ import annotations

from app.api.routes.faucet import router as faucet_router
from app.api.routes.health import router as health_router
from app.api.routes.ui import router as ui_router

__all__ = ["faucet_router", "health_router", "ui_router"]
