"""API dependencies."""

from __future__ import annotations

from fastapi import Request

from app.services.faucet_service import FaucetService


def get_faucet_service(request: Request) -> FaucetService:
    return request.app.state.faucet_service
