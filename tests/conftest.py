"""Pytest configuration and fixtures shared across all test modules.

This file is automatically loaded by pytest before running any tests.
Environment variables are set here, before any import of ``app`` builds the
global settings object.
"""

import os
from unittest.mock import Mock

# CRITICAL: Set this before any imports that might load settings
os.environ["APP_ENV"] = "testing"
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("FAUCET_CLI_BINARY", "akash")
os.environ.setdefault("FAUCET_SENDER", "faucet-wallet")

import pytest

from app.adapters.rate_limit.in_memory import InMemoryAddressRateLimiter
from app.adapters.wallet.base import AbstractWalletClient
from app.core.config import FaucetSettings
from app.services.faucet_service import FaucetService

# 2023-11-14T22:13:20Z
FIXED_NOW = 1_700_000_000.0
DAY = 24 * 60 * 60

VALID_ADDRESS = "akash1" + "q" * 38
OTHER_ADDRESS = "akash1" + "z" * 38


class FakeWallet(AbstractWalletClient):
    """Wallet double recording every send and replaying a canned outcome."""

    def __init__(self, output: str = "code: 0\ntxhash: ABC123\n", error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def send(self, recipient: str, amount: str) -> str:
        self.calls.append((recipient, amount))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def clock() -> Mock:
    return Mock(return_value=FIXED_NOW)


@pytest.fixture
def wallet() -> FakeWallet:
    return FakeWallet()


@pytest.fixture
def rate_limiter(clock: Mock) -> InMemoryAddressRateLimiter:
    return InMemoryAddressRateLimiter(window_seconds=DAY, clock=clock)


@pytest.fixture
def faucet_config() -> FaucetSettings:
    return FaucetSettings()


@pytest.fixture
def faucet_service(
    wallet: FakeWallet,
    rate_limiter: InMemoryAddressRateLimiter,
    faucet_config: FaucetSettings,
    clock: Mock,
) -> FaucetService:
    return FaucetService(
        wallet=wallet,
        rate_limiter=rate_limiter,
        config=faucet_config,
        clock=clock,
    )
