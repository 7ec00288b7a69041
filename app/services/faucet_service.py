"""Faucet service: validate, rate-limit, send, record.

This is the core business logic behind ``POST /faucet``. For a single address
the sequence check → send → record runs under a per-address lock, so two
concurrent requests for the same address cannot both pass the rate-limit
check. A global semaphore caps how many wallet processes run at once.

The rate-limit record is written only after the wallet reports success; a
failed transfer leaves the address eligible.
"""

from __future__ import annotations

import asyncio
import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Callable

from app.adapters.rate_limit.base import AbstractRateLimiter
from app.adapters.wallet.base import AbstractWalletClient, WalletCommandError
from app.core.address_validation import validate_address
from app.core.config import FaucetSettings, settings
from app.core.errors import RateLimitedError, TransactionFailedError
from app.utils.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)

TXHASH_PATTERN = re.compile(r"txhash:\s*([A-F0-9]+)", re.IGNORECASE)
UNKNOWN_TXHASH = "unknown"


@dataclass(frozen=True)
class DispenseResult:
    """Successful dispense, as reported to the caller."""

    txhash: str
    amount: str
    message: str


def extract_txhash(output: str) -> str:
    """Return the first ``txhash:`` value in ``output``, or ``"unknown"``.

    Examples:
        >>> extract_txhash("code: 0\\ntxhash: 9F3A\\n")
        '9F3A'
        >>> extract_txhash("gas estimate: 91234")
        'unknown'
    """
    match = TXHASH_PATTERN.search(output)
    return match.group(1) if match else UNKNOWN_TXHASH


def truncate_detail(text: str, max_chars: int) -> str:
    return text[:max_chars]


def describe_window(seconds: float) -> str:
    """Human-readable window length used in the rate-limit message."""
    if seconds % 3600 == 0:
        hours = int(seconds // 3600)
        return f"{hours} hour" if hours == 1 else f"{hours} hours"
    return f"{int(seconds)} seconds"


class FaucetService:
    """Dispense a fixed amount of tokens to an address at most once per window."""

    def __init__(
        self,
        *,
        wallet: AbstractWalletClient,
        rate_limiter: AbstractRateLimiter,
        config: FaucetSettings | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the service.

        Args:
            wallet: Client that performs the transfer.
            rate_limiter: Store of last successful dispenses, owned by this service.
            config: Dispense policy; defaults to ``settings.faucet``.
            clock: Time source returning UNIX seconds, shared with the limiter in tests.
        """
        self.wallet = wallet
        self.rate_limiter = rate_limiter
        self.config = config or settings.faucet
        self._clock = clock
        self._address_locks = KeyedLock()
        self._slots = asyncio.Semaphore(self.config.max_concurrent_dispenses)

    @property
    def success_message(self) -> str:
        return f"{self.config.amount_display} sent successfully!"

    @property
    def rate_limited_message(self) -> str:
        return f"Please wait {describe_window(self.config.rate_limit_window_seconds)} between requests"

    async def dispense(self, address: Any) -> DispenseResult:
        """Send the configured amount to ``address``.

        Args:
            address: Recipient as received from the client (validated here).

        Returns:
            DispenseResult with the parsed transaction hash.

        Raises:
            InvalidAddressError: Address missing or malformed; nothing else is touched.
            RateLimitedError: Address already served within the window.
            TransactionFailedError: Wallet failed; the window is not consumed.
        """
        address = validate_address(
            address,
            prefix=self.config.address_prefix,
            min_length=self.config.address_min_length,
            max_length=self.config.address_max_length,
        )

        async with self._address_locks.hold(address):
            now = self._clock()
            decision = self.rate_limiter.check(address, now)
            if not decision.allowed:
                logger.warning(
                    "faucet.rate_limited",
                    extra={
                        "address": address,
                        "retry_after_s": decision.retry_after_seconds,
                    },
                )
                raise RateLimitedError(
                    code="rate_limited",
                    message=self.rate_limited_message,
                    details={"retry_after": decision.retry_after_seconds or 0},
                    retry_at=decision.retry_at,
                )

            logger.info(
                "faucet.dispense_requested",
                extra={"address": address, "amount": self.config.amount},
            )

            try:
                async with self._slots:
                    output = await self.wallet.send(address, self.config.amount)
            except WalletCommandError as exc:
                detail = truncate_detail(str(exc), self.config.error_detail_max_chars)
                logger.error(
                    "faucet.dispense_failed",
                    extra={
                        "address": address,
                        "exit_code": exc.exit_code,
                        "error_detail": detail,
                    },
                )
                raise TransactionFailedError(
                    code="transaction_failed",
                    message="Transaction failed",
                    details={"address": address},
                    error_detail=detail,
                ) from exc

            self.rate_limiter.record(address, now)

        txhash = extract_txhash(output)
        logger.info(
            "faucet.dispense_succeeded",
            extra={"address": address, "amount": self.config.amount, "txhash": txhash},
        )
        return DispenseResult(
            txhash=txhash,
            amount=self.config.amount,
            message=self.success_message,
        )
