"""Wallet client that shells out to the ``akash`` CLI."""

from __future__ import annotations

import asyncio
import logging
import os
import shlex
from typing import Mapping

from app.adapters.wallet.base import AbstractWalletClient, WalletCommandError

logger = logging.getLogger(__name__)


class AkashCLIClient(AbstractWalletClient):
    """Send tokens with ``akash tx bank send <sender> <recipient> <amount> --yes``.

    The command is executed as an argument vector (no shell), so the recipient
    is never interpreted by a shell. Chain configuration is passed through the
    process environment, overlaid on the parent environment.
    """

    def __init__(
        self,
        *,
        binary: str,
        sender: str,
        environment: Mapping[str, str],
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize the CLI client.

        Args:
            binary: Executable name or path of the wallet CLI.
            sender: Keyring name of the funding wallet.
            environment: Variables overriding the inherited environment.
            timeout_seconds: Kill the process after this long; None waits forever.
        """
        self.binary = binary
        self.sender = sender
        self.environment = dict(environment)
        self.timeout_seconds = timeout_seconds

    def build_command(self, recipient: str, amount: str) -> list[str]:
        return [self.binary, "tx", "bank", "send", self.sender, recipient, amount, "--yes"]

    def build_environment(self) -> dict[str, str]:
        return {**os.environ, **self.environment}

    async def send(self, recipient: str, amount: str) -> str:
        """Run the transfer command and return its stdout.

        Raises:
            WalletCommandError: If the binary cannot be started, times out,
                exits non-zero, or writes only to stderr.
        """
        command = self.build_command(recipient, amount)
        printable = shlex.join(command)

        logger.info(
            "wallet.command_started",
            extra={"command": printable, "timeout_s": self.timeout_seconds},
        )

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=self.build_environment(),
            )
        except OSError as exc:
            logger.error(
                "wallet.command_failed",
                extra={"command": printable, "reason": "spawn_failed", "error_type": type(exc).__name__},
            )
            raise WalletCommandError(f"Command failed: {printable}\n{exc}") from exc

        try:
            raw_stdout, raw_stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError as exc:
            logger.error(
                "wallet.command_failed",
                extra={"command": printable, "reason": "timeout", "timeout_s": self.timeout_seconds},
            )
            raise WalletCommandError(
                f"Command timed out after {self.timeout_seconds}s: {printable}"
            ) from exc
        finally:
            # Timeout or cancellation: never leave the child running unreaped
            if process.returncode is None:
                try:
                    process.kill()
                except ProcessLookupError:
                    pass
                await process.wait()

        stdout = raw_stdout.decode("utf-8", errors="replace")
        stderr = raw_stderr.decode("utf-8", errors="replace")

        if process.returncode != 0:
            logger.error(
                "wallet.command_failed",
                extra={"command": printable, "reason": "non_zero_exit", "exit_code": process.returncode},
            )
            raise WalletCommandError(
                f"Command failed: {printable}\n{stderr.strip() or stdout.strip()}",
                exit_code=process.returncode,
            )

        # Exit status 0 with diagnostics only on stderr still means nothing was sent
        if stderr.strip() and not stdout.strip():
            logger.error(
                "wallet.command_failed",
                extra={"command": printable, "reason": "stderr_only", "exit_code": 0},
            )
            raise WalletCommandError(stderr.strip(), exit_code=0)

        return stdout
