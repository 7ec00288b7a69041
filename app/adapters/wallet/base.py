from __future__ import annotations

from abc import ABC, abstractmethod


class WalletCommandError(RuntimeError):
    """Raised when the wallet backend fails to submit a transfer.

    Attributes:
        exit_code: Process exit status when the backend is an external command.
    """

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class AbstractWalletClient(ABC):
    """Interface for wallets able to send tokens to an address."""

    @abstractmethod
    async def send(self, recipient: str, amount: str) -> str:
        """Send ``amount`` to ``recipient`` and return the raw backend output.

        Args:
            recipient: Already validated destination address.
            amount: Amount including denom (e.g. ``500000000uakt``).

        Returns:
            str: Backend output, expected to contain a ``txhash:`` line.

        Raises:
            WalletCommandError: If the transfer could not be submitted.
        """
        ...
