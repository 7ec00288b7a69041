"""Factory for the wallet client used by the faucet."""

from app.adapters.wallet.akash_cli import AkashCLIClient
from app.adapters.wallet.base import AbstractWalletClient
from app.core.config import ChainSettings, FaucetSettings, settings
from app.core.errors import AppError


def create_wallet_client(
    faucet_settings: FaucetSettings | None = None,
    chain_settings: ChainSettings | None = None,
) -> AbstractWalletClient:
    """Build the CLI-backed wallet client from configuration.

    Args:
        faucet_settings: Dispense settings; defaults to ``settings.faucet``.
        chain_settings: Chain settings; defaults to ``settings.chain``.

    Returns:
        AbstractWalletClient: Configured wallet client.

    Raises:
        AppError: If the binary or sender is not configured.
    """
    faucet_cfg = faucet_settings or settings.faucet
    chain_cfg = chain_settings or settings.chain

    if not faucet_cfg.cli_binary.strip():
        raise AppError(
            code="wallet_missing_binary",
            message="FAUCET_CLI_BINARY must name the wallet executable",
        )
    if not faucet_cfg.sender.strip():
        raise AppError(
            code="wallet_missing_sender",
            message="FAUCET_SENDER must name the funding wallet",
        )

    return AkashCLIClient(
        binary=faucet_cfg.cli_binary,
        sender=faucet_cfg.sender,
        environment=chain_cfg.as_environment(),
        timeout_seconds=faucet_cfg.command_timeout_seconds,
    )
