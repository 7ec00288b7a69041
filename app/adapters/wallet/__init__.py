from app.adapters.wallet.akash_cli import AkashCLIClient
from app.adapters.wallet.base import AbstractWalletClient, WalletCommandError
from app.adapters.wallet.factory import create_wallet_client

__all__ = ["AbstractWalletClient", "AkashCLIClient", "WalletCommandError", "create_wallet_client"]
