"""Application configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Determine which environment to load (default: development)
APP_ENV = os.getenv("APP_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Map environments to their respective .env files (relative to PROJECT_ROOT)
ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

# Select the .env file for the current environment
_env_filename = ENV_FILE_MAP.get(APP_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Only load from file if it exists (production might inject via env vars only)
_env_file = str(_env_path) if _env_path.is_file() else None


# Load .env file early to populate os.environ before creating nested settings
# This is necessary because Pydantic nested BaseSettings don't inherit env_file
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


class AppSettings(BaseSettings):
    """Application-wide configuration."""

    debug: bool = Field(
        False,
        description="Enable debug mode with verbose logging",
    )
    host: str = Field(
        "0.0.0.0",
        description="Interface the HTTP server binds to",
    )
    port: int = Field(
        3000,
        description="Port the HTTP server listens on",
        ge=1,
        le=65535,
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
    )


class FaucetSettings(BaseSettings):
    """Dispense policy: what is sent, to whom, and how often."""

    address_prefix: str = Field(
        "akash1",
        description="Literal prefix every recipient address must start with",
    )
    address_min_length: int = Field(
        40,
        description="Minimum accepted address length in characters",
        ge=1,
    )
    address_max_length: int = Field(
        90,
        description="Maximum accepted address length in characters (bech32 limit)",
        ge=1,
    )
    cli_binary: str = Field(
        "akash",
        description="Wallet CLI executable (name on PATH or absolute path)",
    )
    sender: str = Field(
        "faucet-wallet",
        description="Keyring name of the wallet tokens are sent from",
    )
    amount: str = Field(
        "500000000uakt",
        description="Amount (with denom) sent per dispense",
    )
    amount_display: str = Field(
        "500 AKT",
        description="Human-readable amount used in success messages",
    )
    rate_limit_window_seconds: int = Field(
        24 * 60 * 60,
        description="Minimum time between two successful dispenses to one address",
        ge=1,
    )
    error_detail_max_chars: int = Field(
        200,
        description="Maximum length of transaction failure details returned to clients",
        ge=0,
    )
    max_concurrent_dispenses: int = Field(
        4,
        description="Maximum number of wallet CLI processes running at once",
        ge=1,
    )
    command_timeout_seconds: float | None = Field(
        None,
        description="Kill the wallet CLI after this many seconds (unset waits indefinitely)",
        gt=0,
    )

    model_config = SettingsConfigDict(
        env_prefix="FAUCET_",
        case_sensitive=False,
    )


class ChainSettings(BaseSettings):
    """Chain/network configuration handed to the wallet CLI via its environment."""

    cli_env_prefix: str = Field(
        "AKASH",
        description="Prefix of the environment variables understood by the wallet CLI",
    )
    keyring_backend: str = Field("test", description="Keyring backend")
    gas: str = Field("auto", description="Gas limit or 'auto' for simulation")
    gas_adjustment: str = Field("1.5", description="Multiplier applied to simulated gas")
    gas_prices: str = Field("0.025uakt", description="Gas price with denom")
    sign_mode: str = Field("amino-json", description="Transaction signing mode")
    chain_id: str = Field("testnet-8", description="Chain identifier")
    node: str = Field(
        "https://testnetrpc.akashnet.net:443",
        description="Tendermint RPC endpoint",
    )

    model_config = SettingsConfigDict(
        env_prefix="CHAIN_",
        case_sensitive=False,
    )

    def as_environment(self) -> dict[str, str]:
        """Render the overlay applied on top of the parent process environment.

        Returns:
            Mapping like ``{"AKASH_CHAIN_ID": "testnet-8", ...}``.
        """

        values = {
            "KEYRING_BACKEND": self.keyring_backend,
            "GAS": self.gas,
            "GAS_ADJUSTMENT": self.gas_adjustment,
            "GAS_PRICES": self.gas_prices,
            "SIGN_MODE": self.sign_mode,
            "CHAIN_ID": self.chain_id,
            "NODE": self.node,
        }
        return {f"{self.cli_env_prefix}_{key}": value for key, value in values.items()}


class LogSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("json", description="Log format: 'json' or 'plain'")
    output: str = Field("stdout", description="Log output: 'stdout' or 'file'")
    file_path: str | None = Field(None, description="Log file path when output is 'file'")
    max_bytes: int = Field(
        10 * 1024 * 1024,
        description="Rotate the log file after this many bytes (0 disables rotation)",
        ge=0,
    )
    backup_count: int = Field(5, description="Number of rotated files to keep", ge=0)
    request_id_header: str = Field(
        "X-Request-ID",
        description="Header used to read and echo the request correlation id",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Main application settings container.

    Automatically loads from the appropriate .env.{APP_ENV} file.
    Raises validation errors on startup if settings are malformed.

    Environments:
    - development: Local development (DEBUG=true)
    - testing: Automated tests (uses .env.testing)
    - staging: Pre-production (uses .env.staging)
    - production: Production deployment (uses .env.production)
    """

    app_env: str = APP_ENV
    app: AppSettings = Field(default_factory=AppSettings)
    faucet: FaucetSettings = Field(default_factory=FaucetSettings)
    chain: ChainSettings = Field(default_factory=ChainSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


# Global settings instance - composed from domain-specific settings
# Nested settings are created via default_factory so env loading works.
settings = Settings()
