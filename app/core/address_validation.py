"""Recipient address validation.

Addresses end up as an argument of the wallet CLI, so they are checked
against a strict allowlist (prefix, character set, length) before anything
else happens with them.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from app.core.errors import InvalidAddressError

logger = logging.getLogger(__name__)

INVALID_ADDRESS_CODE = "invalid_address"
INVALID_ADDRESS_MESSAGE = "Invalid Akash address"

# Bech32 data part is lowercase alphanumeric; mixed case is never valid
_ADDRESS_CHARS = re.compile(r"[a-z0-9]+")


def invalid_address_error(reason: str) -> InvalidAddressError:
    """Build the error returned for every rejected address."""
    return InvalidAddressError(
        code=INVALID_ADDRESS_CODE,
        message=INVALID_ADDRESS_MESSAGE,
        details={"hint": reason},
    )


def validate_address(
    address: Any,
    *,
    prefix: str,
    min_length: int,
    max_length: int,
) -> str:
    """Validate a recipient address and return it unchanged.

    Args:
        address: Value received from the client.
        prefix: Required literal prefix (e.g. ``akash1``).
        min_length: Minimum total length.
        max_length: Maximum total length.

    Returns:
        str: The address.

    Raises:
        InvalidAddressError: If the address is missing or malformed.
    """
    if not isinstance(address, str) or not address:
        reason = "missing"
    elif not address.startswith(prefix):
        reason = "bad_prefix"
    elif not min_length <= len(address) <= max_length:
        reason = "bad_length"
    elif not _ADDRESS_CHARS.fullmatch(address):
        reason = "bad_charset"
    else:
        return address

    logger.info(
        "faucet.invalid_address",
        extra={
            "reason": reason,
            "address_length": len(address) if isinstance(address, str) else None,
        },
    )
    raise invalid_address_error(reason)
