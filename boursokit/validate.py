"""Validation of command-line values."""

from __future__ import annotations

ACCOUNT_ID_LENGTH = 32


def validate_account_id(account_id: str) -> str:
    """Return the account id unchanged if, once trimmed, it is 32 bytes long.

    Raises ValueError otherwise.
    """
    if len(account_id.strip().encode("utf-8")) == ACCOUNT_ID_LENGTH:
        return account_id
    raise ValueError("Account id must be 32 characters long")