"""Raw password reset token generation and hashing."""

import hashlib
import secrets
from datetime import datetime, timedelta

from userhub.domain.common.time import utc_now

RESET_TOKEN_BYTES = 32
DEFAULT_RESET_TOKEN_TTL_MINUTES = 30


def generate_reset_token() -> str:
    """Random opaque token handed to the user once."""
    return secrets.token_hex(RESET_TOKEN_BYTES)


def hash_reset_token(token: str) -> str:
    """SHA-256 hex digest; only this value is ever stored."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def reset_token_expiry(minutes: int = DEFAULT_RESET_TOKEN_TTL_MINUTES) -> datetime:
    return utc_now() + timedelta(minutes=minutes)
