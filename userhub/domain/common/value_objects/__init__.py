"""Common value objects shared across all domain modules."""

from .ids import PasswordResetTokenId, RefreshTokenId, UserId

__all__ = [
    "PasswordResetTokenId",
    "RefreshTokenId",
    "UserId",
]
