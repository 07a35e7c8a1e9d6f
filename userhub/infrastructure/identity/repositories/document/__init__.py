"""Beanie adapters for the document store (the read store)."""

from .password_reset_token_repository import MongoPasswordResetTokenRepository
from .refresh_token_repository import MongoRefreshTokenRepository
from .user_repository import MongoUserRepository

__all__ = [
    "MongoPasswordResetTokenRepository",
    "MongoRefreshTokenRepository",
    "MongoUserRepository",
]
