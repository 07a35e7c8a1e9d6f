"""SQLAlchemy adapters for the relational mirror."""

from .password_reset_token_repository import SqlAlchemyPasswordResetTokenRepository
from .refresh_token_repository import SqlAlchemyRefreshTokenRepository
from .user_repository import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyPasswordResetTokenRepository",
    "SqlAlchemyRefreshTokenRepository",
    "SqlAlchemyUserRepository",
]
