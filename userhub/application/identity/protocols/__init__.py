from .password_reset_token_repository import PasswordResetTokenRepositoryProtocol
from .refresh_token_repository import RefreshTokenRepositoryProtocol
from .repository_factory import RepositoryFactoryProtocol
from .token_service import (
    TokenClaims,
    TokenExpiredError,
    TokenInvalidError,
    TokenPair,
    TokenServiceProtocol,
    TokenVerificationError,
)
from .user_repository import UserRepositoryProtocol

__all__ = [
    "PasswordResetTokenRepositoryProtocol",
    "RefreshTokenRepositoryProtocol",
    "RepositoryFactoryProtocol",
    "TokenClaims",
    "TokenExpiredError",
    "TokenInvalidError",
    "TokenPair",
    "TokenServiceProtocol",
    "TokenVerificationError",
    "UserRepositoryProtocol",
]
