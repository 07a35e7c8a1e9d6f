"""Identity entities."""

from .password_reset_token import PasswordResetToken
from .refresh_token import RefreshToken
from .user import User

__all__ = ["PasswordResetToken", "RefreshToken", "User"]
