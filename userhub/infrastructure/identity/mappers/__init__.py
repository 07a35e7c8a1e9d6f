from .password_reset_token_mapper import PasswordResetTokenDocumentMapper, PasswordResetTokenMapper
from .refresh_token_mapper import RefreshTokenDocumentMapper, RefreshTokenMapper
from .user_mapper import UserDocumentMapper, UserMapper

__all__ = [
    "PasswordResetTokenDocumentMapper",
    "PasswordResetTokenMapper",
    "RefreshTokenDocumentMapper",
    "RefreshTokenMapper",
    "UserDocumentMapper",
    "UserMapper",
]
