from .login_user_use_case import LoginUserUseCase
from .logout_user_use_case import LogoutUserUseCase
from .purge_expired_tokens_use_case import PurgeExpiredTokensUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .register_user_use_case import RegisterUserUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .reset_password_use_case import ResetPasswordUseCase

__all__ = [
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "PurgeExpiredTokensUseCase",
    "RefreshTokenUseCase",
    "RegisterUserUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
]
