from .auth_dtos import (
    AuthTokenDTO,
    LoginUserInput,
    PasswordResetRequestResult,
    PurgeExpiredTokensResult,
    RegisterUserInput,
    ResetPasswordInput,
    TokenPairDTO,
)
from .user_dtos import CreateUserInput, UpdateUserInput, UserDTO

__all__ = [
    "AuthTokenDTO",
    "CreateUserInput",
    "LoginUserInput",
    "PasswordResetRequestResult",
    "PurgeExpiredTokensResult",
    "RegisterUserInput",
    "ResetPasswordInput",
    "TokenPairDTO",
    "UpdateUserInput",
    "UserDTO",
]
