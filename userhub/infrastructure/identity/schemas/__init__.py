from .auth_schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    PasswordResetIssued,
    RefreshTokenRequest,
    RegisterRequest,
    ResetPasswordRequest,
    TokenPairResponse,
    TokenResponse,
)
from .user_schemas import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "ForgotPasswordRequest",
    "LoginRequest",
    "PasswordResetIssued",
    "RefreshTokenRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    "TokenPairResponse",
    "TokenResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
