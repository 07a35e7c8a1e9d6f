"""DTOs for authentication use cases."""

from dataclasses import dataclass
from datetime import datetime

from .user_dtos import UserDTO


@dataclass(frozen=True)
class RegisterUserInput:
    name: str
    email: str
    password: str
    age: int | None = None
    role: str | None = None


@dataclass(frozen=True)
class LoginUserInput:
    email: str
    password: str


@dataclass(frozen=True)
class ResetPasswordInput:
    token: str
    password: str


@dataclass(frozen=True)
class AuthTokenDTO:
    """Token pair plus the authenticated user, returned by register and login."""

    access_token: str
    refresh_token: str
    user: UserDTO


@dataclass(frozen=True)
class TokenPairDTO:
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class PasswordResetRequestResult:
    """
    Outcome of a reset request.

    Both fields are None when the email is unknown, so callers cannot tell
    an unknown email from a delivered reset.
    """

    reset_token: str | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True)
class PurgeExpiredTokensResult:
    """Number of expired records removed from each store."""

    document_refresh_tokens: int
    relational_refresh_tokens: int
    document_password_reset_tokens: int
    relational_password_reset_tokens: int
