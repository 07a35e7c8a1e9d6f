from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from userhub.domain.identity.entities.user import User


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims carried by both access and refresh tokens."""

    user_id: str
    email: str
    role: str

    @classmethod
    def for_user(cls, user: User) -> "TokenClaims":
        return cls(user_id=user.id.value, email=user.email.value, role=str(user.role))


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
    refresh_token_expires_at: datetime


class TokenVerificationError(Exception):
    """Base class for token verification failures."""


class TokenExpiredError(TokenVerificationError):
    """The token signature is valid but its expiry has passed."""


class TokenInvalidError(TokenVerificationError):
    """The token is malformed, has a bad signature or the wrong type."""


class TokenServiceProtocol(Protocol):
    def create_access_token(self, claims: TokenClaims) -> str: ...

    def issue_token_pair(self, claims: TokenClaims) -> TokenPair: ...

    def verify_access_token(self, token: str) -> TokenClaims: ...

    def verify_refresh_token(self, token: str) -> TokenClaims: ...

    def refresh_token_expiry(self) -> datetime: ...
