"""Token creation and verification service."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any, Literal

import jwt

from userhub.application.identity.protocols.token_service import (
    TokenClaims,
    TokenExpiredError,
    TokenInvalidError,
    TokenPair,
)
from userhub.config import Settings
from userhub.domain.common.exceptions import ValidationError
from userhub.domain.identity.value_objects.role import Role

TokenType = Literal["access", "refresh"]


class JwtTokenService:
    """
    Signs and verifies access and refresh tokens.

    Each token class has its own secret. Both carry the user id (``sub``),
    email and role; ``type`` keeps one from being accepted as the other.
    """

    def __init__(self, settings: Settings) -> None:
        self.access_secret = settings.JWT_ACCESS_SECRET
        self.refresh_secret = settings.JWT_REFRESH_SECRET
        self.algorithm = settings.JWT_ALGORITHM
        self.access_token_lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self.refresh_token_lifetime = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)

    def create_access_token(self, claims: TokenClaims) -> str:
        """Create an access token for a user."""
        expires_at = self._now() + self.access_token_lifetime
        return self._encode(claims, "access", expires_at, self.access_secret)

    def create_refresh_token(self, claims: TokenClaims) -> tuple[str, datetime]:
        """Create a refresh token and return it with its expiry."""
        expires_at = self.refresh_token_expiry()
        return self._encode(claims, "refresh", expires_at, self.refresh_secret), expires_at

    def issue_token_pair(self, claims: TokenClaims) -> TokenPair:
        """Create a token pair (access + refresh) for a user."""
        refresh_token, expires_at = self.create_refresh_token(claims)
        return TokenPair(
            access_token=self.create_access_token(claims),
            refresh_token=refresh_token,
            refresh_token_expires_at=expires_at,
        )

    def refresh_token_expiry(self) -> datetime:
        """
        Expiry instant for a refresh token issued now.

        Whole seconds, because that is what the ``exp`` claim can hold.
        """
        return self._now() + self.refresh_token_lifetime

    def verify_access_token(self, token: str) -> TokenClaims:
        """
        Raises:
            TokenExpiredError: If the token has expired
            TokenInvalidError: If the token is malformed, forged or not an access token
        """
        return self._decode(token, "access", self.access_secret)

    def verify_refresh_token(self, token: str) -> TokenClaims:
        """
        Raises:
            TokenExpiredError: If the token has expired
            TokenInvalidError: If the token is malformed, forged or not a refresh token
        """
        return self._decode(token, "refresh", self.refresh_secret)

    @staticmethod
    def _now() -> datetime:
        return datetime.now(UTC).replace(microsecond=0)

    def _encode(
        self, claims: TokenClaims, token_type: TokenType, expires_at: datetime, secret: str
    ) -> str:
        payload: dict[str, Any] = {
            "sub": claims.user_id,
            "email": claims.email,
            "role": claims.role,
            "type": token_type,
            "iat": self._now(),
            "exp": expires_at,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def _decode(self, token: str, token_type: TokenType, secret: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError(f"{token_type.capitalize()} token has expired") from e
        except jwt.InvalidTokenError as e:
            raise TokenInvalidError(f"Invalid {token_type} token") from e

        if payload.get("type") != token_type:
            raise TokenInvalidError(f"Invalid {token_type} token")
        email = payload.get("email")
        if not isinstance(email, str):
            raise TokenInvalidError(f"Invalid {token_type} token")
        try:
            role = Role.create(str(payload.get("role")))
        except ValidationError as e:
            raise TokenInvalidError(f"Invalid {token_type} token") from e

        return TokenClaims(user_id=str(payload["sub"]), email=email, role=str(role))
