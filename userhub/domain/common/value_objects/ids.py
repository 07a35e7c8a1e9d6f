from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class RefreshTokenId(EntityId):
    """Strongly-typed refresh token identifier."""


@dataclass(frozen=True)
class PasswordResetTokenId(EntityId):
    """Strongly-typed password reset token identifier."""
