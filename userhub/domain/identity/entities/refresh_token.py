"""Refresh token entity."""

from dataclasses import dataclass, field
from datetime import datetime

from userhub.domain.common.entity import Entity
from userhub.domain.common.exceptions import ValidationError
from userhub.domain.common.time import utc_now
from userhub.domain.common.value_objects.ids import RefreshTokenId, UserId


@dataclass(eq=False)
class RefreshToken(Entity[RefreshTokenId]):
    """
    A persisted refresh token.

    Business Rules:
    - Belongs to exactly one user
    - The token string is unique per store
    - Expiry is checked at use time; the entity never expires itself
    - Tokens are rotated, never updated
    """

    id: RefreshTokenId
    token: str = field(repr=False)
    user_id: UserId
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utc_now()) > self.expires_at

    def belongs_to_user(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    @classmethod
    def create(cls, token: str, user_id: UserId, expires_at: datetime) -> "RefreshToken":
        """
        Create a refresh token record for a freshly signed token.

        Raises:
            ValidationError: If the token string is empty
        """
        if not token or not token.strip():
            raise ValidationError("Refresh token cannot be empty", field="token")
        return cls(
            id=RefreshTokenId.generate(),
            token=token,
            user_id=user_id,
            expires_at=expires_at,
            created_at=utc_now(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: RefreshTokenId,
        token: str,
        user_id: UserId,
        expires_at: datetime,
        created_at: datetime,
    ) -> "RefreshToken":
        """Reconstitute a refresh token from persistence."""
        return cls(
            id=id, token=token, user_id=user_id, expires_at=expires_at, created_at=created_at
        )
