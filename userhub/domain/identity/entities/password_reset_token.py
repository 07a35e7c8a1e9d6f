"""Password reset token entity."""

from dataclasses import dataclass, field
from datetime import datetime

from userhub.domain.common.entity import Entity
from userhub.domain.common.exceptions import ValidationError
from userhub.domain.common.time import utc_now
from userhub.domain.common.value_objects.ids import PasswordResetTokenId, UserId


@dataclass(eq=False)
class PasswordResetToken(Entity[PasswordResetTokenId]):
    """
    A pending password reset.

    Business Rules:
    - Only the SHA-256 hash of the raw token is stored
    - At most one live token per user (older ones are deleted on request)
    - Short-lived; expiry is checked at use time
    """

    id: PasswordResetTokenId
    token_hash: str = field(repr=False)
    user_id: UserId
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utc_now()) > self.expires_at

    def belongs_to_user(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    @classmethod
    def create(
        cls, token_hash: str, user_id: UserId, expires_at: datetime
    ) -> "PasswordResetToken":
        """
        Create a reset token record.

        Raises:
            ValidationError: If the hash is empty
        """
        if not token_hash or not token_hash.strip():
            raise ValidationError("Token hash cannot be empty", field="token_hash")
        return cls(
            id=PasswordResetTokenId.generate(),
            token_hash=token_hash,
            user_id=user_id,
            expires_at=expires_at,
            created_at=utc_now(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: PasswordResetTokenId,
        token_hash: str,
        user_id: UserId,
        expires_at: datetime,
        created_at: datetime,
    ) -> "PasswordResetToken":
        """Reconstitute a reset token from persistence."""
        return cls(
            id=id,
            token_hash=token_hash,
            user_id=user_id,
            expires_at=expires_at,
            created_at=created_at,
        )
