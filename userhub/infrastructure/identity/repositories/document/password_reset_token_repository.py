"""Repository for PasswordResetToken entities in the document store."""

from userhub.documents import PasswordResetTokenDocument
from userhub.domain.common.time import utc_now
from userhub.domain.common.value_objects.ids import PasswordResetTokenId, UserId
from userhub.domain.identity.entities.password_reset_token import PasswordResetToken
from userhub.domain.identity.exceptions import DuplicateTokenError
from userhub.infrastructure.identity.mappers.password_reset_token_mapper import (
    PasswordResetTokenDocumentMapper,
)

from .base import translate_errors


class MongoPasswordResetTokenRepository:
    """
    Repository for PasswordResetToken entities.

    Expired documents are also removed by the TTL index on ``expires_at``.
    """

    def __init__(self) -> None:
        self.mapper = PasswordResetTokenDocumentMapper()

    async def save(self, token: PasswordResetToken) -> None:
        async with translate_errors(
            lambda: DuplicateTokenError("Password reset token already exists")
        ):
            await self.mapper.to_document(token).insert()

    async def find_by_id(self, token_id: PasswordResetTokenId) -> PasswordResetToken | None:
        async with translate_errors():
            document = await PasswordResetTokenDocument.get(token_id.value)
        return self.mapper.to_domain(document) if document else None

    async def find_by_token_hash(self, token_hash: str) -> PasswordResetToken | None:
        async with translate_errors():
            document = await PasswordResetTokenDocument.find_one(
                PasswordResetTokenDocument.token_hash == token_hash
            )
        return self.mapper.to_domain(document) if document else None

    async def delete_by_id(self, token_id: PasswordResetTokenId) -> None:
        """Consume a token. Missing documents are ignored."""
        async with translate_errors():
            await PasswordResetTokenDocument.find(
                PasswordResetTokenDocument.id == token_id.value
            ).delete()

    async def delete_all_by_user_id(self, user_id: UserId) -> None:
        async with translate_errors():
            await PasswordResetTokenDocument.find(
                PasswordResetTokenDocument.user_id == user_id.value
            ).delete()

    async def delete_expired(self) -> int:
        async with translate_errors():
            result = await PasswordResetTokenDocument.find(
                PasswordResetTokenDocument.expires_at < utc_now()
            ).delete()
        return result.deleted_count if result else 0
