"""Repository for RefreshToken entities in the document store."""

from userhub.documents import RefreshTokenDocument
from userhub.domain.common.time import utc_now
from userhub.domain.common.value_objects.ids import RefreshTokenId, UserId
from userhub.domain.identity.entities.refresh_token import RefreshToken
from userhub.domain.identity.exceptions import DuplicateTokenError
from userhub.infrastructure.identity.mappers.refresh_token_mapper import (
    RefreshTokenDocumentMapper,
)

from .base import translate_errors


class MongoRefreshTokenRepository:
    """
    Repository for RefreshToken entities.

    Expired documents are also removed by the TTL index on ``expires_at``.
    """

    def __init__(self) -> None:
        self.mapper = RefreshTokenDocumentMapper()

    async def save(self, token: RefreshToken) -> None:
        async with translate_errors(lambda: DuplicateTokenError("Refresh token already exists")):
            await self.mapper.to_document(token).insert()

    async def find_by_id(self, token_id: RefreshTokenId) -> RefreshToken | None:
        async with translate_errors():
            document = await RefreshTokenDocument.get(token_id.value)
        return self.mapper.to_domain(document) if document else None

    async def find_by_token(self, token: str) -> RefreshToken | None:
        async with translate_errors():
            document = await RefreshTokenDocument.find_one(RefreshTokenDocument.token == token)
        return self.mapper.to_domain(document) if document else None

    async def delete_by_token(self, token: str) -> None:
        """Revoke a token. Unknown tokens are ignored."""
        async with translate_errors():
            await RefreshTokenDocument.find(RefreshTokenDocument.token == token).delete()

    async def delete_all_by_user_id(self, user_id: UserId) -> None:
        async with translate_errors():
            await RefreshTokenDocument.find(RefreshTokenDocument.user_id == user_id.value).delete()

    async def delete_expired(self) -> int:
        async with translate_errors():
            result = await RefreshTokenDocument.find(
                RefreshTokenDocument.expires_at < utc_now()
            ).delete()
        return result.deleted_count if result else 0
