"""Repository for RefreshToken entities in the relational store."""

from sqlalchemy import delete, select

from userhub.domain.common.time import utc_now
from userhub.domain.common.value_objects.ids import RefreshTokenId, UserId
from userhub.domain.identity.entities.refresh_token import RefreshToken
from userhub.domain.identity.exceptions import DuplicateTokenError
from userhub.infrastructure.identity.mappers.refresh_token_mapper import RefreshTokenMapper
from userhub.models import RefreshToken as RefreshTokenORM

from .base import SqlAlchemyRepository


class SqlAlchemyRefreshTokenRepository(SqlAlchemyRepository):
    """Repository for RefreshToken entities."""

    mapper = RefreshTokenMapper()

    async def save(self, token: RefreshToken) -> None:
        async with self.session(
            lambda: DuplicateTokenError("Refresh token already exists")
        ) as session:
            session.add(self.mapper.to_orm(token))

    async def find_by_id(self, token_id: RefreshTokenId) -> RefreshToken | None:
        async with self.session() as session:
            stmt = select(RefreshTokenORM).where(RefreshTokenORM.id == token_id.value)
            orm_model = (await session.execute(stmt)).scalar_one_or_none()
            return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_by_token(self, token: str) -> RefreshToken | None:
        async with self.session() as session:
            stmt = select(RefreshTokenORM).where(RefreshTokenORM.token == token)
            orm_model = (await session.execute(stmt)).scalar_one_or_none()
            return self.mapper.to_domain(orm_model) if orm_model else None

    async def delete_by_token(self, token: str) -> None:
        """Revoke a token. Unknown tokens are ignored."""
        async with self.session() as session:
            await session.execute(delete(RefreshTokenORM).where(RefreshTokenORM.token == token))

    async def delete_all_by_user_id(self, user_id: UserId) -> None:
        async with self.session() as session:
            await session.execute(
                delete(RefreshTokenORM).where(RefreshTokenORM.user_id == user_id.value)
            )

    async def delete_expired(self) -> int:
        async with self.session() as session:
            result = await session.execute(
                delete(RefreshTokenORM).where(RefreshTokenORM.expires_at < utc_now())
            )
            return result.rowcount  # type: ignore[attr-defined, no-any-return]
