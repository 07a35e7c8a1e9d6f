"""Repository for PasswordResetToken entities in the relational store."""

from sqlalchemy import delete, select

from userhub.domain.common.time import utc_now
from userhub.domain.common.value_objects.ids import PasswordResetTokenId, UserId
from userhub.domain.identity.entities.password_reset_token import PasswordResetToken
from userhub.domain.identity.exceptions import DuplicateTokenError
from userhub.infrastructure.identity.mappers.password_reset_token_mapper import (
    PasswordResetTokenMapper,
)
from userhub.models import PasswordResetToken as PasswordResetTokenORM

from .base import SqlAlchemyRepository


class SqlAlchemyPasswordResetTokenRepository(SqlAlchemyRepository):
    """Repository for PasswordResetToken entities."""

    mapper = PasswordResetTokenMapper()

    async def save(self, token: PasswordResetToken) -> None:
        async with self.session(
            lambda: DuplicateTokenError("Password reset token already exists")
        ) as session:
            session.add(self.mapper.to_orm(token))

    async def find_by_id(self, token_id: PasswordResetTokenId) -> PasswordResetToken | None:
        async with self.session() as session:
            stmt = select(PasswordResetTokenORM).where(PasswordResetTokenORM.id == token_id.value)
            orm_model = (await session.execute(stmt)).scalar_one_or_none()
            return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_by_token_hash(self, token_hash: str) -> PasswordResetToken | None:
        async with self.session() as session:
            stmt = select(PasswordResetTokenORM).where(
                PasswordResetTokenORM.token_hash == token_hash
            )
            orm_model = (await session.execute(stmt)).scalar_one_or_none()
            return self.mapper.to_domain(orm_model) if orm_model else None

    async def delete_by_id(self, token_id: PasswordResetTokenId) -> None:
        """Consume a token. Missing rows are ignored."""
        async with self.session() as session:
            await session.execute(
                delete(PasswordResetTokenORM).where(PasswordResetTokenORM.id == token_id.value)
            )

    async def delete_all_by_user_id(self, user_id: UserId) -> None:
        async with self.session() as session:
            await session.execute(
                delete(PasswordResetTokenORM).where(PasswordResetTokenORM.user_id == user_id.value)
            )

    async def delete_expired(self) -> int:
        async with self.session() as session:
            result = await session.execute(
                delete(PasswordResetTokenORM).where(PasswordResetTokenORM.expires_at < utc_now())
            )
            return result.rowcount  # type: ignore[attr-defined, no-any-return]
