"""Repository for User domain entities in the relational store."""

from sqlalchemy import delete, select

from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.entities.user import User
from userhub.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from userhub.domain.identity.value_objects.email import Email
from userhub.infrastructure.identity.mappers.user_mapper import UserMapper
from userhub.models import User as UserORM

from .base import SqlAlchemyRepository


class SqlAlchemyUserRepository(SqlAlchemyRepository):
    """Repository for User domain entities."""

    mapper = UserMapper()

    async def save(self, user: User) -> None:
        """
        Insert a new user.

        Raises:
            EmailAlreadyExistsError: If the email is already stored
        """
        async with self.session(lambda: EmailAlreadyExistsError(user.email.value)) as session:
            session.add(self.mapper.to_orm(user))

    async def find_by_id(self, user_id: UserId) -> User | None:
        async with self.session() as session:
            stmt = select(UserORM).where(UserORM.id == user_id.value)
            orm_model = (await session.execute(stmt)).scalar_one_or_none()
            return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_by_email(self, email: Email) -> User | None:
        async with self.session() as session:
            stmt = select(UserORM).where(UserORM.email == email.value)
            orm_model = (await session.execute(stmt)).scalar_one_or_none()
            return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_all(self) -> list[User]:
        """All users, newest first."""
        async with self.session() as session:
            stmt = select(UserORM).order_by(UserORM.created_at.desc())
            orm_models = (await session.execute(stmt)).scalars().all()
            return [self.mapper.to_domain(orm_model) for orm_model in orm_models]

    async def update(self, user: User) -> None:
        """
        Write every mutable field of the user.

        Raises:
            UserNotFoundError: If no row has the user's id
            EmailAlreadyExistsError: If the new email belongs to another row
        """
        async with self.session(lambda: EmailAlreadyExistsError(user.email.value)) as session:
            stmt = select(UserORM).where(UserORM.id == user.id.value)
            orm_model = (await session.execute(stmt)).scalar_one_or_none()
            if orm_model is None:
                raise UserNotFoundError(user.id.value)
            self.mapper.to_orm(user, orm_model)

    async def delete(self, user_id: UserId) -> None:
        """
        Delete a user; its tokens go with it through ON DELETE CASCADE.

        Raises:
            UserNotFoundError: If no row was deleted
        """
        async with self.session() as session:
            result = await session.execute(delete(UserORM).where(UserORM.id == user_id.value))
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise UserNotFoundError(user_id.value)

    async def exists(self, user_id: UserId) -> bool:
        async with self.session() as session:
            stmt = select(UserORM.id).where(UserORM.id == user_id.value)
            return (await session.execute(stmt)).scalar_one_or_none() is not None
