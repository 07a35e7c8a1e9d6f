"""SQLAlchemy adapters against an in-memory SQLite database."""

from datetime import timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from userhub.application.identity.protocols.token_service import TokenClaims
from userhub.config import Settings
from userhub.database import (
    create_tables,
    dispose_engine,
    get_engine,
    get_session_factory,
    initialize_database,
)
from userhub.domain.common.exceptions import PersistenceError
from userhub.domain.common.time import utc_now
from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.entities.password_reset_token import PasswordResetToken
from userhub.domain.identity.entities.refresh_token import RefreshToken
from userhub.domain.identity.entities.user import User
from userhub.domain.identity.exceptions import (
    DuplicateTokenError,
    EmailAlreadyExistsError,
    UserNotFoundError,
)
from userhub.domain.identity.value_objects.email import Email
from userhub.domain.identity.value_objects.password import Password
from userhub.infrastructure.identity.repositories.relational import (
    SqlAlchemyPasswordResetTokenRepository,
    SqlAlchemyRefreshTokenRepository,
    SqlAlchemyUserRepository,
)
from userhub.infrastructure.identity.services.token_service import JwtTokenService
from userhub.models import RefreshToken as RefreshTokenModel
from userhub.models import User as UserModel

HASH = "$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$aGFzaA"

SessionFactory = async_sessionmaker[AsyncSession]


def make_user(email: str = "mirror@example.com", name: str = "Mirror") -> User:
    return User.create(name=name, email=Email(email), password=Password.from_hash(HASH), age=40)


@pytest.fixture
def users(session_factory: SessionFactory) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(lambda: session_factory)


@pytest.fixture
def refresh_tokens(session_factory: SessionFactory) -> SqlAlchemyRefreshTokenRepository:
    return SqlAlchemyRefreshTokenRepository(lambda: session_factory)


@pytest.fixture
def reset_tokens(session_factory: SessionFactory) -> SqlAlchemyPasswordResetTokenRepository:
    return SqlAlchemyPasswordResetTokenRepository(lambda: session_factory)


class TestSqlAlchemyUserRepository:
    async def test_save_and_find(self, users: SqlAlchemyUserRepository) -> None:
        user = make_user()
        await users.save(user)

        by_id = await users.find_by_id(user.id)
        by_email = await users.find_by_email(Email("MIRROR@example.com"))

        assert by_id is not None
        assert by_email is not None
        assert by_id.id == by_email.id == user.id
        assert by_id.password.hashed_value == HASH
        assert by_id.created_at == user.created_at
        assert by_id.created_at.tzinfo is not None

    async def test_find_missing(self, users: SqlAlchemyUserRepository) -> None:
        assert await users.find_by_id(UserId.generate()) is None
        assert await users.find_by_email(Email("nobody@example.com")) is None

    async def test_duplicate_email(self, users: SqlAlchemyUserRepository) -> None:
        await users.save(make_user())
        with pytest.raises(EmailAlreadyExistsError):
            await users.save(make_user())

    async def test_find_all_newest_first(self, users: SqlAlchemyUserRepository) -> None:
        older = make_user("older@example.com")
        older.created_at = older.created_at - timedelta(days=1)
        newer = make_user("newer@example.com")
        await users.save(older)
        await users.save(newer)

        assert [u.id for u in await users.find_all()] == [newer.id, older.id]

    async def test_update(self, users: SqlAlchemyUserRepository) -> None:
        user = make_user()
        await users.save(user)
        user.update_name("Renamed")
        user.update_email(Email("renamed@example.com"))

        await users.update(user)

        stored = await users.find_by_id(user.id)
        assert stored is not None
        assert stored.name == "Renamed"
        assert stored.email.value == "renamed@example.com"

    async def test_update_missing(self, users: SqlAlchemyUserRepository) -> None:
        with pytest.raises(UserNotFoundError):
            await users.update(make_user())

    async def test_update_to_taken_email(self, users: SqlAlchemyUserRepository) -> None:
        first = make_user("first@example.com")
        second = make_user("second@example.com")
        await users.save(first)
        await users.save(second)
        second.update_email(Email("first@example.com"))

        with pytest.raises(EmailAlreadyExistsError):
            await users.update(second)

    async def test_delete_and_exists(self, users: SqlAlchemyUserRepository) -> None:
        user = make_user()
        await users.save(user)
        assert await users.exists(user.id)

        await users.delete(user.id)

        assert not await users.exists(user.id)
        with pytest.raises(UserNotFoundError):
            await users.delete(user.id)


class TestSqlAlchemyRefreshTokenRepository:
    async def test_save_find_and_revoke(
        self, users: SqlAlchemyUserRepository, refresh_tokens: SqlAlchemyRefreshTokenRepository
    ) -> None:
        user = make_user()
        await users.save(user)
        token = RefreshToken.create("jwt-1", user.id, utc_now() + timedelta(days=7))
        await refresh_tokens.save(token)

        found = await refresh_tokens.find_by_token("jwt-1")
        assert found is not None
        assert found.id == token.id
        assert found.expires_at == token.expires_at
        assert await refresh_tokens.find_by_id(token.id) is not None

        await refresh_tokens.delete_by_token("jwt-1")
        await refresh_tokens.delete_by_token("jwt-1")

        assert await refresh_tokens.find_by_token("jwt-1") is None

    async def test_stores_token_signed_for_longest_email(
        self,
        users: SqlAlchemyUserRepository,
        refresh_tokens: SqlAlchemyRefreshTokenRepository,
        token_service: JwtTokenService,
    ) -> None:
        user = make_user("a" * 64 + "@" + "b" * 182 + ".io")
        await users.save(user)
        pair = token_service.issue_token_pair(TokenClaims.for_user(user))
        await refresh_tokens.save(
            RefreshToken.create(pair.refresh_token, user.id, pair.refresh_token_expires_at)
        )

        found = await refresh_tokens.find_by_token(pair.refresh_token)

        assert len(user.email.value) == 250
        assert len(pair.refresh_token) > 512
        assert found is not None
        assert found.token == pair.refresh_token
        assert RefreshTokenModel.__table__.c.token.type.length is None

    async def test_duplicate_token(
        self, users: SqlAlchemyUserRepository, refresh_tokens: SqlAlchemyRefreshTokenRepository
    ) -> None:
        user = make_user()
        await users.save(user)
        expires_at = utc_now() + timedelta(days=7)
        await refresh_tokens.save(RefreshToken.create("jwt-1", user.id, expires_at))

        with pytest.raises(DuplicateTokenError):
            await refresh_tokens.save(RefreshToken.create("jwt-1", user.id, expires_at))

    async def test_token_for_unknown_user_is_a_store_error(
        self, refresh_tokens: SqlAlchemyRefreshTokenRepository
    ) -> None:
        token = RefreshToken.create("jwt-1", UserId.generate(), utc_now() + timedelta(days=1))
        with pytest.raises(PersistenceError):
            await refresh_tokens.save(token)

    async def test_delete_all_by_user_id(
        self, users: SqlAlchemyUserRepository, refresh_tokens: SqlAlchemyRefreshTokenRepository
    ) -> None:
        owner = make_user("owner@example.com")
        other = make_user("other@example.com")
        await users.save(owner)
        await users.save(other)
        expires_at = utc_now() + timedelta(days=7)
        for value, user in (("a", owner), ("b", owner), ("c", other)):
            await refresh_tokens.save(RefreshToken.create(value, user.id, expires_at))

        await refresh_tokens.delete_all_by_user_id(owner.id)

        assert await refresh_tokens.find_by_token("a") is None
        assert await refresh_tokens.find_by_token("b") is None
        assert await refresh_tokens.find_by_token("c") is not None

    async def test_delete_expired(
        self, users: SqlAlchemyUserRepository, refresh_tokens: SqlAlchemyRefreshTokenRepository
    ) -> None:
        user = make_user()
        await users.save(user)
        await refresh_tokens.save(
            RefreshToken.create("stale", user.id, utc_now() - timedelta(hours=1))
        )
        await refresh_tokens.save(
            RefreshToken.create("fresh", user.id, utc_now() + timedelta(hours=1))
        )

        assert await refresh_tokens.delete_expired() == 1
        assert await refresh_tokens.find_by_token("fresh") is not None

    async def test_deleting_user_cascades_to_tokens(
        self, users: SqlAlchemyUserRepository, refresh_tokens: SqlAlchemyRefreshTokenRepository
    ) -> None:
        user = make_user()
        await users.save(user)
        await refresh_tokens.save(
            RefreshToken.create("jwt-1", user.id, utc_now() + timedelta(days=1))
        )

        await users.delete(user.id)

        assert await refresh_tokens.find_by_token("jwt-1") is None


class TestSqlAlchemyPasswordResetTokenRepository:
    async def test_lifecycle(
        self,
        users: SqlAlchemyUserRepository,
        reset_tokens: SqlAlchemyPasswordResetTokenRepository,
    ) -> None:
        user = make_user()
        await users.save(user)
        token = PasswordResetToken.create("f" * 64, user.id, utc_now() + timedelta(minutes=30))
        await reset_tokens.save(token)

        found = await reset_tokens.find_by_token_hash("f" * 64)
        assert found is not None
        assert found.id == token.id

        await reset_tokens.delete_by_id(token.id)
        await reset_tokens.delete_by_id(token.id)

        assert await reset_tokens.find_by_id(token.id) is None

    async def test_delete_all_by_user_and_expired(
        self,
        users: SqlAlchemyUserRepository,
        reset_tokens: SqlAlchemyPasswordResetTokenRepository,
    ) -> None:
        user = make_user()
        await users.save(user)
        await reset_tokens.save(
            PasswordResetToken.create("1" * 64, user.id, utc_now() - timedelta(minutes=1))
        )
        await reset_tokens.save(
            PasswordResetToken.create("2" * 64, user.id, utc_now() + timedelta(minutes=30))
        )

        assert await reset_tokens.delete_expired() == 1
        await reset_tokens.delete_all_by_user_id(user.id)
        assert await reset_tokens.find_by_token_hash("2" * 64) is None

    async def test_duplicate_hash(
        self,
        users: SqlAlchemyUserRepository,
        reset_tokens: SqlAlchemyPasswordResetTokenRepository,
    ) -> None:
        user = make_user()
        await users.save(user)
        expires_at = utc_now() + timedelta(minutes=30)
        await reset_tokens.save(PasswordResetToken.create("9" * 64, user.id, expires_at))

        with pytest.raises(DuplicateTokenError):
            await reset_tokens.save(PasswordResetToken.create("9" * 64, user.id, expires_at))


class TestEngineLifecycle:
    async def test_adapter_follows_reinitialized_engine(self, settings: Settings) -> None:
        users = SqlAlchemyUserRepository(get_session_factory)
        initialize_database(settings)
        await create_tables(get_engine())
        await users.save(make_user("first@example.com"))
        await dispose_engine()

        initialize_database(settings)
        try:
            await create_tables(get_engine())
            user = make_user("second@example.com")
            await users.save(user)

            async with get_session_factory()() as session:
                stored = await session.get(UserModel, user.id.value)
            assert stored is not None
            assert await users.find_by_email(Email("first@example.com")) is None
        finally:
            await dispose_engine()
