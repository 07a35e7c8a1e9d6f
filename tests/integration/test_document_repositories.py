"""
Beanie adapters against a real MongoDB.

Set USERHUB_TEST_MONGODB_URL (e.g. mongodb://localhost:27017) to run these.
"""

import os
import uuid
from collections.abc import AsyncGenerator
from datetime import timedelta

import pytest
import pytest_asyncio
from beanie import init_beanie
from pymongo import AsyncMongoClient

from userhub.documents import DOCUMENT_MODELS
from userhub.domain.common.time import utc_now
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
from userhub.infrastructure.identity.repositories.document import (
    MongoPasswordResetTokenRepository,
    MongoRefreshTokenRepository,
    MongoUserRepository,
)

MONGODB_URL = os.environ.get("USERHUB_TEST_MONGODB_URL")
HASH = "$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$aGFzaA"

pytestmark = [
    pytest.mark.mongodb,
    pytest.mark.skipif(not MONGODB_URL, reason="USERHUB_TEST_MONGODB_URL is not set"),
]


@pytest_asyncio.fixture(autouse=True)
async def document_store() -> AsyncGenerator[None, None]:
    """Throwaway database per test."""
    client: AsyncMongoClient = AsyncMongoClient(MONGODB_URL, tz_aware=True)
    database_name = f"userhub_test_{uuid.uuid4().hex[:12]}"
    await init_beanie(database=client[database_name], document_models=DOCUMENT_MODELS)
    yield
    await client.drop_database(database_name)
    await client.close()


def make_user(email: str = "doc@example.com") -> User:
    return User.create(name="Doc", email=Email(email), password=Password.from_hash(HASH))


class TestMongoUserRepository:
    async def test_crud(self) -> None:
        users = MongoUserRepository()
        user = make_user()
        await users.save(user)

        found = await users.find_by_email(Email("DOC@example.com"))
        assert found is not None
        assert found.id == user.id
        assert found.created_at == user.created_at

        user.update_name("Updated")
        await users.update(user)
        updated = await users.find_by_id(user.id)
        assert updated is not None
        assert updated.name == "Updated"

        await users.delete(user.id)
        assert not await users.exists(user.id)
        with pytest.raises(UserNotFoundError):
            await users.delete(user.id)

    async def test_duplicate_email(self) -> None:
        users = MongoUserRepository()
        await users.save(make_user())
        with pytest.raises(EmailAlreadyExistsError):
            await users.save(make_user())

    async def test_update_missing(self) -> None:
        with pytest.raises(UserNotFoundError):
            await MongoUserRepository().update(make_user())

    async def test_find_all_newest_first(self) -> None:
        users = MongoUserRepository()
        older = make_user("older@example.com")
        older.created_at = older.created_at - timedelta(days=1)
        newer = make_user("newer@example.com")
        await users.save(older)
        await users.save(newer)

        assert [u.id for u in await users.find_all()] == [newer.id, older.id]


class TestMongoTokenRepositories:
    async def test_refresh_tokens(self) -> None:
        tokens = MongoRefreshTokenRepository()
        user = make_user()
        await tokens.save(RefreshToken.create("a", user.id, utc_now() + timedelta(days=1)))
        await tokens.save(RefreshToken.create("b", user.id, utc_now() - timedelta(days=1)))

        with pytest.raises(DuplicateTokenError):
            await tokens.save(RefreshToken.create("a", user.id, utc_now()))

        assert await tokens.delete_expired() in (0, 1)  # the TTL monitor may get there first
        assert await tokens.find_by_token("a") is not None
        await tokens.delete_all_by_user_id(user.id)
        assert await tokens.find_by_token("a") is None

    async def test_password_reset_tokens(self) -> None:
        tokens = MongoPasswordResetTokenRepository()
        user = make_user()
        token = PasswordResetToken.create("e" * 64, user.id, utc_now() + timedelta(minutes=30))
        await tokens.save(token)

        found = await tokens.find_by_token_hash("e" * 64)
        assert found is not None
        assert found.id == token.id

        await tokens.delete_by_id(token.id)
        await tokens.delete_by_id(token.id)
        assert await tokens.find_by_id(token.id) is None
