"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from dependency_injector import providers  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from tests.fakes import InMemoryRepositoryFactory  # noqa: E402
from userhub.application.identity.services import (  # noqa: E402
    AuthenticationService,
    UserManagementService,
    UserProfileService,
)
from userhub.config import Settings  # noqa: E402
from userhub.core import container  # noqa: E402
from userhub.database import create_engine_for, create_session_factory, create_tables  # noqa: E402
from userhub.infrastructure.identity.services.token_service import JwtTokenService  # noqa: E402
from userhub.main import create_app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
STRONG_PASSWORD = "Str0ng!Pass"  # noqa: S105


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL=TEST_DATABASE_URL,
        JWT_ACCESS_SECRET="test-access-secret-0123456789abcdef0123456789",  # noqa: S106
        JWT_REFRESH_SECRET="test-refresh-secret-0123456789abcdef012345678",  # noqa: S106
        RATE_LIMIT_ENABLED=False,
    )


@pytest.fixture
def token_service(settings: Settings) -> JwtTokenService:
    return JwtTokenService(settings)


@pytest.fixture
def repositories() -> InMemoryRepositoryFactory:
    return InMemoryRepositoryFactory()


@pytest.fixture
def auth_service(
    repositories: InMemoryRepositoryFactory, token_service: JwtTokenService
) -> AuthenticationService:
    return AuthenticationService(repositories, token_service)


@pytest.fixture
def management_service(repositories: InMemoryRepositoryFactory) -> UserManagementService:
    return UserManagementService(repositories)


@pytest.fixture
def profile_service(repositories: InMemoryRepositoryFactory) -> UserProfileService:
    return UserProfileService(repositories)


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh in-memory SQLite database per test."""
    engine = create_engine_for(TEST_DATABASE_URL)
    await create_tables(engine)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(
    settings: Settings,
    repositories: InMemoryRepositoryFactory,
    token_service: JwtTokenService,
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with both stores replaced by in-memory fakes."""
    container.repository_factory.override(providers.Object(repositories))
    container.token_service.override(providers.Object(token_service))
    app = create_app(settings)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as test_client:
            yield test_client
    finally:
        container.repository_factory.reset_override()
        container.token_service.reset_override()
