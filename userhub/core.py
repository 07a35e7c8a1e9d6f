from dependency_injector import containers, providers

from userhub.application.identity.services.authentication_service import AuthenticationService
from userhub.application.identity.services.user_management_service import UserManagementService
from userhub.application.identity.services.user_profile_service import UserProfileService
from userhub.config import get_settings
from userhub.database import get_session_factory
from userhub.infrastructure.identity.repositories.document import (
    MongoPasswordResetTokenRepository,
    MongoRefreshTokenRepository,
    MongoUserRepository,
)
from userhub.infrastructure.identity.repositories.relational import (
    SqlAlchemyPasswordResetTokenRepository,
    SqlAlchemyRefreshTokenRepository,
    SqlAlchemyUserRepository,
)
from userhub.infrastructure.identity.repository_factory import RepositoryFactory
from userhub.infrastructure.identity.services.token_service import JwtTokenService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Looked up per session: the engine exists only while a lifespan is running
    session_factory_getter = providers.Object(get_session_factory)

    # Repositories (one instance per store for the process lifetime)
    document_user_repository = providers.Singleton(MongoUserRepository)
    relational_user_repository = providers.Singleton(
        SqlAlchemyUserRepository, get_session_factory=session_factory_getter
    )
    document_refresh_token_repository = providers.Singleton(MongoRefreshTokenRepository)
    relational_refresh_token_repository = providers.Singleton(
        SqlAlchemyRefreshTokenRepository, get_session_factory=session_factory_getter
    )
    document_password_reset_token_repository = providers.Singleton(
        MongoPasswordResetTokenRepository
    )
    relational_password_reset_token_repository = providers.Singleton(
        SqlAlchemyPasswordResetTokenRepository, get_session_factory=session_factory_getter
    )

    repository_factory = providers.Singleton(
        RepositoryFactory,
        document_user_repository=document_user_repository,
        relational_user_repository=relational_user_repository,
        document_refresh_token_repository=document_refresh_token_repository,
        relational_refresh_token_repository=relational_refresh_token_repository,
        document_password_reset_token_repository=document_password_reset_token_repository,
        relational_password_reset_token_repository=relational_password_reset_token_repository,
    )

    token_service = providers.Singleton(JwtTokenService, settings=settings)

    # Application services
    authentication_service = providers.Factory(
        AuthenticationService,
        repository_factory=repository_factory,
        token_service=token_service,
        password_reset_ttl_minutes=settings.provided.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES,
    )
    user_profile_service = providers.Factory(
        UserProfileService, repository_factory=repository_factory
    )
    user_management_service = providers.Factory(
        UserManagementService, repository_factory=repository_factory
    )


container = Container()
