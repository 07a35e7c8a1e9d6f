"""Application service for authentication operations."""

from userhub.application.identity.password_reset_tokens import DEFAULT_RESET_TOKEN_TTL_MINUTES
from userhub.application.identity.protocols.repository_factory import RepositoryFactoryProtocol
from userhub.application.identity.protocols.token_service import TokenServiceProtocol
from userhub.application.identity.use_cases.authentication import (
    LoginUserUseCase,
    LogoutUserUseCase,
    PurgeExpiredTokensUseCase,
    RefreshTokenUseCase,
    RegisterUserUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
)
from userhub.application.identity.use_cases.dtos.auth_dtos import (
    AuthTokenDTO,
    LoginUserInput,
    PasswordResetRequestResult,
    PurgeExpiredTokensResult,
    RegisterUserInput,
    ResetPasswordInput,
    TokenPairDTO,
)


class AuthenticationService:
    """
    Application service for authentication operations.

    Each call builds its use case with repositories resolved from the factory.
    """

    def __init__(
        self,
        repository_factory: RepositoryFactoryProtocol,
        token_service: TokenServiceProtocol,
        password_reset_ttl_minutes: int = DEFAULT_RESET_TOKEN_TTL_MINUTES,
    ) -> None:
        """Initialize service with the repository factory and token service."""
        self.repositories = repository_factory
        self.token_service = token_service
        self.password_reset_ttl_minutes = password_reset_ttl_minutes

    async def register(self, data: RegisterUserInput) -> AuthTokenDTO:
        repos = self.repositories
        use_case = RegisterUserUseCase(
            document_user_repository=repos.document_user_repository(),
            relational_user_repository=repos.relational_user_repository(),
            document_refresh_token_repository=repos.document_refresh_token_repository(),
            relational_refresh_token_repository=repos.relational_refresh_token_repository(),
            token_service=self.token_service,
        )
        return await use_case.register_user(data)

    async def login(self, data: LoginUserInput) -> AuthTokenDTO:
        repos = self.repositories
        use_case = LoginUserUseCase(
            user_repository=repos.document_user_repository(),
            document_refresh_token_repository=repos.document_refresh_token_repository(),
            relational_refresh_token_repository=repos.relational_refresh_token_repository(),
            token_service=self.token_service,
        )
        return await use_case.login(data)

    async def refresh_token(self, refresh_token: str) -> TokenPairDTO:
        repos = self.repositories
        use_case = RefreshTokenUseCase(
            user_repository=repos.document_user_repository(),
            document_refresh_token_repository=repos.document_refresh_token_repository(),
            relational_refresh_token_repository=repos.relational_refresh_token_repository(),
            token_service=self.token_service,
        )
        return await use_case.refresh_token(refresh_token)

    async def logout(self, user_id: str) -> None:
        """Log out of every device."""
        await self._logout_use_case().logout(user_id)

    async def logout_device(self, refresh_token: str) -> None:
        await self._logout_use_case().logout_device(refresh_token)

    async def request_password_reset(self, email: str) -> PasswordResetRequestResult:
        repos = self.repositories
        use_case = RequestPasswordResetUseCase(
            user_repository=repos.document_user_repository(),
            document_reset_token_repository=repos.document_password_reset_token_repository(),
            relational_reset_token_repository=repos.relational_password_reset_token_repository(),
            token_ttl_minutes=self.password_reset_ttl_minutes,
        )
        return await use_case.request_reset(email)

    async def reset_password(self, data: ResetPasswordInput) -> None:
        repos = self.repositories
        use_case = ResetPasswordUseCase(
            document_user_repository=repos.document_user_repository(),
            relational_user_repository=repos.relational_user_repository(),
            document_reset_token_repository=repos.document_password_reset_token_repository(),
            relational_reset_token_repository=repos.relational_password_reset_token_repository(),
        )
        await use_case.reset_password(data)

    async def purge_expired_tokens(self) -> PurgeExpiredTokensResult:
        """Sweep expired refresh and reset tokens from both stores."""
        repos = self.repositories
        use_case = PurgeExpiredTokensUseCase(
            document_refresh_token_repository=repos.document_refresh_token_repository(),
            relational_refresh_token_repository=repos.relational_refresh_token_repository(),
            document_reset_token_repository=repos.document_password_reset_token_repository(),
            relational_reset_token_repository=repos.relational_password_reset_token_repository(),
        )
        return await use_case.purge()

    def _logout_use_case(self) -> LogoutUserUseCase:
        repos = self.repositories
        return LogoutUserUseCase(
            document_refresh_token_repository=repos.document_refresh_token_repository(),
            relational_refresh_token_repository=repos.relational_refresh_token_repository(),
        )
