"""Use case for user registration."""

import structlog

from userhub.application.common.dual_write import dual_write
from userhub.application.identity.protocols.refresh_token_repository import (
    RefreshTokenRepositoryProtocol,
)
from userhub.application.identity.protocols.token_service import (
    TokenClaims,
    TokenServiceProtocol,
)
from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from userhub.application.identity.use_cases.dtos.auth_dtos import AuthTokenDTO, RegisterUserInput
from userhub.application.identity.use_cases.dtos.user_dtos import UserDTO
from userhub.domain.identity.entities.refresh_token import RefreshToken
from userhub.domain.identity.entities.user import User
from userhub.domain.identity.exceptions import EmailAlreadyExistsError
from userhub.domain.identity.value_objects.email import Email
from userhub.domain.identity.value_objects.password import Password
from userhub.domain.identity.value_objects.role import Role

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        document_user_repository: UserRepositoryProtocol,
        relational_user_repository: UserRepositoryProtocol,
        document_refresh_token_repository: RefreshTokenRepositoryProtocol,
        relational_refresh_token_repository: RefreshTokenRepositoryProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.document_user_repository = document_user_repository
        self.relational_user_repository = relational_user_repository
        self.document_refresh_token_repository = document_refresh_token_repository
        self.relational_refresh_token_repository = relational_refresh_token_repository
        self.token_service = token_service

    async def register_user(self, data: RegisterUserInput) -> AuthTokenDTO:
        """
        Register a new user account and log it in.

        Args:
            data: Name, email, plain text password and optional age and role

        Returns:
            Access and refresh tokens plus the created user

        Raises:
            ValidationError: If any field is invalid or the password is weak
            EmailAlreadyExistsError: If email is already registered
        """
        email = Email(data.email)
        if await self.document_user_repository.find_by_email(email):
            raise EmailAlreadyExistsError(email.value)

        password = await Password.create(data.password)
        role = Role.create(data.role) if data.role else Role.default()
        user = User.create(name=data.name, email=email, password=password, role=role, age=data.age)

        await dual_write(
            "user_registered",
            lambda: self.document_user_repository.save(user),
            lambda: self.relational_user_repository.save(user),
            user_id=user.id.value,
        )

        token_pair = self.token_service.issue_token_pair(TokenClaims.for_user(user))
        refresh_token = RefreshToken.create(
            token_pair.refresh_token, user.id, token_pair.refresh_token_expires_at
        )
        await dual_write(
            "refresh_token_issued",
            lambda: self.document_refresh_token_repository.save(refresh_token),
            lambda: self.relational_refresh_token_repository.save(refresh_token),
            user_id=user.id.value,
        )

        logger.info("user_registered", user_id=user.id.value, email=email.value)

        return AuthTokenDTO(
            access_token=token_pair.access_token,
            refresh_token=token_pair.refresh_token,
            user=UserDTO.from_entity(user),
        )
