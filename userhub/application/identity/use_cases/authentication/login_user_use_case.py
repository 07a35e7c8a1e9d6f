"""Use case for logging in with email and password."""

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
from userhub.application.identity.use_cases.dtos.auth_dtos import AuthTokenDTO, LoginUserInput
from userhub.application.identity.use_cases.dtos.user_dtos import UserDTO
from userhub.domain.common.exceptions import ValidationError
from userhub.domain.identity.entities.refresh_token import RefreshToken
from userhub.domain.identity.exceptions import InvalidCredentialsError
from userhub.domain.identity.value_objects.email import Email
from userhub.domain.identity.value_objects.password import dummy_password

logger = structlog.get_logger(__name__)


class LoginUserUseCase:
    """Use case for authenticating users."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        document_refresh_token_repository: RefreshTokenRepositoryProtocol,
        relational_refresh_token_repository: RefreshTokenRepositoryProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.document_refresh_token_repository = document_refresh_token_repository
        self.relational_refresh_token_repository = relational_refresh_token_repository
        self.token_service = token_service

    async def login(self, data: LoginUserInput) -> AuthTokenDTO:
        """
        Authenticate a user with email and password.

        Args:
            data: Email and plain text password

        Returns:
            Access and refresh tokens plus the user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        try:
            email = Email(data.email)
        except ValidationError:
            raise InvalidCredentialsError from None

        user = await self.user_repository.find_by_email(email)

        if user is None:
            # Same hashing cost as a real check so timing does not reveal the email
            dummy = await dummy_password()
            await dummy.compare(data.password)
            logger.warning("login_failed", reason="unknown_email")
            raise InvalidCredentialsError

        if not await user.verify_password(data.password):
            logger.warning("login_failed", reason="wrong_password", user_id=user.id.value)
            raise InvalidCredentialsError

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

        logger.info("user_authenticated", user_id=user.id.value)

        return AuthTokenDTO(
            access_token=token_pair.access_token,
            refresh_token=token_pair.refresh_token,
            user=UserDTO.from_entity(user),
        )
