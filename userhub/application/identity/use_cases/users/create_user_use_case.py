"""Use case for creating a user on behalf of an administrator."""

import secrets

import structlog

from userhub.application.common.dual_write import dual_write
from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from userhub.application.identity.use_cases.dtos.user_dtos import CreateUserInput, UserDTO
from userhub.domain.identity.entities.user import User
from userhub.domain.identity.exceptions import EmailAlreadyExistsError
from userhub.domain.identity.value_objects.email import Email
from userhub.domain.identity.value_objects.password import Password
from userhub.domain.identity.value_objects.role import Role

logger = structlog.get_logger(__name__)


def generate_temporary_password() -> str:
    """Random password that always satisfies the strength rules."""
    return f"{secrets.token_urlsafe(24)}Aa1!"


class CreateUserUseCase:
    """Use case for creating users outside of self-registration."""

    def __init__(
        self,
        document_user_repository: UserRepositoryProtocol,
        relational_user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.document_user_repository = document_user_repository
        self.relational_user_repository = relational_user_repository

    async def create_user(self, data: CreateUserInput) -> UserDTO:
        """
        Create a user in both stores.

        Args:
            data: Name, email and optional age, role and password

        Returns:
            The created user

        Raises:
            ValidationError: If any field is invalid
            EmailAlreadyExistsError: If the email is already registered
        """
        email = Email(data.email)
        if await self.document_user_repository.find_by_email(email):
            raise EmailAlreadyExistsError(email.value)

        password = await Password.create(data.password or generate_temporary_password())
        role = Role.create(data.role) if data.role else Role.default()
        user = User.create(name=data.name, email=email, password=password, role=role, age=data.age)

        await dual_write(
            "user_created",
            lambda: self.document_user_repository.save(user),
            lambda: self.relational_user_repository.save(user),
            user_id=user.id.value,
        )

        logger.info("user_created", user_id=user.id.value, role=str(user.role))
        return UserDTO.from_entity(user)
