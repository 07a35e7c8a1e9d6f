"""Use case for partially updating a user."""

import structlog

from userhub.application.common.dual_write import dual_write
from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from userhub.application.identity.use_cases.dtos.user_dtos import UpdateUserInput, UserDTO
from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from userhub.domain.identity.value_objects.email import Email
from userhub.domain.identity.value_objects.role import Role

logger = structlog.get_logger(__name__)


class UpdateUserUseCase:
    """Use case for updating user profile fields."""

    def __init__(
        self,
        document_user_repository: UserRepositoryProtocol,
        relational_user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.document_user_repository = document_user_repository
        self.relational_user_repository = relational_user_repository

    async def update_user(self, user_id: str, data: UpdateUserInput) -> UserDTO:
        """
        Apply the fields present in ``data`` and write the user to both stores.

        Args:
            user_id: ID of the user to update
            data: Fields to change; None leaves a field untouched

        Returns:
            The updated user

        Raises:
            UserNotFoundError: If the user does not exist
            EmailAlreadyExistsError: If the new email belongs to another user
            ValidationError: If a new value is invalid
        """
        uid = UserId.from_string(user_id)
        user = await self.document_user_repository.find_by_id(uid)
        if user is None:
            raise UserNotFoundError(user_id)

        if data.name is not None:
            user.update_name(data.name)

        if data.email is not None:
            email = Email(data.email)
            if email != user.email:
                existing = await self.document_user_repository.find_by_email(email)
                if existing is not None and existing.id != uid:
                    raise EmailAlreadyExistsError(
                        email.value, message="Email already taken by another user"
                    )
            user.update_email(email)

        if data.age is not None:
            user.update_age(data.age)

        if data.role is not None:
            user.update_role(Role.create(data.role))

        await dual_write(
            "user_updated",
            lambda: self.document_user_repository.update(user),
            lambda: self.relational_user_repository.update(user),
            user_id=user.id.value,
        )

        logger.info("user_updated", user_id=user.id.value)
        return UserDTO.from_entity(user)
