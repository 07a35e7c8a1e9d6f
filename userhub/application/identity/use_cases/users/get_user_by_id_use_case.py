"""Use case for fetching a single user."""

from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from userhub.application.identity.use_cases.dtos.user_dtos import UserDTO
from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.exceptions import UserNotFoundError


class GetUserByIdUseCase:
    """Use case for retrieving a user by ID from the read store."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    async def get_user(self, user_id: str) -> UserDTO:
        """
        Get a user by ID.

        Args:
            user_id: User's ID

        Returns:
            User projection

        Raises:
            ValidationError: If the id is empty
            UserNotFoundError: If user is not found
        """
        user = await self.user_repository.find_by_id(UserId.from_string(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return UserDTO.from_entity(user)
