from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from userhub.application.identity.use_cases.dtos.user_dtos import UserDTO


class GetAllUsersUseCase:
    """List every user, newest first, from the read store."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    async def get_all_users(self) -> list[UserDTO]:
        users = await self.user_repository.find_all()
        return [UserDTO.from_entity(user) for user in users]
