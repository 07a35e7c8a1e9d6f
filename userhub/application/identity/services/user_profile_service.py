"""Application service for reading user profiles."""

from userhub.application.identity.protocols.repository_factory import RepositoryFactoryProtocol
from userhub.application.identity.use_cases.dtos.user_dtos import UserDTO
from userhub.application.identity.use_cases.users import GetAllUsersUseCase, GetUserByIdUseCase


class UserProfileService:
    """Read-only user operations; every lookup goes to the document store."""

    def __init__(self, repository_factory: RepositoryFactoryProtocol) -> None:
        """Initialize service with the repository factory."""
        self.repositories = repository_factory

    async def get_user_profile(self, user_id: str) -> UserDTO:
        use_case = GetUserByIdUseCase(self.repositories.document_user_repository())
        return await use_case.get_user(user_id)

    async def get_all_user_profiles(self) -> list[UserDTO]:
        use_case = GetAllUsersUseCase(self.repositories.document_user_repository())
        return await use_case.get_all_users()
