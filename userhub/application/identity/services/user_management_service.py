"""Application service for user writes."""

from userhub.application.identity.protocols.repository_factory import RepositoryFactoryProtocol
from userhub.application.identity.use_cases.dtos.user_dtos import (
    CreateUserInput,
    UpdateUserInput,
    UserDTO,
)
from userhub.application.identity.use_cases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    UpdateUserUseCase,
)


class UserManagementService:
    """Create, update and delete users in both stores."""

    def __init__(self, repository_factory: RepositoryFactoryProtocol) -> None:
        """Initialize service with the repository factory."""
        self.repositories = repository_factory

    async def create_user(self, data: CreateUserInput) -> UserDTO:
        use_case = CreateUserUseCase(
            document_user_repository=self.repositories.document_user_repository(),
            relational_user_repository=self.repositories.relational_user_repository(),
        )
        return await use_case.create_user(data)

    async def update_user(self, user_id: str, data: UpdateUserInput) -> UserDTO:
        use_case = UpdateUserUseCase(
            document_user_repository=self.repositories.document_user_repository(),
            relational_user_repository=self.repositories.relational_user_repository(),
        )
        return await use_case.update_user(user_id, data)

    async def delete_user(self, user_id: str) -> None:
        use_case = DeleteUserUseCase(
            document_user_repository=self.repositories.document_user_repository(),
            relational_user_repository=self.repositories.relational_user_repository(),
        )
        await use_case.delete_user(user_id)
