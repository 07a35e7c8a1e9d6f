"""Use case for deleting a user from both stores."""

import structlog

from userhub.application.common.dual_write import dual_write
from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from userhub.domain.common.exceptions import EntityNotFoundError
from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class DeleteUserUseCase:
    """Use case for deleting users."""

    def __init__(
        self,
        document_user_repository: UserRepositoryProtocol,
        relational_user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.document_user_repository = document_user_repository
        self.relational_user_repository = relational_user_repository

    async def delete_user(self, user_id: str) -> None:
        """
        Delete a user after checking it exists in the read store.

        A store that no longer holds the user is tolerated. Any other store
        failure propagates.

        Args:
            user_id: ID of the user to delete

        Raises:
            UserNotFoundError: If the user does not exist in the read store
        """
        uid = UserId.from_string(user_id)
        if not await self.document_user_repository.exists(uid):
            raise UserNotFoundError(user_id)

        await dual_write(
            "user_deleted",
            lambda: self._delete_from(self.document_user_repository, uid, "document"),
            lambda: self._delete_from(self.relational_user_repository, uid, "relational"),
            user_id=user_id,
        )

        logger.info("user_deleted", user_id=user_id)

    @staticmethod
    async def _delete_from(repository: UserRepositoryProtocol, user_id: UserId, store: str) -> None:
        try:
            await repository.delete(user_id)
        except EntityNotFoundError:
            logger.warning("user_already_absent", user_id=user_id.value, store=store)
