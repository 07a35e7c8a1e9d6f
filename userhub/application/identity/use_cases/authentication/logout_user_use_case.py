"""Use case for revoking refresh tokens."""

import structlog

from userhub.application.common.dual_write import dual_write
from userhub.application.identity.protocols.refresh_token_repository import (
    RefreshTokenRepositoryProtocol,
)
from userhub.domain.common.value_objects.ids import UserId

logger = structlog.get_logger(__name__)


class LogoutUserUseCase:
    """Use case for logging out of one device or of all devices."""

    def __init__(
        self,
        document_refresh_token_repository: RefreshTokenRepositoryProtocol,
        relational_refresh_token_repository: RefreshTokenRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.document_refresh_token_repository = document_refresh_token_repository
        self.relational_refresh_token_repository = relational_refresh_token_repository

    async def logout(self, user_id: str) -> None:
        """Revoke every refresh token owned by the user."""
        uid = UserId.from_string(user_id)
        await dual_write(
            "user_logged_out",
            lambda: self.document_refresh_token_repository.delete_all_by_user_id(uid),
            lambda: self.relational_refresh_token_repository.delete_all_by_user_id(uid),
            user_id=user_id,
        )
        logger.info("user_logged_out", user_id=user_id)

    async def logout_device(self, refresh_token: str) -> None:
        """Revoke a single refresh token. Unknown tokens are ignored."""
        await dual_write(
            "device_logged_out",
            lambda: self.document_refresh_token_repository.delete_by_token(refresh_token),
            lambda: self.relational_refresh_token_repository.delete_by_token(refresh_token),
        )
        logger.info("device_logged_out")
