"""Use case for completing a password reset."""

import structlog

from userhub.application.common.dual_write import dual_write
from userhub.application.identity.password_reset_tokens import hash_reset_token
from userhub.application.identity.protocols.password_reset_token_repository import (
    PasswordResetTokenRepositoryProtocol,
)
from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from userhub.application.identity.use_cases.dtos.auth_dtos import ResetPasswordInput
from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.entities.password_reset_token import PasswordResetToken
from userhub.domain.identity.entities.user import User
from userhub.domain.identity.exceptions import InvalidPasswordResetTokenError, UserNotFoundError
from userhub.domain.identity.value_objects.password import Password

logger = structlog.get_logger(__name__)


class ResetPasswordUseCase:
    """
    Use case for setting a new password with a reset token.

    This is the only flow that falls back to the relational mirror for reads:
    the token and its user are looked up in the document store first and in
    the relational store when the document store has no record. An owner
    found only in the mirror is written back to the document store with the
    new password.
    """

    def __init__(
        self,
        document_user_repository: UserRepositoryProtocol,
        relational_user_repository: UserRepositoryProtocol,
        document_reset_token_repository: PasswordResetTokenRepositoryProtocol,
        relational_reset_token_repository: PasswordResetTokenRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.document_user_repository = document_user_repository
        self.relational_user_repository = relational_user_repository
        self.document_reset_token_repository = document_reset_token_repository
        self.relational_reset_token_repository = relational_reset_token_repository

    async def reset_password(self, data: ResetPasswordInput) -> None:
        """
        Replace the password of the token's owner and consume the token.

        Args:
            data: Raw reset token and the new plain text password

        Raises:
            InvalidPasswordResetTokenError: If the token is unknown, consumed or expired
            UserNotFoundError: If the token's owner no longer exists
            ValidationError: If the new password is too weak
        """
        token_hash = hash_reset_token(data.token)
        reset_token = await self.document_reset_token_repository.find_by_token_hash(token_hash)
        if reset_token is None:
            reset_token = await self.relational_reset_token_repository.find_by_token_hash(
                token_hash
            )
        if reset_token is None:
            logger.warning("password_reset_rejected", reason="unknown_token")
            raise InvalidPasswordResetTokenError

        if reset_token.is_expired():
            await self._consume(reset_token)
            logger.warning(
                "password_reset_rejected", reason="expired", user_id=reset_token.user_id.value
            )
            raise InvalidPasswordResetTokenError("Password reset token has expired")

        user, in_document_store = await self._find_user(reset_token.user_id)
        if user is None:
            await self._consume(reset_token)
            raise UserNotFoundError(
                reset_token.user_id.value,
                message="User not found for this password reset request",
            )

        user.update_password(await Password.create(data.password))
        if in_document_store:
            document_write = self.document_user_repository.update
        else:
            logger.warning("password_reset_restoring_document_user", user_id=user.id.value)
            document_write = self.document_user_repository.save
        await dual_write(
            "password_reset",
            lambda: document_write(user),
            lambda: self.relational_user_repository.update(user),
            user_id=user.id.value,
        )
        await self._consume(reset_token)

        logger.info("password_reset_completed", user_id=user.id.value)

    async def _find_user(self, user_id: UserId) -> tuple[User | None, bool]:
        """Look the owner up, reporting whether the document store had the record."""
        user = await self.document_user_repository.find_by_id(user_id)
        if user is not None:
            return user, True
        return await self.relational_user_repository.find_by_id(user_id), False

    async def _consume(self, reset_token: PasswordResetToken) -> None:
        await dual_write(
            "password_reset_token_consumed",
            lambda: self.document_reset_token_repository.delete_by_id(reset_token.id),
            lambda: self.relational_reset_token_repository.delete_by_id(reset_token.id),
            user_id=reset_token.user_id.value,
        )
