"""Use case for starting a password reset."""

import structlog

from userhub.application.common.dual_write import dual_write
from userhub.application.identity.password_reset_tokens import (
    DEFAULT_RESET_TOKEN_TTL_MINUTES,
    generate_reset_token,
    hash_reset_token,
    reset_token_expiry,
)
from userhub.application.identity.protocols.password_reset_token_repository import (
    PasswordResetTokenRepositoryProtocol,
)
from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from userhub.application.identity.use_cases.dtos.auth_dtos import PasswordResetRequestResult
from userhub.domain.identity.entities.password_reset_token import PasswordResetToken
from userhub.domain.identity.value_objects.email import Email

logger = structlog.get_logger(__name__)


class RequestPasswordResetUseCase:
    """Use case for issuing password reset tokens."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        document_reset_token_repository: PasswordResetTokenRepositoryProtocol,
        relational_reset_token_repository: PasswordResetTokenRepositoryProtocol,
        token_ttl_minutes: int = DEFAULT_RESET_TOKEN_TTL_MINUTES,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.document_reset_token_repository = document_reset_token_repository
        self.relational_reset_token_repository = relational_reset_token_repository
        self.token_ttl_minutes = token_ttl_minutes

    async def request_reset(self, email: str) -> PasswordResetRequestResult:
        """
        Issue a new reset token for the account with this email.

        Any earlier reset tokens of the user are deleted first. The raw token
        is only returned here; the stores keep its hash.

        Args:
            email: Email the reset was requested for

        Returns:
            Raw token and expiry, or an empty result if the email is unknown

        Raises:
            ValidationError: If the email is malformed
        """
        user = await self.user_repository.find_by_email(Email(email))
        if user is None:
            logger.info("password_reset_requested_for_unknown_email")
            return PasswordResetRequestResult()

        await dual_write(
            "password_reset_tokens_superseded",
            lambda: self.document_reset_token_repository.delete_all_by_user_id(user.id),
            lambda: self.relational_reset_token_repository.delete_all_by_user_id(user.id),
            user_id=user.id.value,
        )

        raw_token = generate_reset_token()
        reset_token = PasswordResetToken.create(
            hash_reset_token(raw_token), user.id, reset_token_expiry(self.token_ttl_minutes)
        )
        await dual_write(
            "password_reset_token_issued",
            lambda: self.document_reset_token_repository.save(reset_token),
            lambda: self.relational_reset_token_repository.save(reset_token),
            user_id=user.id.value,
        )

        logger.info("password_reset_requested", user_id=user.id.value)

        return PasswordResetRequestResult(reset_token=raw_token, expires_at=reset_token.expires_at)
