"""Use case for sweeping expired refresh and reset tokens from both stores."""

import structlog

from userhub.application.identity.protocols.password_reset_token_repository import (
    PasswordResetTokenRepositoryProtocol,
)
from userhub.application.identity.protocols.refresh_token_repository import (
    RefreshTokenRepositoryProtocol,
)
from userhub.application.identity.use_cases.dtos.auth_dtos import PurgeExpiredTokensResult

logger = structlog.get_logger(__name__)


class PurgeExpiredTokensUseCase:
    """
    Remove expired token records.

    The document store also expires tokens through its TTL index; the
    relational store relies on this sweep alone.
    """

    def __init__(
        self,
        document_refresh_token_repository: RefreshTokenRepositoryProtocol,
        relational_refresh_token_repository: RefreshTokenRepositoryProtocol,
        document_reset_token_repository: PasswordResetTokenRepositoryProtocol,
        relational_reset_token_repository: PasswordResetTokenRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.document_refresh_token_repository = document_refresh_token_repository
        self.relational_refresh_token_repository = relational_refresh_token_repository
        self.document_reset_token_repository = document_reset_token_repository
        self.relational_reset_token_repository = relational_reset_token_repository

    async def purge(self) -> PurgeExpiredTokensResult:
        document_refresh = await self.document_refresh_token_repository.delete_expired()
        relational_refresh = await self.relational_refresh_token_repository.delete_expired()
        document_reset = await self.document_reset_token_repository.delete_expired()
        relational_reset = await self.relational_reset_token_repository.delete_expired()
        result = PurgeExpiredTokensResult(
            document_refresh_tokens=document_refresh,
            relational_refresh_tokens=relational_refresh,
            document_password_reset_tokens=document_reset,
            relational_password_reset_tokens=relational_reset,
        )
        logger.info(
            "expired_tokens_purged",
            document_refresh_tokens=result.document_refresh_tokens,
            relational_refresh_tokens=result.relational_refresh_tokens,
            document_password_reset_tokens=result.document_password_reset_tokens,
            relational_password_reset_tokens=result.relational_password_reset_tokens,
        )
        return result
