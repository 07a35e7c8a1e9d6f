"""Use case for rotating a refresh token."""

import structlog

from userhub.application.common.dual_write import dual_write
from userhub.application.identity.protocols.refresh_token_repository import (
    RefreshTokenRepositoryProtocol,
)
from userhub.application.identity.protocols.token_service import (
    TokenClaims,
    TokenServiceProtocol,
    TokenVerificationError,
)
from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol
from userhub.application.identity.use_cases.dtos.auth_dtos import TokenPairDTO
from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.entities.refresh_token import RefreshToken
from userhub.domain.identity.exceptions import InvalidRefreshTokenError, UserNotFoundError

logger = structlog.get_logger(__name__)


class RefreshTokenUseCase:
    """Use case for exchanging a refresh token for a new token pair."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        document_refresh_token_repository: RefreshTokenRepositoryProtocol,
        relational_refresh_token_repository: RefreshTokenRepositoryProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.document_refresh_token_repository = document_refresh_token_repository
        self.relational_refresh_token_repository = relational_refresh_token_repository
        self.token_service = token_service

    async def refresh_token(self, token: str) -> TokenPairDTO:
        """
        Rotate a refresh token.

        The old token is deleted from both stores and a new one is written to
        both, so every refresh token can be used exactly once.

        Args:
            token: Refresh token previously issued by login, register or refresh

        Returns:
            New access and refresh tokens

        Raises:
            InvalidRefreshTokenError: If the token is invalid, expired, revoked
                or does not match its owner
            UserNotFoundError: If the owning account no longer exists
        """
        try:
            claims = self.token_service.verify_refresh_token(token)
        except TokenVerificationError:
            logger.warning("refresh_rejected", reason="verification_failed")
            raise InvalidRefreshTokenError from None

        stored = await self.document_refresh_token_repository.find_by_token(token)
        if stored is None:
            logger.warning("refresh_rejected", reason="revoked", user_id=claims.user_id)
            raise InvalidRefreshTokenError("Refresh token not found or has been revoked")

        if stored.is_expired():
            await self._revoke(stored.token)
            raise InvalidRefreshTokenError("Refresh token has expired")

        user_id = UserId.from_string(claims.user_id)
        if not stored.belongs_to_user(user_id):
            logger.warning("refresh_rejected", reason="owner_mismatch", user_id=claims.user_id)
            raise InvalidRefreshTokenError("Token mismatch")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id.value)

        token_pair = self.token_service.issue_token_pair(TokenClaims.for_user(user))
        new_token = RefreshToken.create(
            token_pair.refresh_token, user.id, token_pair.refresh_token_expires_at
        )

        await self._revoke(stored.token)
        await dual_write(
            "refresh_token_issued",
            lambda: self.document_refresh_token_repository.save(new_token),
            lambda: self.relational_refresh_token_repository.save(new_token),
            user_id=user.id.value,
        )

        logger.info("refresh_token_rotated", user_id=user.id.value)

        return TokenPairDTO(
            access_token=token_pair.access_token, refresh_token=token_pair.refresh_token
        )

    async def _revoke(self, token: str) -> None:
        await dual_write(
            "refresh_token_revoked",
            lambda: self.document_refresh_token_repository.delete_by_token(token),
            lambda: self.relational_refresh_token_repository.delete_by_token(token),
        )
