"""Repository factory handing out the process-wide adapter instances."""

from userhub.application.identity.protocols.password_reset_token_repository import (
    PasswordResetTokenRepositoryProtocol,
)
from userhub.application.identity.protocols.refresh_token_repository import (
    RefreshTokenRepositoryProtocol,
)
from userhub.application.identity.protocols.user_repository import UserRepositoryProtocol


class RepositoryFactory:
    """
    Holds one instance per (entity, store) pair.

    Instances are built once by the container and passed in; callers only
    see the repository protocols.
    """

    def __init__(
        self,
        document_user_repository: UserRepositoryProtocol,
        relational_user_repository: UserRepositoryProtocol,
        document_refresh_token_repository: RefreshTokenRepositoryProtocol,
        relational_refresh_token_repository: RefreshTokenRepositoryProtocol,
        document_password_reset_token_repository: PasswordResetTokenRepositoryProtocol,
        relational_password_reset_token_repository: PasswordResetTokenRepositoryProtocol,
    ) -> None:
        self._document_user_repository = document_user_repository
        self._relational_user_repository = relational_user_repository
        self._document_refresh_token_repository = document_refresh_token_repository
        self._relational_refresh_token_repository = relational_refresh_token_repository
        self._document_password_reset_token_repository = document_password_reset_token_repository
        self._relational_password_reset_token_repository = (
            relational_password_reset_token_repository
        )

    def document_user_repository(self) -> UserRepositoryProtocol:
        return self._document_user_repository

    def relational_user_repository(self) -> UserRepositoryProtocol:
        return self._relational_user_repository

    def document_refresh_token_repository(self) -> RefreshTokenRepositoryProtocol:
        return self._document_refresh_token_repository

    def relational_refresh_token_repository(self) -> RefreshTokenRepositoryProtocol:
        return self._relational_refresh_token_repository

    def document_password_reset_token_repository(self) -> PasswordResetTokenRepositoryProtocol:
        return self._document_password_reset_token_repository

    def relational_password_reset_token_repository(self) -> PasswordResetTokenRepositoryProtocol:
        return self._relational_password_reset_token_repository
