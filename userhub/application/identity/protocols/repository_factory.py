from typing import Protocol

from .password_reset_token_repository import PasswordResetTokenRepositoryProtocol
from .refresh_token_repository import RefreshTokenRepositoryProtocol
from .user_repository import UserRepositoryProtocol


class RepositoryFactoryProtocol(Protocol):
    """
    Hands out the process-wide repository instances.

    "document" repositories back every read; "relational" repositories are
    the write mirror.
    """

    def document_user_repository(self) -> UserRepositoryProtocol: ...

    def relational_user_repository(self) -> UserRepositoryProtocol: ...

    def document_refresh_token_repository(self) -> RefreshTokenRepositoryProtocol: ...

    def relational_refresh_token_repository(self) -> RefreshTokenRepositoryProtocol: ...

    def document_password_reset_token_repository(
        self,
    ) -> PasswordResetTokenRepositoryProtocol: ...

    def relational_password_reset_token_repository(
        self,
    ) -> PasswordResetTokenRepositoryProtocol: ...
