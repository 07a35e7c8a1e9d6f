from typing import Protocol

from userhub.domain.common.value_objects.ids import PasswordResetTokenId, UserId
from userhub.domain.identity.entities.password_reset_token import PasswordResetToken


class PasswordResetTokenRepositoryProtocol(Protocol):
    async def save(self, token: PasswordResetToken) -> None: ...

    async def find_by_id(self, token_id: PasswordResetTokenId) -> PasswordResetToken | None: ...

    async def find_by_token_hash(self, token_hash: str) -> PasswordResetToken | None: ...

    async def delete_by_id(self, token_id: PasswordResetTokenId) -> None: ...

    async def delete_all_by_user_id(self, user_id: UserId) -> None: ...

    async def delete_expired(self) -> int: ...
