from typing import Protocol

from userhub.domain.common.value_objects.ids import RefreshTokenId, UserId
from userhub.domain.identity.entities.refresh_token import RefreshToken


class RefreshTokenRepositoryProtocol(Protocol):
    async def save(self, token: RefreshToken) -> None: ...

    async def find_by_id(self, token_id: RefreshTokenId) -> RefreshToken | None: ...

    async def find_by_token(self, token: str) -> RefreshToken | None: ...

    async def delete_by_token(self, token: str) -> None: ...

    async def delete_all_by_user_id(self, user_id: UserId) -> None: ...

    async def delete_expired(self) -> int: ...
