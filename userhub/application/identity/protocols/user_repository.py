from typing import Protocol

from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.entities.user import User
from userhub.domain.identity.value_objects.email import Email


class UserRepositoryProtocol(Protocol):
    async def save(self, user: User) -> None: ...

    async def find_by_id(self, user_id: UserId) -> User | None: ...

    async def find_by_email(self, email: Email) -> User | None: ...

    async def find_all(self) -> list[User]: ...

    async def update(self, user: User) -> None: ...

    async def delete(self, user_id: UserId) -> None: ...

    async def exists(self, user_id: UserId) -> bool: ...
