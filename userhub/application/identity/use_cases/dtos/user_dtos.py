"""DTOs for user lifecycle use cases."""

from dataclasses import dataclass
from datetime import datetime

from userhub.domain.identity.entities.user import User


@dataclass(frozen=True)
class UserDTO:
    """Public projection of a user. Never carries the password hash."""

    id: str
    name: str
    email: str
    role: str
    age: int | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id.value,
            name=user.name,
            email=user.email.value,
            role=str(user.role),
            age=user.age,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class CreateUserInput:
    """Admin-side user creation. A temporary password is generated when none is given."""

    name: str
    email: str
    age: int | None = None
    role: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class UpdateUserInput:
    """Partial update; None means "leave unchanged"."""

    name: str | None = None
    email: str | None = None
    age: int | None = None
    role: str | None = None
