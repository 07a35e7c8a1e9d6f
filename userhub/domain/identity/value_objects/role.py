"""Role value object and the role hierarchy."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from userhub.domain.common.exceptions import ValidationError
from userhub.domain.common.value_object import ValueObject


class UserRole(StrEnum):
    USER = "USER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


ROLE_RANKS: dict[UserRole, int] = {
    UserRole.USER: 1,
    UserRole.MODERATOR: 2,
    UserRole.ADMIN: 3,
}


def role_rank(role: UserRole) -> int:
    """Numeric rank of a role; higher ranks include the lower ones."""
    return ROLE_RANKS[role]


@dataclass(frozen=True)
class Role(ValueObject):
    """
    A user's role.

    Business Rules:
    - Only USER, MODERATOR and ADMIN exist
    - Parsing is case-insensitive
    - ADMIN includes MODERATOR, which includes USER
    """

    value: UserRole

    def __post_init__(self) -> None:
        if not isinstance(self.value, UserRole):
            raise ValidationError("Invalid role", field="role", value=self.value)

    def __str__(self) -> str:
        return self.value.value

    @classmethod
    def create(cls, value: str) -> Self:
        """
        Parse a role name.

        Raises:
            ValidationError: If the name is not one of the known roles
        """
        try:
            return cls(UserRole(value.strip().upper()))
        except (ValueError, AttributeError):
            allowed = ", ".join(role.value for role in UserRole)
            raise ValidationError(
                f"Invalid role: {value}. Allowed roles: {allowed}", field="role", value=value
            ) from None

    @classmethod
    def default(cls) -> Self:
        return cls(UserRole.USER)

    def has_permission(self, required: "Role | UserRole") -> bool:
        """True if this role ranks at or above the required one."""
        required_role = required.value if isinstance(required, Role) else required
        return role_rank(self.value) >= role_rank(required_role)

    def is_admin(self) -> bool:
        return self.value is UserRole.ADMIN

    def is_moderator(self) -> bool:
        return self.value is UserRole.MODERATOR

    def is_user(self) -> bool:
        return self.value is UserRole.USER

    def to_primitive(self) -> str:
        return self.value.value
