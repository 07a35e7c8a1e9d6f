"""User entity for identity management."""

from dataclasses import dataclass, field
from datetime import datetime

from userhub.domain.common.entity import Entity
from userhub.domain.common.exceptions import ValidationError
from userhub.domain.common.time import utc_now
from userhub.domain.common.value_objects.ids import UserId
from userhub.domain.identity.value_objects.email import Email
from userhub.domain.identity.value_objects.password import Password
from userhub.domain.identity.value_objects.role import Role

# Domain constraints
MAX_NAME_LENGTH = 100
MIN_AGE = 0
MAX_AGE = 150


def _validate_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("User name cannot be empty", field="name")
    trimmed = name.strip()
    if len(trimmed) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"User name cannot exceed {MAX_NAME_LENGTH} characters", field="name"
        )
    return trimmed


def _validate_age(age: int | None) -> int | None:
    if age is None:
        return None
    if isinstance(age, bool) or not isinstance(age, int) or not MIN_AGE <= age <= MAX_AGE:
        raise ValidationError("Invalid age", field="age", value=age)
    return age


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing an account in the system.

    Business Rules:
    - Name is trimmed, non-empty and at most MAX_NAME_LENGTH characters
    - Email is normalized by the Email value object and unique per store
      (enforced at repository level)
    - Password is only ever held as a hash
    - Age is optional, between MIN_AGE and MAX_AGE inclusive
    - Every mutation bumps updated_at; created_at never changes
    """

    id: UserId
    name: str
    email: Email
    password: Password = field(repr=False)
    role: Role
    age: int | None
    created_at: datetime
    updated_at: datetime

    def _touch(self) -> None:
        self.updated_at = utc_now()

    def update_name(self, name: str) -> None:
        """
        Rename the user.

        Raises:
            ValidationError: If the name is empty or too long
        """
        self.name = _validate_name(name)
        self._touch()

    def update_email(self, email: Email | str) -> None:
        """
        Change the email address.

        Uniqueness is checked by the caller against the read store.

        Raises:
            ValidationError: If the email is malformed
        """
        self.email = email if isinstance(email, Email) else Email(email)
        self._touch()

    def update_age(self, age: int | None) -> None:
        """
        Change the age.

        Raises:
            ValidationError: If the age is out of range
        """
        self.age = _validate_age(age)
        self._touch()

    def update_password(self, password: Password) -> None:
        """Replace the password hash."""
        self.password = password
        self._touch()

    def update_role(self, role: Role) -> None:
        self.role = role
        self._touch()

    async def verify_password(self, plain_password: str) -> bool:
        """Check a plain-text candidate against the stored hash."""
        return await self.password.compare(plain_password)

    @classmethod
    def create(
        cls,
        name: str,
        email: Email | str,
        password: Password,
        role: Role | None = None,
        age: int | None = None,
    ) -> "User":
        """
        Create a new user.

        Args:
            name: Display name
            email: Email address (normalized here if given as a string)
            password: Already hashed password
            role: Role, USER when omitted
            age: Optional age

        Returns:
            New User instance with a generated id

        Raises:
            ValidationError: If any field is invalid
        """
        now = utc_now()
        return cls(
            id=UserId.generate(),
            name=_validate_name(name),
            email=email if isinstance(email, Email) else Email(email),
            password=password,
            role=role or Role.default(),
            age=_validate_age(age),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        name: str,
        email: Email,
        password: Password,
        role: Role,
        age: int | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """
        Reconstitute a user from persistence.

        Stored data was validated when it was written, so no rule is re-checked.
        """
        return cls(
            id=id,
            name=name,
            email=email,
            password=password,
            role=role,
            age=age,
            created_at=created_at,
            updated_at=updated_at,
        )
