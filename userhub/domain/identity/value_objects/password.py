"""
Password value object.

Holds only the one-way hash. Plain text enters through ``create`` (which
enforces the strength rules) or ``compare`` and is never kept on the object.
Hashing uses pwdlib's recommended hasher and runs in a worker thread so the
event loop keeps serving other requests.
"""

import asyncio
import re
from dataclasses import dataclass, field
from typing import Self

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from userhub.domain.common.exceptions import ValidationError
from userhub.domain.common.value_object import ValueObject

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128

_SPECIAL_CHARACTER = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")

password_hash = PasswordHash.recommended()


def _verify(plain_password: str, hashed_password: str) -> bool:
    try:
        return password_hash.verify(plain_password, hashed_password)
    except UnknownHashError:
        return False


@dataclass(frozen=True)
class Password(ValueObject):
    """A salted one-way password hash."""

    hashed_value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.hashed_value, str) or not self.hashed_value.strip():
            raise ValidationError("Hashed password cannot be empty", field="password")

    def __str__(self) -> str:
        return "********"

    @staticmethod
    def validate_strength(plain_password: str) -> None:
        """
        Check a plain-text password against the strength rules.

        Raises:
            ValidationError: On the first rule the password breaks
        """
        if len(plain_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                field="password",
            )
        if len(plain_password) > MAX_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password cannot exceed {MAX_PASSWORD_LENGTH} characters", field="password"
            )
        if not re.search(r"[A-Z]", plain_password):
            raise ValidationError(
                "Password must contain at least one uppercase letter", field="password"
            )
        if not re.search(r"[a-z]", plain_password):
            raise ValidationError(
                "Password must contain at least one lowercase letter", field="password"
            )
        if not re.search(r"\d", plain_password):
            raise ValidationError("Password must contain at least one number", field="password")
        if not _SPECIAL_CHARACTER.search(plain_password):
            raise ValidationError(
                "Password must contain at least one special character", field="password"
            )

    @classmethod
    async def create(cls, plain_password: str) -> Self:
        """
        Validate and hash a plain-text password.

        Args:
            plain_password: Password as typed by the user

        Returns:
            Password holding the new hash

        Raises:
            ValidationError: If the password is too weak
        """
        cls.validate_strength(plain_password)
        hashed = await asyncio.to_thread(password_hash.hash, plain_password)
        return cls(hashed)

    @classmethod
    def from_hash(cls, hashed_value: str) -> Self:
        """Rebuild from a stored hash. No strength validation is applied."""
        return cls(hashed_value)

    async def compare(self, plain_password: str) -> bool:
        """Check whether the plain-text candidate matches this hash."""
        return await asyncio.to_thread(_verify, plain_password, self.hashed_value)

    def to_primitive(self) -> str:
        return self.hashed_value


_dummy_password: Password | None = None


async def dummy_password() -> Password:
    """
    Hash used to spend comparable time when a login email is unknown.

    Computed once, in a worker thread, on first use.
    """
    global _dummy_password  # noqa: PLW0603
    if _dummy_password is None:
        hashed = await asyncio.to_thread(password_hash.hash, "dummy-password-for-timing")
        _dummy_password = Password(hashed)
    return _dummy_password
