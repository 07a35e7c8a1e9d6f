"""Email value object."""

import re
from dataclasses import dataclass

from userhub.domain.common.exceptions import ValidationError
from userhub.domain.common.value_object import ValueObject

MAX_EMAIL_LENGTH = 255

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email(ValueObject):
    """
    A normalized email address.

    The stored value is always trimmed and lower-cased, so two emails that
    differ only in case or surrounding whitespace are equal.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("Invalid email format", field="email")
        normalized = self.value.strip().lower()
        if len(normalized) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email"
            )
        if not _EMAIL_PATTERN.match(normalized):
            raise ValidationError("Invalid email format", field="email", value=self.value)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
