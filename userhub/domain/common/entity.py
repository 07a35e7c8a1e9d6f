"""
Entity identifiers and the Entity base class.

Identifiers are generated here, before anything is written, because the
same key has to land in the document store and in the relational mirror.

Example:
    @dataclass(eq=False)
    class RefreshToken(Entity[RefreshTokenId]):
        id: RefreshTokenId
        token: str
        user_id: UserId

    token = RefreshToken(id=RefreshTokenId.generate(), token="...", user_id=user.id)
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import uuid4

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a UUID string. They are generated
    by the domain (never by a store) so that both stores receive the same key.

    Example:
        @dataclass(frozen=True)
        class UserId(EntityId):
            pass

        user_id = UserId.generate()
        token_id = RefreshTokenId(user_id.value)
        # These are different types, preventing accidental mixing
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(
                f"{self.__class__.__name__} cannot be empty", field="id", value=self.value
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Generate a fresh random identifier."""
        return cls(str(uuid4()))

    @classmethod
    def from_string(cls, value: str) -> Self:
        """
        Reconstruct an identifier from a trusted existing string.

        Raises:
            ValidationError: If the string is empty
        """
        return cls(value)

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Mutable domain object compared by ``id`` alone.

    Declare subclasses with @dataclass(eq=False); the generated dataclass
    __eq__ would otherwise compare every field.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
