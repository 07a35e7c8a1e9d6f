"""
Base class for Value Objects.

A value object has no identity of its own: ``Email("a@b.io")`` equals any
other ``Email("a@b.io")``. Subclasses are frozen dataclasses that validate
(and, where needed, normalize) in ``__post_init__``.

Example:
    @dataclass(frozen=True)
    class Role(ValueObject):
        value: UserRole

        def __post_init__(self) -> None:
            if not isinstance(self.value, UserRole):
                raise ValidationError("Invalid role")
"""

from dataclasses import astuple


class ValueObject:
    """Equality and hashing over all fields; ``to_primitive`` for single-field objects."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return astuple(self) == astuple(other)  # type: ignore[call-overload]

    def __hash__(self) -> int:
        return hash((type(self).__name__, *astuple(self)))  # type: ignore[call-overload]

    def to_primitive(self) -> object:
        """The wrapped value, ready for JSON or a store column."""
        (value,) = astuple(self)  # type: ignore[call-overload]
        return value
