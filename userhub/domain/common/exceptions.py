"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated, lookups fail or a store rejects a write.
Every kind carries a stable error code; the infrastructure layer maps
kinds to HTTP status codes and renders the error envelope.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Invalid email format, age out of range, weak password.
    """

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a user by ID that doesn't exist.
    """

    error_code = "RESOURCE_NOT_FOUND"

    def __init__(
        self, entity_type: str, entity_id: object = None, message: str | None = None
    ) -> None:
        details: dict[str, object] = {"entity_type": entity_type}
        if entity_id is not None:
            details["entity_id"] = entity_id
        super().__init__(message or f"{entity_type} not found", details)
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConflictError(DomainError):
    """
    Raised when a write violates a uniqueness rule in either store.

    Example: Registering an email that is already taken.
    """

    error_code = "RESOURCE_ALREADY_EXISTS"


class UnauthorizedError(DomainError):
    """
    Raised when credentials or tokens are rejected.

    Example: Wrong password, revoked refresh token.
    """

    error_code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ForbiddenError(DomainError):
    """
    Raised when an authenticated caller lacks the required role.

    Example: A USER trying to delete another account.
    """

    error_code = "FORBIDDEN"

    def __init__(self, message: str = "Insufficient permissions") -> None:
        super().__init__(message)


class PersistenceError(DomainError):
    """
    Raised when a store fails for a reason other than a uniqueness violation.

    Example: Connection refused, server selection timeout.
    """

    error_code = "DATABASE_ERROR"

    def __init__(
        self, message: str = "Database operation failed", store: str | None = None
    ) -> None:
        super().__init__(message, {"store": store} if store else None)
        self.store = store
