"""Identity domain exceptions."""

from userhub.domain.common.exceptions import (
    ConflictError,
    EntityNotFoundError,
    UnauthorizedError,
)


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: str | None = None, message: str = "User not found") -> None:
        super().__init__("User", user_id, message)


class EmailAlreadyExistsError(ConflictError):
    """Raised when an email is already registered."""

    def __init__(
        self, email: str | None = None, message: str = "User with this email already exists"
    ) -> None:
        super().__init__(message, {"email": email} if email else None)
        self.email = email


class InvalidCredentialsError(UnauthorizedError):
    """Raised for a failed login. Never says whether the email exists."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidRefreshTokenError(UnauthorizedError):
    def __init__(self, message: str = "Invalid or expired refresh token") -> None:
        super().__init__(message)


class InvalidPasswordResetTokenError(UnauthorizedError):
    def __init__(self, message: str = "Invalid or expired password reset token") -> None:
        super().__init__(message)


class DuplicateTokenError(ConflictError):
    """Raised when a token (or token hash) collides with a stored one."""

    def __init__(self, message: str = "Token already exists") -> None:
        super().__init__(message)
