"""Identity value objects."""

from .email import Email
from .password import Password
from .role import ROLE_RANKS, Role, UserRole, role_rank

__all__ = [
    "ROLE_RANKS",
    "Email",
    "Password",
    "Role",
    "UserRole",
    "role_rank",
]
