"""FastAPI dependencies for identity and authentication."""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from userhub.application.identity.protocols.token_service import (
    TokenClaims,
    TokenExpiredError,
    TokenVerificationError,
)
from userhub.core import container
from userhub.domain.common.exceptions import ForbiddenError, UnauthorizedError
from userhub.domain.identity.value_objects.role import Role, UserRole

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenClaims:
    """
    Get the caller's identity from the bearer access token.

    Raises:
        UnauthorizedError: If the token is missing, invalid or expired
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")
    try:
        return container.token_service().verify_access_token(credentials.credentials)
    except TokenExpiredError:
        raise UnauthorizedError("Access token has expired") from None
    except TokenVerificationError:
        raise UnauthorizedError("Invalid access token") from None


CurrentPrincipal = Annotated[TokenClaims, Depends(get_current_principal)]


def require_minimum_role(role: UserRole) -> Callable[[TokenClaims], Awaitable[TokenClaims]]:
    """
    Dependency factory allowing callers at or above ``role``.

    Usage:
        @router.delete("/{user_id}")
        async def delete_user(principal = Depends(require_minimum_role(UserRole.ADMIN))): ...
    """

    async def dependency(principal: CurrentPrincipal) -> TokenClaims:
        if not Role.create(principal.role).has_permission(role):
            raise ForbiddenError
        return principal

    return dependency


def require_self_or_role(role: UserRole) -> Callable[[str, TokenClaims], Awaitable[TokenClaims]]:
    """Dependency factory allowing the owner of ``user_id`` or callers at or above ``role``."""

    async def dependency(user_id: str, principal: CurrentPrincipal) -> TokenClaims:
        if principal.user_id != user_id and not Role.create(principal.role).has_permission(role):
            raise ForbiddenError("You can only access your own account")
        return principal

    return dependency
