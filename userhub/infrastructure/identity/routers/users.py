from typing import Annotated

from fastapi import APIRouter, Depends
from starlette import status

from userhub.application.identity.protocols.token_service import TokenClaims
from userhub.application.identity.services.user_management_service import UserManagementService
from userhub.application.identity.services.user_profile_service import UserProfileService
from userhub.application.identity.use_cases.dtos.user_dtos import CreateUserInput, UpdateUserInput
from userhub.core import container
from userhub.domain.common.exceptions import ForbiddenError
from userhub.domain.identity.value_objects.role import Role, UserRole
from userhub.infrastructure.common.di import provide
from userhub.infrastructure.common.schemas.response_wrappers import DataResponse, SuccessResponse
from userhub.infrastructure.identity.dependencies import (
    CurrentPrincipal,
    require_minimum_role,
    require_self_or_role,
)
from userhub.infrastructure.identity.schemas.user_schemas import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["users"])

ProfileService = Annotated[UserProfileService, Depends(provide(container.user_profile_service))]
ManagementService = Annotated[
    UserManagementService, Depends(provide(container.user_management_service))
]
Admin = Annotated[TokenClaims, Depends(require_minimum_role(UserRole.ADMIN))]
SelfOrAdmin = Annotated[TokenClaims, Depends(require_self_or_role(UserRole.ADMIN))]


@router.get("")
async def list_users(
    _principal: CurrentPrincipal, service: ProfileService
) -> DataResponse[list[UserResponse]]:
    """List all users, newest first."""
    users = await service.get_all_user_profiles()
    return DataResponse(
        message="Users retrieved successfully", data=[UserResponse.from_dto(u) for u in users]
    )


@router.get("/{user_id}")
async def get_user(
    user_id: str, _principal: CurrentPrincipal, service: ProfileService
) -> DataResponse[UserResponse]:
    user = await service.get_user_profile(user_id)
    return DataResponse(message="User retrieved successfully", data=UserResponse.from_dto(user))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreateRequest, _admin: Admin, service: ManagementService
) -> DataResponse[UserResponse]:
    """Create a user. Without a password a random temporary one is set."""
    user = await service.create_user(
        CreateUserInput(
            name=body.name,
            email=body.email,
            age=body.age,
            role=body.role,
            password=body.password,
        )
    )
    return DataResponse(message="User created successfully", data=UserResponse.from_dto(user))


@router.patch("/{user_id}")
async def update_user(
    user_id: str, body: UserUpdateRequest, principal: SelfOrAdmin, service: ManagementService
) -> DataResponse[UserResponse]:
    """Update the given fields. Only administrators may change roles."""
    if body.role is not None and not Role.create(principal.role).is_admin():
        raise ForbiddenError("Only administrators can change roles")
    user = await service.update_user(
        user_id,
        UpdateUserInput(name=body.name, email=body.email, age=body.age, role=body.role),
    )
    return DataResponse(message="User updated successfully", data=UserResponse.from_dto(user))


@router.delete("/{user_id}")
async def delete_user(user_id: str, _admin: Admin, service: ManagementService) -> SuccessResponse:
    await service.delete_user(user_id)
    return SuccessResponse(message="User deleted successfully")
