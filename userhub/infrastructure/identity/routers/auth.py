from typing import Annotated

from fastapi import APIRouter, Depends, Request
from starlette import status

from userhub.application.identity.services.authentication_service import AuthenticationService
from userhub.application.identity.services.user_profile_service import UserProfileService
from userhub.application.identity.use_cases.dtos.auth_dtos import (
    AuthTokenDTO,
    LoginUserInput,
    RegisterUserInput,
    ResetPasswordInput,
)
from userhub.core import container
from userhub.infrastructure.common.di import provide
from userhub.infrastructure.common.rate_limit import limiter
from userhub.infrastructure.common.schemas.response_wrappers import DataResponse, SuccessResponse
from userhub.infrastructure.identity.dependencies import CurrentPrincipal
from userhub.infrastructure.identity.schemas.auth_schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    PasswordResetIssued,
    RefreshTokenRequest,
    RegisterRequest,
    ResetPasswordRequest,
    TokenPairResponse,
    TokenResponse,
)
from userhub.infrastructure.identity.schemas.user_schemas import UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])

AuthService = Annotated[AuthenticationService, Depends(provide(container.authentication_service))]
ProfileService = Annotated[UserProfileService, Depends(provide(container.user_profile_service))]


def _token_response(result: AuthTokenDTO) -> TokenResponse:
    return TokenResponse(
        access_token=result.access_token,
        refresh_token=result.refresh_token,
        user=UserResponse.from_dto(result.user),
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")  # type: ignore[misc]
async def register(
    request: Request, body: RegisterRequest, service: AuthService
) -> DataResponse[TokenResponse]:
    """Create an account and log it in. Self-registered accounts always get the USER role."""
    result = await service.register(
        RegisterUserInput(name=body.name, email=body.email, password=body.password, age=body.age)
    )
    return DataResponse(message="User registered successfully", data=_token_response(result))


@router.post("/login")
@limiter.limit("5/minute")  # type: ignore[misc]
async def login(
    request: Request, body: LoginRequest, service: AuthService
) -> DataResponse[TokenResponse]:
    result = await service.login(LoginUserInput(email=body.email, password=body.password))
    return DataResponse(message="Login successful", data=_token_response(result))


@router.post("/refresh")
@limiter.limit("10/minute")  # type: ignore[misc]
async def refresh(
    request: Request, body: RefreshTokenRequest, service: AuthService
) -> DataResponse[TokenPairResponse]:
    """
    Exchange a refresh token for a new token pair.

    The submitted refresh token is revoked; only the returned one is valid afterwards.
    """
    result = await service.refresh_token(body.refresh_token)
    return DataResponse(
        message="Token refreshed successfully",
        data=TokenPairResponse(
            access_token=result.access_token, refresh_token=result.refresh_token
        ),
    )


@router.post("/forgot-password")
@limiter.limit("3/minute")  # type: ignore[misc]
async def forgot_password(
    request: Request, body: ForgotPasswordRequest, service: AuthService
) -> DataResponse[PasswordResetIssued | None]:
    """
    Start a password reset.

    The response is the same whether or not the email is registered. Outside
    production the raw token is included, since no mail delivery exists.
    """
    result = await service.request_password_reset(body.email)
    data = None
    if (
        request.app.state.settings.ENVIRONMENT != "production"
        and result.reset_token is not None
        and result.expires_at is not None
    ):
        data = PasswordResetIssued(reset_token=result.reset_token, expires_at=result.expires_at)
    return DataResponse(
        message="If an account with that email exists, a password reset link has been sent",
        data=data,
    )


@router.post("/reset-password")
async def reset_password(body: ResetPasswordRequest, service: AuthService) -> SuccessResponse:
    await service.reset_password(ResetPasswordInput(token=body.token, password=body.password))
    return SuccessResponse(message="Password has been reset successfully")


@router.post("/logout")
async def logout(principal: CurrentPrincipal, service: AuthService) -> SuccessResponse:
    """Revoke every refresh token of the caller (all devices)."""
    await service.logout(principal.user_id)
    return SuccessResponse(message="Logged out from all devices")


@router.post("/logout-device")
async def logout_device(body: RefreshTokenRequest, service: AuthService) -> SuccessResponse:
    await service.logout_device(body.refresh_token)
    return SuccessResponse(message="Logged out successfully")


@router.get("/me")
async def me(principal: CurrentPrincipal, service: ProfileService) -> DataResponse[UserResponse]:
    user = await service.get_user_profile(principal.user_id)
    return DataResponse(message="User retrieved successfully", data=UserResponse.from_dto(user))
