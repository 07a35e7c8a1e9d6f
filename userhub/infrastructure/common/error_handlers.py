"""Exception handlers rendering every error as the common error envelope."""

import traceback

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userhub.config import Settings
from userhub.domain.common.exceptions import (
    ConflictError,
    DomainError,
    EntityNotFoundError,
    ForbiddenError,
    PersistenceError,
    UnauthorizedError,
    ValidationError,
)
from userhub.infrastructure.common.schemas.response_wrappers import ErrorBody, ErrorResponse

logger = structlog.get_logger(__name__)

STATUS_CODES: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(error: DomainError) -> int:
    for error_type, status_code in STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    status_code: int,
    code: str,
    message: str,
    settings: Settings,
    details: object = None,
    error: BaseException | None = None,
) -> JSONResponse:
    body = ErrorBody(code=code, message=message)
    if settings.is_development:
        body.details = details or None
        if error is not None:
            body.stack = "".join(traceback.format_exception(error))
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Attach the domain, validation and catch-all handlers to the app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_code_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "request_failed", path=request.url.path, code=exc.error_code, exc_info=exc
            )
        else:
            logger.warning(
                "request_rejected",
                path=request.url.path,
                code=exc.error_code,
                message=exc.message,
            )
        return error_response(status_code, exc.error_code, exc.message, settings, exc.details, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("request_validation_failed", path=request.url.path)
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            ValidationError.error_code,
            "Request validation failed",
            settings,
            details=jsonable_errors(exc),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_error", path=request.url.path, exc_info=exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            "Internal server error",
            settings,
            error=exc,
        )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    """Field errors without the raw input values (passwords must not echo back)."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type")}
        for error in exc.errors()
    ]
