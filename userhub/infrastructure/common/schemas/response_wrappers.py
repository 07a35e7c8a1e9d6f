"""Common response wrapper schemas for API responses."""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SuccessResponse(BaseModel):
    """Generic success response wrapper."""

    success: bool = True
    message: str


class DataResponse(SuccessResponse, Generic[T]):
    """Success response carrying a payload."""

    data: T


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Any | None = None
    stack: str | None = None


class ErrorResponse(BaseModel):
    """Error envelope; ``details`` and ``stack`` appear only in development."""

    success: Literal[False] = False
    error: ErrorBody
