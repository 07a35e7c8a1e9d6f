"""Beanie documents for the document store (the read store)."""

from datetime import datetime

from beanie import Document, Indexed
from pymongo import ASCENDING, IndexModel


class UserDocument(Document):
    id: str  # type: ignore[assignment]
    name: str
    email: Indexed(str, unique=True)  # type: ignore[valid-type]
    password: str
    role: str = "USER"
    age: int | None = None
    created_at: datetime
    updated_at: datetime

    class Settings:
        name = "users"
        indexes = [IndexModel([("created_at", ASCENDING)])]


class RefreshTokenDocument(Document):
    id: str  # type: ignore[assignment]
    token: Indexed(str, unique=True)  # type: ignore[valid-type]
    user_id: Indexed(str)  # type: ignore[valid-type]
    expires_at: datetime
    created_at: datetime

    class Settings:
        name = "refresh_tokens"
        indexes = [IndexModel([("expires_at", ASCENDING)], expireAfterSeconds=0)]


class PasswordResetTokenDocument(Document):
    id: str  # type: ignore[assignment]
    token_hash: Indexed(str, unique=True)  # type: ignore[valid-type]
    user_id: Indexed(str)  # type: ignore[valid-type]
    expires_at: datetime
    created_at: datetime

    class Settings:
        name = "password_reset_tokens"
        indexes = [IndexModel([("expires_at", ASCENDING)], expireAfterSeconds=0)]


DOCUMENT_MODELS: list[type[Document]] = [
    UserDocument,
    RefreshTokenDocument,
    PasswordResetTokenDocument,
]
