"""Document store: pymongo async client and Beanie initialisation."""

import structlog
from beanie import init_beanie
from pymongo import AsyncMongoClient

from userhub.config import Settings
from userhub.documents import DOCUMENT_MODELS

logger = structlog.get_logger(__name__)

# Module-level singleton (application-scoped)
_client: AsyncMongoClient | None = None


async def initialize_document_store(settings: Settings) -> None:
    """Connect once at startup and register the document models."""
    global _client  # noqa: PLW0603
    _client = AsyncMongoClient(settings.MONGODB_URL, tz_aware=True)
    await init_beanie(
        database=_client[settings.MONGODB_DATABASE], document_models=DOCUMENT_MODELS
    )
    logger.info("document_store_initialized", database=settings.MONGODB_DATABASE)


async def close_document_store() -> None:
    """Close the client on shutdown."""
    global _client  # noqa: PLW0603
    if _client is not None:
        await _client.close()
        _client = None
