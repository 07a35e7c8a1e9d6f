"""Error translation shared by the Beanie adapters."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import structlog
from pymongo.errors import DuplicateKeyError, PyMongoError

from userhub.domain.common.exceptions import ConflictError, PersistenceError

logger = structlog.get_logger(__name__)

STORE = "document"


@asynccontextmanager
async def translate_errors(
    on_conflict: Callable[[], ConflictError] | None = None,
) -> AsyncIterator[None]:
    """
    Map pymongo failures onto domain errors.

    Args:
        on_conflict: Builds the domain error raised for a duplicate key (code 11000)

    Raises:
        ConflictError: From ``on_conflict`` on a duplicate key
        PersistenceError: On any other pymongo failure
    """
    try:
        yield
    except DuplicateKeyError as e:
        if on_conflict is None:
            logger.error("document_duplicate_key", error=str(e))
            raise PersistenceError(store=STORE) from e
        raise on_conflict() from e
    except PyMongoError as e:
        logger.error("document_store_error", exc_info=True)
        raise PersistenceError(store=STORE) from e
