"""Session handling and error translation shared by the SQLAlchemy adapters."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from userhub.domain.common.exceptions import ConflictError, PersistenceError

logger = structlog.get_logger(__name__)

STORE = "relational"

SessionFactoryGetter = Callable[[], async_sessionmaker[AsyncSession]]


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell uniqueness violations apart from other constraint failures across drivers."""
    message = str(error.orig).lower()
    return "unique" in message or "duplicate" in message


class SqlAlchemyRepository:
    """
    Base class for the SQLAlchemy adapters.

    The session factory is looked up on every session so that adapters built
    once per process follow the engine the current lifespan created.
    """

    def __init__(self, get_session_factory: SessionFactoryGetter) -> None:
        self.get_session_factory = get_session_factory

    @asynccontextmanager
    async def session(
        self, on_conflict: Callable[[], ConflictError] | None = None
    ) -> AsyncIterator[AsyncSession]:
        """
        Open a session, commit on success and translate store errors.

        Args:
            on_conflict: Builds the domain error raised for a uniqueness violation

        Raises:
            ConflictError: From ``on_conflict`` on a uniqueness violation
            PersistenceError: On any other SQLAlchemy failure
        """
        async with self.get_session_factory()() as session:
            try:
                yield session
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if on_conflict is not None and is_unique_violation(e):
                    raise on_conflict() from e
                logger.error("relational_integrity_error", error=str(e.orig))
                raise PersistenceError(store=STORE) from e
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error("relational_store_error", exc_info=True)
                raise PersistenceError(store=STORE) from e
