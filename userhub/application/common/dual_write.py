"""
Dual-write helpers.

Every mutation is applied to the document store (the read store) first and
to the relational mirror second. There is no shared transaction:

- if the document write fails, the relational write is never attempted
- if the relational write fails, the document write is kept and the error
  propagates to the caller

Divergence is logged so an operator can reconcile the stores by hand.

Example:
    await dual_write(
        "user_created",
        lambda: document_users.save(user),
        lambda: relational_users.save(user),
        user_id=user.id.value,
    )
"""

from collections.abc import Awaitable, Callable
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

StoreWrite = Callable[[], Awaitable[Any]]


async def dual_write(
    operation: str,
    document_write: StoreWrite,
    relational_write: StoreWrite,
    **context: Any,  # noqa: ANN401
) -> None:
    """
    Apply one mutation to both stores in order.

    Args:
        operation: Event name used when the stores diverge
        document_write: Write against the document store
        relational_write: Same write against the relational store
        **context: Extra fields for the divergence log event

    Raises:
        Whatever either write raises; the second write's error is re-raised
        after logging.
    """
    await document_write()
    try:
        await relational_write()
    except Exception:
        logger.error("dual_write_diverged", operation=operation, exc_info=True, **context)
        raise
