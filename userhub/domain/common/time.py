"""Timestamp helpers shared by entities and store mappers."""

from datetime import UTC, datetime


def truncate_to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision (both stores keep milliseconds)."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utc_now() -> datetime:
    """Current UTC time at millisecond precision."""
    return truncate_to_millis(datetime.now(UTC))


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from a store."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
