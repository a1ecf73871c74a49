"""
UTC datetime utilities for consistent timezone handling.

All timestamps stored on tasks and comments are timezone-aware UTC and
serialized as ISO-8601 strings (DynamoDB has no native datetime type).
"""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of datetime.now() (naive, local) or datetime.utcnow()
    (naive, deprecated in Python 3.12).

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def to_iso(dt: datetime) -> str:
    """Serialize a datetime as an ISO-8601 UTC string."""
    return ensure_utc(dt).isoformat()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 string (a trailing 'Z' is accepted) into a UTC datetime."""
    return ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))


def parse_iso_date(value: str) -> date:
    """Parse a calendar date ('YYYY-MM-DD'); a full ISO datetime keeps only its date part.

    Raises:
        ValueError: If value is not an ISO date or datetime.
    """
    try:
        return date.fromisoformat(value)
    except ValueError:
        return parse_iso_datetime(value).date()
