"""Date helpers for persisted timestamps.

Persisted dates are RFC 1123 GMT strings (``Fri, 16 Oct 2026 10:00:00 GMT``).
Parsing also accepts ISO 8601 so hand-edited state and host-supplied install
dates work.
"""

from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_http_date(value: datetime) -> str:
    """Format a datetime as an RFC 1123 GMT string (second precision)."""
    return format_datetime(value.astimezone(UTC), usegmt=True)


def parse_date(value: str | None) -> datetime | None:
    """Parse an RFC 2822/1123 or ISO 8601 date.

    Naive results are assumed to be UTC.

    Returns:
        An aware datetime, or None if the value is empty or unparseable.
    """
    if not value or not value.strip():
        return None
    text = value.strip()

    parsed: datetime | None = None
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
