from __future__ import annotations

from datetime import date, datetime, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a trailing Z, e.g. 2024-01-15T10:00:00.000Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def parse_timestamp(s: str | None) -> datetime | None:
    """Parse a stored createdAt/updatedAt value. Returns None when unparsable."""
    if not s:
        return None
    s = s.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def timestamp_sort_key(s: str | None) -> datetime:
    return parse_timestamp(s) or _EPOCH


def parse_iso_date(s: str | None) -> date | None:
    """Parse exactly YYYY-MM-DD (the HTML <input type="date"> format). Anything else is None."""
    if not s:
        return None
    s = s.strip()
    if len(s) != 10:
        return None
    try:
        return datetime.strptime(s, "%Y-%m-%d").date()
    except ValueError:
        return None
