from datetime import datetime, timedelta, timezone
from typing import Optional


def get_current_timestamp() -> datetime:
    """Get current UTC timestamp (timezone-aware, microsecond resolution)"""
    return datetime.now(timezone.utc)


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to a stored timestamp; SQLite hands them back without an offset"""
    if dt is not None and dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current UTC timestamp, forced past ``previous`` by at least a microsecond"""
    now = get_current_timestamp()
    previous = as_utc(previous)
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def format_datetime(dt: datetime) -> Optional[str]:
    """Format datetime to ISO string"""
    return dt.isoformat() if dt else None
