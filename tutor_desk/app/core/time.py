"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for defaults and onupdate hooks."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive values (SQLite drops offsets) as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def month_label(value: datetime) -> str:
    return ensure_utc(value).strftime("%Y-%m")


def day_label(value: datetime) -> str:
    """Short calendar-day label, e.g. "Jan 5"."""
    value = ensure_utc(value)
    return f"{value:%b} {value.day}"


def weekday_label(value: datetime) -> str:
    """Calendar-day label with weekday, e.g. "Mon, Jan 5"."""
    value = ensure_utc(value)
    return f"{value:%a}, {value:%b} {value.day}"
