"""Column types shared by the models."""

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from tutor_desk.app.core.time import ensure_utc


class UTCDateTime(TypeDecorator):
    """Timezone-aware timestamp normalized to UTC on the way in and out.

    SQLite keeps only the wall-clock part of a datetime, so offsets are
    resolved before binding and UTC is reattached on load.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = ensure_utc(value)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return ensure_utc(value)


def status_check(column: str, statuses: tuple[str, ...]) -> str:
    allowed = ", ".join(f"'{status}'" for status in statuses)
    return f"{column} IN ({allowed})"
