import datetime as _dt

from sqlalchemy.types import TypeDecorator, DateTime


def _as_utc(value):
    if value is None:
        return None
    if isinstance(value, str):
        # SQLite may hand back ISO strings
        value = _dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=_dt.timezone.utc)
    return value.astimezone(_dt.timezone.utc)


class UtcAwareDateTime(TypeDecorator):
    """Timestamps are stored in UTC and always loaded tz-aware."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return _as_utc(value)

    def process_result_value(self, value, dialect):
        return _as_utc(value)
