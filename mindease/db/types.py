"""Column types shared by the models."""
import uuid

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from mindease.core.time import as_utc


class UTCDateTime(TypeDecorator):
    """Stores UTC, always hands back timezone-aware datetimes.

    SQLite drops tzinfo on the way back, Postgres keeps it; this evens them out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = as_utc(value)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return as_utc(value)


def new_id() -> str:
    return str(uuid.uuid4())
