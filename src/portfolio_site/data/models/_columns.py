"""Column helpers shared by the content tables."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


def new_record_id() -> str:
    """Return a fresh opaque record identity."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


def empty_list() -> list:
    return []


class UTCDateTime(TypeDecorator):
    """Timestamp stored in UTC and always loaded as a timezone-aware value.

    SQLite keeps no offset for ``DateTime(timezone=True)``, so naive values
    read back are tagged as UTC here.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value
