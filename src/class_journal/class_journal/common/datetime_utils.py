from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from ..core.constants import MAX_DATE_KEY_LENGTH
from .validators import require_non_empty

DATE_KEY_FORMAT = "%Y-%m-%d"


def to_date_key(value: Any, field_name: str = "date") -> str:
    """Normalize a calendar-day key.

    Dates are stored as text and compared lexicographically, so ``date``
    objects are rendered as ``YYYY-MM-DD``; strings are kept as given.
    """
    if isinstance(value, datetime):
        return value.date().strftime(DATE_KEY_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_KEY_FORMAT)
    return require_non_empty(value, field_name, max_length=MAX_DATE_KEY_LENGTH)


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc)


def iso_timestamp(value: datetime | None = None) -> str:
    return (value or now_utc()).isoformat()
