from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.datetime_utils import iso_timestamp
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Entry
from .repository import EntryRepository


def _optional_text(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value


def _entry_id(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("Entry id must be an integer") from None


class EntryService:
    """Legacy free-form notes kept for old clients."""

    def __init__(self, entries: EntryRepository):
        self._entries = entries

    def list_entries(self) -> Sequence[Entry]:
        return self._entries.list_all()

    def create_entry(self, *, name: Any, date: Any = None, note: Any = None) -> Entry:
        return self._entries.create(
            name=require_non_empty(name, "name"),
            date=_optional_text(date, "date"),
            note=_optional_text(note, "note"),
            updated_at=iso_timestamp(),
        )

    def update_entry(self, entry_id: Any, *, name: Any, date: Any = None, note: Any = None) -> Entry:
        updated = self._entries.update(
            entry_id=_entry_id(entry_id),
            name=require_non_empty(name, "name"),
            date=_optional_text(date, "date"),
            note=_optional_text(note, "note"),
            updated_at=iso_timestamp(),
        )
        if not updated:
            raise NotFoundError("Not found")
        return updated

    def delete_entry(self, entry_id: Any) -> int:
        entry_id = _entry_id(entry_id)
        if not self._entries.delete(entry_id):
            raise NotFoundError("Not found")
        return entry_id
