from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Entry


class EntryRepository(Protocol):
    def list_all(self) -> Sequence[Entry]:
        """Newest first (id descending)."""

        raise NotImplementedError

    def create(self, *, name: str, date: Optional[str], note: Optional[str], updated_at: str) -> Entry:
        raise NotImplementedError

    def update(
        self,
        *,
        entry_id: int,
        name: str,
        date: Optional[str],
        note: Optional[str],
        updated_at: str,
    ) -> Optional[Entry]:
        raise NotImplementedError

    def delete(self, entry_id: int) -> bool:
        raise NotImplementedError
