from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Entry:
    """Legacy free-form journal note."""

    entry_id: int
    name: str
    date: Optional[str]
    note: Optional[str]
    updated_at: Optional[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.entry_id,
            "name": self.name,
            "date": self.date,
            "note": self.note,
            "updatedAt": self.updated_at,
        }
