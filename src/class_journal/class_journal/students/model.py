from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student of an academic group."""

    student_id: int
    name: str
    group: str
    course: int
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.student_id,
            "name": self.name,
            "group": self.group,
            "course": self.course,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class NewStudent:
    """Validated input for a student insert."""

    name: str
    group: str
    course: int
