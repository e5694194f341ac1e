from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class AttendanceFact:
    """Domain entity: one hourly observation for a student on a day."""

    student_id: int
    date: str
    hour: int
    status: str


@dataclass(frozen=True)
class PeriodRow:
    """Roster LEFT JOIN facts row; date/hour/status are None for a student without facts."""

    student_id: int
    name: str
    group: str
    date: Optional[str] = None
    hour: Optional[int] = None
    status: Optional[str] = None


@dataclass
class StudentPeriod:
    """A student with their facts in a date range: date -> hour -> status."""

    student_id: int
    name: str
    group: str
    attendance: dict[str, dict[int, str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.student_id,
            "name": self.name,
            "group": self.group,
            "attendance": {d: dict(hours) for d, hours in self.attendance.items()},
        }


@dataclass(frozen=True)
class GroupDailyStats:
    group: str
    total_students: int
    present: int
    absent: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "group": self.group,
            "total_students": self.total_students,
            "present": self.present,
            "absent": self.absent,
        }


@dataclass(frozen=True)
class AttendanceWrite:
    """Normalized echo of an applied attendance write."""

    student_id: int
    date: str
    status: str
    hour: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "studentId": self.student_id,
            "date": self.date,
            "status": self.status,
            "hour": self.hour,
        }


@dataclass
class AttendanceOverview:
    """Full journal view: hourly facts and the daily status derived from them."""

    hourly: dict[str, dict[int, dict[int, str]]] = field(default_factory=dict)
    daily: dict[str, dict[int, str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"hourly": self.hourly, "daily": self.daily}
