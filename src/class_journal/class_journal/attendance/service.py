from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.datetime_utils import to_date_key
from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import CANONICAL_HOURS, MAX_STATUS_LENGTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from .daily.base import DailyStatusRule
from .daily.majority_rule import MajorityVoteRule
from .model import AttendanceOverview, AttendanceWrite, GroupDailyStats, StudentPeriod
from .repository import AttendanceRepository


class AttendanceService:
    """Use cases over hourly attendance facts.

    Writes go straight to the repository as single statements or one
    transaction each; reads rebuild every derived value from the facts.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        daily_rule: DailyStatusRule | None = None,
        canonical_hours: Sequence[int] = CANONICAL_HOURS,
    ):
        self._attendance = attendance
        self._students = students
        self._daily_rule = daily_rule or MajorityVoteRule()
        self._canonical_hours = tuple(canonical_hours)

    def record(self, *, student_id: Any, date: Any, status: Any, hour: Any = None) -> AttendanceWrite:
        """Apply one observation.

        With ``hour``: upsert that hour, or delete it when status is "unknown".
        Without ``hour`` (whole-day write): wipe the day, then fill every
        canonical hour with ``status`` unless it is "unknown".
        """
        student_id = require_positive_int(student_id, "studentId")
        date = to_date_key(date)
        status = require_non_empty(status, "status", max_length=MAX_STATUS_LENGTH)
        hour = require_positive_int(hour, "hour") if hour is not None else None

        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

        is_unknown = status == AttendanceStatus.UNKNOWN
        if hour is not None:
            if is_unknown:
                self._attendance.delete_hour(student_id=student_id, date=date, hour=hour)
            else:
                self._attendance.upsert(student_id=student_id, date=date, hour=hour, status=status)
        else:
            self._attendance.replace_day(
                student_id=student_id,
                date=date,
                hours=self._canonical_hours,
                status=None if is_unknown else status,
            )

        return AttendanceWrite(student_id=student_id, date=date, status=status, hour=hour)

    def overview(self) -> AttendanceOverview:
        """Hourly facts as date -> student -> hour -> status, plus the daily status."""
        overview = AttendanceOverview()
        for fact in self._attendance.list_all():
            by_student = overview.hourly.setdefault(fact.date, {})
            by_student.setdefault(fact.student_id, {})[fact.hour] = fact.status

        for day, by_student in overview.hourly.items():
            for student_id, hours in by_student.items():
                derived = self._daily_rule.derive(hours.values())
                if derived is not None:
                    overview.daily.setdefault(day, {})[student_id] = derived
        return overview

    def period(self, *, start_date: Any, end_date: Any, group: Optional[str] = None) -> list[StudentPeriod]:
        start_date = to_date_key(start_date, "startDate")
        end_date = to_date_key(end_date, "endDate")
        group = (group.strip() or None) if isinstance(group, str) else None

        rows = self._attendance.list_period_rows(start_date=start_date, end_date=end_date, group=group)

        # Insertion order follows the scan: name, then date, then hour.
        by_student: dict[int, StudentPeriod] = {}
        for r in rows:
            entry = by_student.get(r.student_id)
            if entry is None:
                entry = StudentPeriod(student_id=r.student_id, name=r.name, group=r.group)
                by_student[r.student_id] = entry
            if r.date is None or r.hour is None:
                continue
            entry.attendance.setdefault(r.date, {})[r.hour] = r.status
        return list(by_student.values())

    def daily_stats(self, date: Any) -> Sequence[GroupDailyStats]:
        return self._attendance.daily_stats(date=to_date_key(date))

