from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceFact, GroupDailyStats, PeriodRow


class AttendanceRepository(Protocol):
    """Store of hourly facts keyed by (student_id, date, hour).

    Implementations enforce the key uniqueness and the student foreign key
    themselves; ``upsert`` must resolve a key conflict by replacing the status.
    """

    def list_all(self) -> Sequence[AttendanceFact]:
        """Every fact, ordered by date descending, then student_id, hour."""

        raise NotImplementedError

    def upsert(self, *, student_id: int, date: str, hour: int, status: str) -> None:
        raise NotImplementedError

    def delete_hour(self, *, student_id: int, date: str, hour: int) -> bool:
        raise NotImplementedError

    def replace_day(
        self,
        *,
        student_id: int,
        date: str,
        hours: Sequence[int],
        status: Optional[str],
    ) -> None:
        """Delete every fact of the student on ``date``, then insert ``status``
        for each of ``hours`` (nothing when ``status`` is None). One transaction.
        """

        raise NotImplementedError

    def list_period_rows(
        self,
        *,
        start_date: str,
        end_date: str,
        group: Optional[str] = None,
    ) -> Sequence[PeriodRow]:
        """Roster outer-joined with facts in [start_date, end_date].

        Ordered by student name, then date, then hour.
        """

        raise NotImplementedError

    def daily_stats(self, *, date: str) -> Sequence[GroupDailyStats]:
        raise NotImplementedError
