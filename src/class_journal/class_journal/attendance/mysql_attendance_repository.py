from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceFact, GroupDailyStats, PeriodRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceFact]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, date, hour, status
                FROM attendance
                ORDER BY date DESC, student_id ASC, hour ASC
                """
            )
            return [
                AttendanceFact(
                    student_id=int(r["student_id"]),
                    date=r["date"],
                    hour=int(r["hour"]),
                    status=r["status"],
                )
                for r in fetchall(cur)
            ]

    def upsert(self, *, student_id: int, date: str, hour: int, status: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, date, hour, status)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (int(student_id), date, int(hour), status),
            )

    def delete_hour(self, *, student_id: int, date: str, hour: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance WHERE student_id=%s AND date=%s AND hour=%s",
                (int(student_id), date, int(hour)),
            )
            return cur.rowcount > 0

    def replace_day(
        self,
        *,
        student_id: int,
        date: str,
        hours: Sequence[int],
        status: Optional[str],
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance WHERE student_id=%s AND date=%s",
                (int(student_id), date),
            )
            if status is None:
                return
            cur.executemany(
                """
                INSERT INTO attendance(student_id, date, hour, status)
                VALUES(%s,%s,%s,%s)
                """,
                [(int(student_id), date, int(h), status) for h in hours],
            )

    def list_period_rows(
        self,
        *,
        start_date: str,
        end_date: str,
        group: Optional[str] = None,
    ) -> Sequence[PeriodRow]:
        params: list[object] = [start_date, end_date]
        where = ""
        if group is not None:
            where = "WHERE s.group_name=%s"
            params.append(group)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.id AS student_id, s.name, s.group_name, a.date, a.hour, a.status
                FROM students s
                LEFT JOIN attendance a
                    ON a.student_id = s.id AND a.date BETWEEN %s AND %s
                {where}
                ORDER BY s.name ASC, s.id ASC, a.date ASC, a.hour ASC
                """,
                tuple(params),
            )
            return [
                PeriodRow(
                    student_id=int(r["student_id"]),
                    name=r["name"],
                    group=r["group_name"],
                    date=r.get("date"),
                    hour=int(r["hour"]) if r.get("hour") is not None else None,
                    status=r.get("status"),
                )
                for r in fetchall(cur)
            ]

    def daily_stats(self, *, date: str) -> Sequence[GroupDailyStats]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    s.group_name,
                    COUNT(DISTINCT s.id) AS total_students,
                    COUNT(DISTINCT CASE WHEN a.status=%s THEN a.student_id END) AS present,
                    COUNT(DISTINCT CASE WHEN a.status=%s THEN a.student_id END) AS absent
                FROM students s
                LEFT JOIN attendance a ON a.student_id = s.id AND a.date = %s
                GROUP BY s.group_name
                ORDER BY s.group_name ASC
                """,
                (AttendanceStatus.PRESENT.value, AttendanceStatus.ABSENT.value, date),
            )
            return [
                GroupDailyStats(
                    group=r["group_name"],
                    total_students=int(r["total_students"] or 0),
                    present=int(r["present"] or 0),
                    absent=int(r["absent"] or 0),
                )
                for r in fetchall(cur)
            ]
