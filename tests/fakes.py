from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Optional, Sequence

from src.class_journal.class_journal.attendance.model import AttendanceFact, GroupDailyStats, PeriodRow
from src.class_journal.class_journal.core.enums import AttendanceStatus
from src.class_journal.class_journal.core.exceptions import StorageError
from src.class_journal.class_journal.entries.model import Entry
from src.class_journal.class_journal.students.model import NewStudent, Student
from src.class_journal.class_journal.users.model import User


class InMemoryStore:
    """Students + facts with the same guarantees as the MySQL schema:
    unique (student_id, date, hour) and cascade on student delete."""

    def __init__(self):
        self.students: dict[int, Student] = {}
        self.facts: dict[tuple[int, str, int], str] = {}
        self.lock = threading.Lock()
        self._next_id = 0

    def next_id(self) -> int:
        self._next_id += 1
        return self._next_id


class InMemoryStudents:
    def __init__(self, store: InMemoryStore, *, failing_names: Sequence[str] = ()):
        self._store = store
        self._failing_names = set(failing_names)

    def list_all(self):
        return sorted(self._store.students.values(), key=lambda s: (s.name, s.student_id))

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._store.students.get(int(student_id))

    def create(self, student: NewStudent) -> Student:
        if student.name in self._failing_names:
            raise StorageError("Lost connection to MySQL server during query")
        with self._store.lock:
            created = Student(
                student_id=self._store.next_id(),
                name=student.name,
                group=student.group,
                course=student.course,
                created_at=datetime(2026, 9, 1, 9, 0, 0),
            )
            self._store.students[created.student_id] = created
            return created

    def delete_with_attendance(self, student_id: int) -> bool:
        with self._store.lock:
            for key in [k for k in self._store.facts if k[0] == student_id]:
                del self._store.facts[key]
            return self._store.students.pop(student_id, None) is not None


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _require_student(self, student_id: int) -> None:
        if student_id not in self._store.students:
            raise StorageError("Cannot add or update a child row: a foreign key constraint fails")

    def list_all(self):
        facts = [AttendanceFact(k[0], k[1], k[2], v) for k, v in self._store.facts.items()]
        facts.sort(key=lambda f: (f.student_id, f.hour))
        facts.sort(key=lambda f: f.date, reverse=True)
        return facts

    def upsert(self, *, student_id: int, date: str, hour: int, status: str) -> None:
        with self._store.lock:
            self._require_student(student_id)
            self._store.facts[(student_id, date, hour)] = status

    def delete_hour(self, *, student_id: int, date: str, hour: int) -> bool:
        with self._store.lock:
            return self._store.facts.pop((student_id, date, hour), None) is not None

    def replace_day(self, *, student_id: int, date: str, hours: Sequence[int], status: Optional[str]) -> None:
        with self._store.lock:
            for key in [k for k in self._store.facts if k[0] == student_id and k[1] == date]:
                del self._store.facts[key]
            if status is None:
                return
            self._require_student(student_id)
            for h in hours:
                self._store.facts[(student_id, date, h)] = status

    def list_period_rows(self, *, start_date: str, end_date: str, group: Optional[str] = None):
        rows: list[PeriodRow] = []
        students = sorted(self._store.students.values(), key=lambda s: (s.name, s.student_id))
        for s in students:
            if group is not None and s.group != group:
                continue
            in_range = sorted(
                (k[1], k[2], v)
                for k, v in self._store.facts.items()
                if k[0] == s.student_id and start_date <= k[1] <= end_date
            )
            if not in_range:
                rows.append(PeriodRow(student_id=s.student_id, name=s.name, group=s.group))
            for d, h, status in in_range:
                rows.append(PeriodRow(s.student_id, s.name, s.group, d, h, status))
        return rows

    def daily_stats(self, *, date: str):
        out = []
        for group in sorted({s.group for s in self._store.students.values()}):
            ids = {s.student_id for s in self._store.students.values() if s.group == group}
            day = {(k[0], v) for k, v in self._store.facts.items() if k[1] == date and k[0] in ids}
            out.append(
                GroupDailyStats(
                    group=group,
                    total_students=len(ids),
                    present=len({sid for sid, st in day if st == AttendanceStatus.PRESENT}),
                    absent=len({sid for sid, st in day if st == AttendanceStatus.ABSENT}),
                )
            )
        return out


class InMemoryUsers:
    def __init__(self, users: Sequence[User] = ()):
        self._by_username = {u.username: u for u in users}

    def get_by_username(self, username: str) -> Optional[User]:
        return self._by_username.get(username)


class InMemoryEntries:
    def __init__(self):
        self._entries: dict[int, Entry] = {}
        self._next_id = 0

    def list_all(self):
        return sorted(self._entries.values(), key=lambda e: e.entry_id, reverse=True)

    def create(self, *, name, date, note, updated_at) -> Entry:
        self._next_id += 1
        entry = Entry(entry_id=self._next_id, name=name, date=date, note=note, updated_at=updated_at)
        self._entries[entry.entry_id] = entry
        return entry

    def update(self, *, entry_id, name, date, note, updated_at) -> Optional[Entry]:
        if entry_id not in self._entries:
            return None
        entry = Entry(entry_id=entry_id, name=name, date=date, note=note, updated_at=updated_at)
        self._entries[entry_id] = entry
        return entry

    def delete(self, entry_id: int) -> bool:
        return self._entries.pop(entry_id, None) is not None


class FakeCursor:
    def __init__(self, factory: "FakeConnectionFactory"):
        self._factory = factory
        self._rows: list[Any] = []
        self.lastrowid = factory.lastrowid
        self.rowcount = factory.rowcount

    def execute(self, sql: str, params: Any = None) -> None:
        self._factory.executed.append((" ".join(sql.split()), params))
        if self._factory.fail_with is not None:
            raise self._factory.fail_with
        self._rows = list(self._factory.results.pop(0)) if self._factory.results else []

    def executemany(self, sql: str, seq_params) -> None:
        self._factory.executed.append((" ".join(sql.split()), list(seq_params)))

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows

    def close(self) -> None:
        pass


class FakeConnection:
    def __init__(self, factory: "FakeConnectionFactory"):
        self._factory = factory

    def cursor(self, dictionary: bool = True):
        return FakeCursor(self._factory)

    def commit(self) -> None:
        self._factory.commits += 1

    def rollback(self) -> None:
        self._factory.rollbacks += 1

    def close(self) -> None:
        self._factory.released += 1


class FakeConnectionFactory:
    """Stands in for DatabaseConnection; records SQL and transaction calls.

    ``results`` holds one row list per ``execute`` call, in order.
    """

    def __init__(self, results=None, *, rowcount: int = 1, lastrowid: int = 0, fail_with=None, connect_error=None):
        self.results: list[list[dict]] = list(results or [])
        self.rowcount = rowcount
        self.lastrowid = lastrowid
        self.fail_with = fail_with
        self.connect_error = connect_error
        self.executed: list[tuple[str, Any]] = []
        self.commits = 0
        self.rollbacks = 0
        self.released = 0

    def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        return FakeConnection(self)

    def release(self, conn) -> None:
        conn.close()

    def close(self) -> None:
        pass


