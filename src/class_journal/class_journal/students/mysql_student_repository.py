from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import NewStudent, Student
from .repository import StudentRepository


def _to_student(r: dict[str, Any]) -> Student:
    return Student(
        student_id=int(r["id"]),
        name=r["name"],
        group=r["group_name"],
        course=int(r["course"]),
        created_at=r.get("created_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, group_name, course, created_at
                FROM students
                ORDER BY name ASC, id ASC
                """
            )
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, group_name, course, created_at FROM students WHERE id=%s",
                (int(student_id),),
            )
            r = fetchone(cur)
            return _to_student(r) if r else None

    def create(self, student: NewStudent) -> Student:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO students(name, group_name, course) VALUES(%s,%s,%s)",
                (student.name, student.group, int(student.course)),
            )
            student_id = int(cur.lastrowid)
            # Read back in the same transaction to pick up created_at.
            cur.execute(
                "SELECT id, name, group_name, course, created_at FROM students WHERE id=%s",
                (student_id,),
            )
            return _to_student(fetchone(cur))

    def delete_with_attendance(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # Facts first, then the student; both in this transaction.
            cur.execute("DELETE FROM attendance WHERE student_id=%s", (int(student_id),))
            cur.execute("DELETE FROM students WHERE id=%s", (int(student_id),))
            return cur.rowcount > 0
