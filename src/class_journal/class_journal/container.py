from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT
from .database.connection import DBConfig, DatabaseConnection
from .entries.mysql_entry_repository import MySQLEntryRepository
from .entries.service import EntryService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import StudentService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    students_repo: MySQLStudentRepository
    attendance_repo: MySQLAttendanceRepository
    users_repo: MySQLUserRepository
    entries_repo: MySQLEntryRepository

    student_service: StudentService
    attendance_service: AttendanceService
    auth_service: AuthService
    entry_service: EntryService


def build_container(
    *, db_config: dict, pool_size: int = DEFAULT_POOL_SIZE, pool_timeout: float = DEFAULT_POOL_TIMEOUT
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(pool_size),
        pool_timeout=float(pool_timeout),
    )
    conn = DatabaseConnection.get_instance(config)

    students_repo = MySQLStudentRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    users_repo = MySQLUserRepository(conn)
    entries_repo = MySQLEntryRepository(conn)

    return Container(
        conn=conn,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        users_repo=users_repo,
        entries_repo=entries_repo,
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        auth_service=AuthService(users_repo),
        entry_service=EntryService(entries_repo),
    )
