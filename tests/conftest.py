from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from src.class_journal.class_journal.attendance.service import AttendanceService
from src.class_journal.class_journal.container import Container
from src.class_journal.class_journal.core.enums import Role
from src.class_journal.class_journal.entries.service import EntryService
from src.class_journal.class_journal.students.model import Student
from src.class_journal.class_journal.students.service import StudentService
from src.class_journal.class_journal.users.model import User
from src.class_journal.class_journal.users.service import AuthService

from tests.fakes import (
    FakeConnectionFactory,
    InMemoryAttendance,
    InMemoryEntries,
    InMemoryStore,
    InMemoryStudents,
    InMemoryUsers,
)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def students_repo(store) -> InMemoryStudents:
    return InMemoryStudents(store)


@pytest.fixture
def attendance_repo(store) -> InMemoryAttendance:
    return InMemoryAttendance(store)


@pytest.fixture
def student_service(students_repo) -> StudentService:
    return StudentService(students_repo)


@pytest.fixture
def attendance_service(attendance_repo, students_repo) -> AttendanceService:
    return AttendanceService(attendance_repo, students_repo)


@pytest.fixture
def add_student(student_service):
    def _add(name: str, group: str = "ИВТ-21", course: int = 2) -> Student:
        return student_service.create_student(name=name, group=group, course=course)

    return _add


@pytest.fixture
def container(store, students_repo, attendance_repo, student_service, attendance_service) -> Container:
    users_repo = InMemoryUsers(
        [User(user_id=1, username="admin", password_hash=generate_password_hash("admin123"), role=Role.ADMIN.value, name="Администратор системы")]
    )
    entries_repo = InMemoryEntries()
    return Container(
        conn=FakeConnectionFactory(),
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        users_repo=users_repo,
        entries_repo=entries_repo,
        student_service=student_service,
        attendance_service=attendance_service,
        auth_service=AuthService(users_repo),
        entry_service=EntryService(entries_repo),
    )


@pytest.fixture
def client(monkeypatch, container):
    from src.class_journal.class_journal.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()
