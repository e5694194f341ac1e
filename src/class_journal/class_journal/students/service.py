from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from ..common.validators import require_int, require_non_empty
from ..core.constants import MAX_GROUP_LENGTH, MAX_NAME_LENGTH
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from .model import NewStudent, Student
from .repository import StudentRepository


@dataclass
class BatchResult:
    """Outcome of a batch registration, one entry per submitted item."""

    results: list[dict[str, Any]] = field(default_factory=list)
    added: int = 0
    errors: int = 0

    def add_success(self, student: Student) -> None:
        self.results.append(student.to_dict())
        self.added += 1

    def add_failure(self, message: str, original: Any) -> None:
        self.results.append({"error": message, "student": original})
        self.errors += 1

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "added": self.added, "errors": self.errors, "results": self.results}


def validate_new_student(name: Any, group: Any, course: Any) -> NewStudent:
    return NewStudent(
        name=require_non_empty(name, "name", max_length=MAX_NAME_LENGTH),
        group=require_non_empty(group, "group", max_length=MAX_GROUP_LENGTH),
        course=require_int(course, "course"),
    )


class StudentService:
    """Use cases: roster management and batch registration."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def create_student(self, *, name: Any, group: Any, course: Any) -> Student:
        return self._students.create(validate_new_student(name, group, course))

    def delete_student(self, student_id: Any) -> int:
        try:
            student_id = int(student_id)
        except (TypeError, ValueError):
            raise ValidationError("Student id must be an integer") from None

        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

        # A concurrent delete may win between the check and here.
        if not self._students.delete_with_attendance(student_id):
            raise NotFoundError("Student not found")
        return student_id

    def batch_register(self, items: Any) -> BatchResult:
        """Register many students, each in its own transaction.

        Every item is validated before it touches the store. A success in the
        result is already committed; a failed item (bad input or a storage
        error) is reported next to its input and does not affect siblings.
        """
        if items is None or not isinstance(items, (list, tuple)):
            raise ValidationError("Missing or invalid students list")

        result = BatchResult()
        for item in items:
            try:
                new_student = self._validate_item(item)
                result.add_success(self._students.create(new_student))
            except (ValidationError, StorageError) as e:
                result.add_failure(str(e), item)
        return result

    @staticmethod
    def _validate_item(item: Any) -> NewStudent:
        if not isinstance(item, dict):
            raise ValidationError("Student item must be an object")
        return validate_new_student(item.get("name"), item.get("group"), item.get("course"))


def students_to_dicts(students: Iterable[Student]) -> list[dict[str, Any]]:
    return [s.to_dict() for s in students]
