from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewStudent, Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    The service layer depends on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Student]:
        """All students ordered by name ascending."""

        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create(self, student: NewStudent) -> Student:
        raise NotImplementedError

    def delete_with_attendance(self, student_id: int) -> bool:
        """Delete the student and every attendance fact it owns in one transaction.

        Returns False when no such student exists.
        """

        raise NotImplementedError
