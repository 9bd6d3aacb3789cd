from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student, StudentRecord


class StudentRepository(Protocol):
    def list_with_sections(self) -> Sequence[StudentRecord]:
        raise NotImplementedError

    def get_by_id(self, student_pk: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create(
        self,
        *,
        student_id: str,
        name: str,
        section_id: Optional[int],
        schedule: Optional[str],
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        student_pk: int,
        student_id: str,
        name: str,
        section_id: Optional[int],
        schedule: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def delete_with_attendance(self, student_pk: int) -> int:
        """Delete the student and its marks in one transaction.

        Returns the number of attendance rows removed.
        """

        raise NotImplementedError

    def count(self, *, section_id: Optional[int] = None) -> int:
        raise NotImplementedError
