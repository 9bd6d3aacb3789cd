from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.validators import optional_int, require_int, require_non_empty
from ..core.exceptions import ConstraintViolation, NotFound
from ..sections.repository import SectionRepository
from .model import StudentRecord
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage students and their section assignment."""

    def __init__(
        self,
        students: StudentRepository,
        sections: SectionRepository,
        *,
        reset_attendance: Optional[Callable[[], None]] = None,
    ):
        self._students = students
        self._sections = sections
        self._reset_attendance = reset_attendance

    def list_students(self) -> Sequence[StudentRecord]:
        return self._students.list_with_sections()

    def _resolve_schedule(self, section_id: Optional[int], schedule: Optional[str]) -> Optional[str]:
        if section_id is None:
            return (schedule or "").strip() or None

        section = self._sections.get_by_id(section_id)
        if not section:
            raise ConstraintViolation(f"Section {section_id} does not exist")
        return (schedule or "").strip() or section.schedule

    def create_student(self, *, name: str, student_id: str, section_id=None, schedule: Optional[str] = None) -> int:
        name = require_non_empty(name, "Student name")
        student_id = require_non_empty(student_id, "Student ID")
        section_pk = optional_int(section_id, "Section id")
        schedule = self._resolve_schedule(section_pk, schedule)

        if self._students.get_by_student_id(student_id):
            raise ConstraintViolation(f"Student ID {student_id} already exists")

        pk = self._students.create(student_id=student_id, name=name, section_id=section_pk, schedule=schedule)
        logger.info("Created student id=%s student_id=%s", pk, student_id)
        return pk

    def update_student(
        self,
        *,
        id,
        name: str,
        student_id: str,
        section_id=None,
        schedule: Optional[str] = None,
    ) -> int:
        pk = require_int(id, "Student id")
        name = require_non_empty(name, "Student name")
        student_id = require_non_empty(student_id, "Student ID")
        section_pk = optional_int(section_id, "Section id")
        schedule = self._resolve_schedule(section_pk, schedule)

        other = self._students.get_by_student_id(student_id)
        if other and other.id != pk:
            raise ConstraintViolation(f"Student ID {student_id} already exists")

        if not self._students.update(
            student_pk=pk,
            student_id=student_id,
            name=name,
            section_id=section_pk,
            schedule=schedule,
        ):
            raise NotFound("Student not found")
        return pk

    def delete_student(self, id) -> int:
        pk = require_int(id, "Student id")
        removed = self._students.delete_with_attendance(pk)
        logger.info("Deleted student id=%s with %s attendance marks", pk, removed)
        return pk

    def reset_attendance_table(self) -> None:
        if self._reset_attendance is None:
            raise RuntimeError("Attendance reset is not configured")
        self._reset_attendance()
