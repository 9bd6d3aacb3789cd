from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """A student row as stored; `schedule` is copied from the section on assignment."""

    id: int
    student_id: str
    name: str
    section_id: Optional[int]
    schedule: Optional[str]
    created_at: Optional[str] = None


@dataclass(frozen=True)
class StudentRecord:
    """Read-model for the student list: the row plus its section, if any."""

    id: int
    student_id: str
    name: str
    section_id: Optional[int]
    schedule: Optional[str]
    section_name: Optional[str]
    section_schedule: Optional[str]
    created_at: Optional[str] = None
