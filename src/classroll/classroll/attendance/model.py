from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import MarkAction, MarkStatus


@dataclass(frozen=True)
class AttendanceMark:
    """Domain entity: one student's mark for one calendar day."""

    id: int
    student_id: int
    date: date
    status: MarkStatus


@dataclass(frozen=True)
class AttendanceGridRow:
    """One cell of the month grid; `status` is None when the day is unmarked."""

    student_id: int
    student_code: str
    student_name: str
    section_id: Optional[int]
    date: date
    status: Optional[MarkStatus]
    mark_id: Optional[int] = None


@dataclass(frozen=True)
class AttendanceRangeRow:
    """Read-model for date-range queries and exports (existing marks only)."""

    id: int
    student_id: int
    student_code: str
    student_name: str
    section_id: Optional[int]
    section_name: Optional[str]
    date: date
    status: MarkStatus


@dataclass(frozen=True)
class MarkResult:
    action: MarkAction
    id: Optional[int] = None
