from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.classroll.classroll.attendance.model import MarkResult
from src.classroll.classroll.attendance.service import AttendanceService, parse_status
from src.classroll.classroll.core.enums import MarkAction, MarkStatus
from src.classroll.classroll.core.exceptions import InvalidStatus, NotFound, ValidationError
from src.classroll.classroll.students.model import Student


class InMemoryStudents:
    def __init__(self, *ids: int):
        self._students = {
            i: Student(id=i, student_id=f"2024-{i:04d}", name=f"S{i}", section_id=None, schedule=None) for i in ids
        }

    def get_by_id(self, student_pk: int) -> Optional[Student]:
        return self._students.get(student_pk)


class InMemoryAttendance:
    def __init__(self):
        self.marks: dict[tuple[int, date], tuple[int, MarkStatus]] = {}
        self._id = 0
        self.last_range = None

    def apply_mark(self, *, student_id: int, day: date, status: Optional[MarkStatus]) -> MarkResult:
        key = (student_id, day)
        if status is None:
            self.marks.pop(key, None)
            return MarkResult(action=MarkAction.DELETED)
        if key in self.marks:
            mark_id = self.marks[key][0]
        else:
            self._id += 1
            mark_id = self._id
        self.marks[key] = (mark_id, status)
        return MarkResult(action=MarkAction.UPDATED, id=mark_id)

    def get_range_rows(self, *, start_date: date, end_date: date, section_id=None):
        self.last_range = (start_date, end_date, section_id)
        return []


@pytest.mark.parametrize("raw, expected", [("P", MarkStatus.PRESENT), ("l", MarkStatus.LATE), (" A ", MarkStatus.ABSENT)])
def test_parse_status_accepts_marks(raw, expected):
    assert parse_status(raw) is expected


@pytest.mark.parametrize("raw", ["", None])
def test_parse_status_empty_means_clear(raw):
    assert parse_status(raw) is None


@pytest.mark.parametrize("raw", ["X", "present", True, 1])
def test_parse_status_rejects_anything_else(raw):
    with pytest.raises(InvalidStatus):
        parse_status(raw)


def test_mark_replaces_instead_of_accumulating():
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, InMemoryStudents(1))

    first = svc.mark(student_id=1, day="2024-03-01", status="P")
    second = svc.mark(student_id=1, day="2024-03-01", status="A")

    assert first.action is MarkAction.UPDATED
    assert second.id == first.id
    assert repo.marks == {(1, date(2024, 3, 1)): (first.id, MarkStatus.ABSENT)}


def test_clearing_an_unmarked_day_is_not_an_error():
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, InMemoryStudents(1))

    result = svc.mark(student_id=1, day="2024-03-05", status="")

    assert result == MarkResult(action=MarkAction.DELETED, id=None)


def test_invalid_status_does_not_touch_the_ledger():
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, InMemoryStudents(1))

    with pytest.raises(InvalidStatus):
        svc.mark(student_id=1, day="2024-03-05", status="Z")
    assert repo.marks == {}


def test_mark_unknown_student_raises_not_found():
    svc = AttendanceService(InMemoryAttendance(), InMemoryStudents())

    with pytest.raises(NotFound):
        svc.mark(student_id=99, day="2024-03-05", status="P")


def test_range_rejects_reversed_interval():
    svc = AttendanceService(InMemoryAttendance(), InMemoryStudents())

    with pytest.raises(ValidationError):
        svc.get_by_date_range(start="2024-03-10", end="2024-03-01")


def test_range_forwards_section_filter_and_treats_blank_as_none():
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, InMemoryStudents())

    svc.get_by_date_range(start="2024-03-01", end="2024-03-07", section_id="3")
    assert repo.last_range == (date(2024, 3, 1), date(2024, 3, 7), 3)

    svc.get_by_date_range(start="2024-03-01", end="2024-03-07", section_id="")
    assert repo.last_range[2] is None
