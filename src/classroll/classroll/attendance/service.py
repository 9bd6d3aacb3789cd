from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import month_bounds, parse_iso_date, parse_month_year
from ..common.validators import optional_int, require_int
from ..core.constants import CSV_EXPORT_FIELDS
from ..core.enums import MarkStatus
from ..core.exceptions import InvalidStatus, NotFound, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceGridRow, AttendanceRangeRow, MarkResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


def parse_status(value) -> Optional[MarkStatus]:
    """Map the UI status to a mark; '' (or None) means "clear the cell"."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidStatus(f"Invalid status: {value!r}")
    value = value.strip().upper()
    if value == "":
        return None
    try:
        return MarkStatus(value)
    except ValueError:
        raise InvalidStatus(f"Invalid status: {value!r}") from None


class AttendanceService:
    """Attendance ledger: mark/clear one cell and read grids and ranges."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def mark(self, *, student_id, day, status) -> MarkResult:
        mark_status = parse_status(status)
        student_pk = require_int(student_id, "Student id")
        day = parse_iso_date(day)

        if not self._students.get_by_id(student_pk):
            raise NotFound("Student not found")

        result = self._attendance.apply_mark(student_id=student_pk, day=day, status=mark_status)
        logger.debug(
            "Marked student=%s date=%s status=%s -> %s",
            student_pk, day, mark_status.value if mark_status else "", result.action.value,
        )
        return result

    def get_month(self, *, month, year, section_id=None) -> Sequence[AttendanceGridRow]:
        m, y = parse_month_year(month, year)
        start, end = month_bounds(m, y)
        return self._attendance.get_grid(
            start_date=start,
            end_date=end,
            section_id=optional_int(section_id, "Section id"),
        )

    def get_by_date_range(self, *, start, end, section_id=None) -> Sequence[AttendanceRangeRow]:
        start_date, end_date = self._parse_range(start, end)
        return self._attendance.get_range_rows(
            start_date=start_date,
            end_date=end_date,
            section_id=optional_int(section_id, "Section id"),
        )

    def export_csv(self, *, start, end, section_id=None) -> CsvExport:
        start_date, end_date = self._parse_range(start, end)
        rows = self.get_by_date_range(start=start_date, end=end_date, section_id=section_id)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=list(CSV_EXPORT_FIELDS))
        writer.writeheader()
        for r in rows:
            writer.writerow(
                {
                    "date": r.date.isoformat(),
                    "student_id": r.student_code,
                    "student_name": r.student_name,
                    "section_name": r.section_name or "-",
                    "status": r.status.value,
                }
            )

        filename = f"attendance_{start_date:%Y%m%d}_{end_date:%Y%m%d}.csv"
        return CsvExport(filename=filename, content=out.getvalue())

    @staticmethod
    def _parse_range(start, end) -> tuple[date, date]:
        start_date = parse_iso_date(start)
        end_date = parse_iso_date(end)
        if start_date > end_date:
            raise ValidationError("Start date must not be after end date")
        return start_date, end_date
