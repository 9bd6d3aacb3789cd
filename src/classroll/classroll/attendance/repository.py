from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import MarkStatus
from .model import AttendanceGridRow, AttendanceMark, AttendanceRangeRow, MarkResult


class AttendanceRepository(Protocol):
    def get_mark(self, *, student_id: int, day: date) -> Optional[AttendanceMark]:
        raise NotImplementedError

    def apply_mark(self, *, student_id: int, day: date, status: Optional[MarkStatus]) -> MarkResult:
        """Replace the (student, day) mark, or delete it when ``status`` is None.

        Runs as a single transaction.
        """

        raise NotImplementedError

    def get_grid(
        self,
        *,
        start_date: date,
        end_date: date,
        section_id: Optional[int] = None,
    ) -> Sequence[AttendanceGridRow]:
        raise NotImplementedError

    def get_range_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        section_id: Optional[int] = None,
    ) -> Sequence[AttendanceRangeRow]:
        raise NotImplementedError
