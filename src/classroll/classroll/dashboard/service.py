from __future__ import annotations

import logging
from typing import Sequence

from ..common.datetime_utils import iter_days, month_bounds, parse_iso_date, parse_month_year
from ..common.validators import optional_int
from ..core.constants import WEEKDAY_NAMES
from ..core.exceptions import ValidationError
from ..sections.repository import SectionRepository
from ..students.repository import StudentRepository
from .model import AttendanceStats, DailyCount, DailyPoint, DashboardData, WeekdayPoint
from .repository import StatsRepository

logger = logging.getLogger(__name__)


def percentage(count: int, base: int) -> float:
    """count / base * 100, or 0.0 when there is nothing to divide by."""
    if base <= 0:
        return 0.0
    return count / base * 100


class DashboardService:
    """Monthly attendance statistics for the dashboard.

    Relies on the ledger's one-mark-per-student-per-day rule: counts are plain
    counts, nothing is de-duplicated here.
    """

    def __init__(self, stats: StatsRepository, students: StudentRepository, sections: SectionRepository):
        self._stats = stats
        self._students = students
        self._sections = sections

    def get_stats(self, *, month, year, section_id=None, week_start=None, week_end=None) -> DashboardData:
        m, y = parse_month_year(month, year)
        section_pk = optional_int(section_id, "Section id")
        if bool(week_start) != bool(week_end):
            raise ValidationError("Week start and week end must be given together")
        start, end = month_bounds(m, y)

        total_students = self._students.count(section_id=section_pk)
        total_sections = self._sections.count()
        counts = self._stats.get_daily_counts(start_date=start, end_date=end, section_id=section_pk)

        stats = self._build_stats(counts, total_students=total_students, total_sections=total_sections)
        daily_series = self._build_daily_series(counts, start=start, end=end, total_students=total_students)

        if week_start and week_end:
            ws = parse_iso_date(week_start)
            we = parse_iso_date(week_end)
            if ws > we:
                raise ValidationError("Week start must not be after week end")
            week_counts: Sequence[DailyCount] = self._stats.get_daily_counts(
                start_date=ws, end_date=we, section_id=section_pk
            )
        else:
            week_counts = counts

        logger.debug(
            "Stats %02d-%04d section=%s: students=%s marked_days=%s",
            m, y, section_pk, total_students, stats.marked_days,
        )
        return DashboardData(
            stats=stats,
            daily_series=daily_series,
            weekday_series=self._build_weekday_series(week_counts),
        )

    @staticmethod
    def _build_stats(counts: Sequence[DailyCount], *, total_students: int, total_sections: int) -> AttendanceStats:
        present = sum(c.present for c in counts)
        late = sum(c.late for c in counts)
        absent = sum(c.absent for c in counts)
        marked_days = sum(1 for c in counts if c.total > 0)

        # Student-day slots over the days that were taken; one day == total_students.
        base = total_students * max(marked_days, 1)
        return AttendanceStats(
            total_students=total_students,
            total_sections=total_sections,
            total_present=present,
            total_late=late,
            total_absent=absent,
            marked_days=marked_days,
            present_percentage=percentage(present, base),
            late_percentage=percentage(late, base),
            absent_percentage=percentage(absent, base),
        )

    @staticmethod
    def _build_daily_series(counts: Sequence[DailyCount], *, start, end, total_students: int) -> list[DailyPoint]:
        by_date = {c.date: c for c in counts}
        series: list[DailyPoint] = []
        for day in iter_days(start, end):
            c = by_date.get(day)
            present, late, absent = (c.present, c.late, c.absent) if c else (0, 0, 0)
            series.append(
                DailyPoint(
                    date=day,
                    present=present,
                    late=late,
                    absent=absent,
                    present_percentage=percentage(present, total_students),
                    late_percentage=percentage(late, total_students),
                    absent_percentage=percentage(absent, total_students),
                )
            )
        return series

    @staticmethod
    def _build_weekday_series(counts: Sequence[DailyCount]) -> list[WeekdayPoint]:
        buckets = {i: [0, 0, 0] for i in range(7)}
        for c in counts:
            bucket = buckets[c.date.weekday()]
            bucket[0] += c.present
            bucket[1] += c.late
            bucket[2] += c.absent

        series: list[WeekdayPoint] = []
        for i, name in enumerate(WEEKDAY_NAMES):
            present, late, absent = buckets[i]
            total = present + late + absent
            series.append(
                WeekdayPoint(
                    weekday=name,
                    present=present,
                    late=late,
                    absent=absent,
                    total=total,
                    present_percentage=percentage(present, total),
                    late_percentage=percentage(late, total),
                    absent_percentage=percentage(absent, total),
                )
            )
        return series
