from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyCount:
    """Per-day mark counts as returned by the aggregate query."""

    date: date
    present: int
    late: int
    absent: int

    @property
    def total(self) -> int:
        return self.present + self.late + self.absent


@dataclass(frozen=True)
class AttendanceStats:
    total_students: int
    total_sections: int
    total_present: int
    total_late: int
    total_absent: int
    marked_days: int
    present_percentage: float
    late_percentage: float
    absent_percentage: float


@dataclass(frozen=True)
class DailyPoint:
    date: date
    present: int
    late: int
    absent: int
    present_percentage: float
    late_percentage: float
    absent_percentage: float


@dataclass(frozen=True)
class WeekdayPoint:
    weekday: str
    present: int
    late: int
    absent: int
    total: int
    present_percentage: float
    late_percentage: float
    absent_percentage: float


@dataclass(frozen=True)
class DashboardData:
    stats: AttendanceStats
    daily_series: list[DailyPoint]
    weekday_series: list[WeekdayPoint]
