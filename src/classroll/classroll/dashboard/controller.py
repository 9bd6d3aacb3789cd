from __future__ import annotations

from ..bridge.dispatcher import Bridge
from ..bridge.payload import as_dict
from ..container import Container
from .model import DashboardData


def to_ui(data: DashboardData) -> dict:
    """Shape the dashboard result the way the charts read it (camelCase)."""
    s = data.stats
    return {
        "stats": {
            "totalStudents": s.total_students,
            "totalSections": s.total_sections,
            "totalPresent": s.total_present,
            "totalLate": s.total_late,
            "totalAbsent": s.total_absent,
            "markedDays": s.marked_days,
            "presentPercentage": s.present_percentage,
            "latePercentage": s.late_percentage,
            "absentPercentage": s.absent_percentage,
        },
        "dailySeries": [
            {
                "date": p.date.isoformat(),
                "present": p.present,
                "late": p.late,
                "absent": p.absent,
                "presentPercentage": p.present_percentage,
                "latePercentage": p.late_percentage,
                "absentPercentage": p.absent_percentage,
            }
            for p in data.daily_series
        ],
        "weekdaySeries": [
            {
                "weekday": w.weekday,
                "present": w.present,
                "late": w.late,
                "absent": w.absent,
                "total": w.total,
                "presentPercentage": w.present_percentage,
                "latePercentage": w.late_percentage,
                "absentPercentage": w.absent_percentage,
            }
            for w in data.weekday_series
        ],
    }


def register(bridge: Bridge, container: Container) -> None:
    service = container.dashboard_service

    @bridge.handle("dashboard.getStats")
    def get_stats(payload):
        data = as_dict(payload)
        result = service.get_stats(
            month=data.get("month"),
            year=data.get("year"),
            section_id=data.get("section_id"),
            week_start=data.get("week_start"),
            week_end=data.get("week_end"),
        )
        return to_ui(result)
