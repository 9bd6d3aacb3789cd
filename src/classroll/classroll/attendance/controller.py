from __future__ import annotations

from ..bridge.dispatcher import Bridge
from ..bridge.payload import as_dict
from ..container import Container


def register(bridge: Bridge, container: Container) -> None:
    service = container.attendance_service

    @bridge.handle("attendance.get")
    def get_month(payload):
        data = as_dict(payload)
        return service.get_month(
            month=data.get("month"),
            year=data.get("year"),
            section_id=data.get("section_id"),
        )

    @bridge.handle("attendance.getByRange")
    def get_by_range(payload):
        data = as_dict(payload)
        return service.get_by_date_range(
            start=data.get("start") or data.get("startDate"),
            end=data.get("end") or data.get("endDate"),
            section_id=data.get("section_id"),
        )

    @bridge.handle("attendance.mark")
    def mark(payload):
        data = as_dict(payload)
        return service.mark(
            student_id=data.get("student_id"),
            day=data.get("date"),
            status=data.get("status"),
        )

    @bridge.handle("attendance.exportCsv")
    def export_csv(payload):
        data = as_dict(payload)
        return service.export_csv(
            start=data.get("start") or data.get("startDate"),
            end=data.get("end") or data.get("endDate"),
            section_id=data.get("section_id"),
        )
