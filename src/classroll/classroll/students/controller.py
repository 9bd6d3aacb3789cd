from __future__ import annotations

from ..bridge.dispatcher import Bridge
from ..bridge.payload import as_dict, id_of
from ..container import Container


def register(bridge: Bridge, container: Container) -> None:
    service = container.student_service

    @bridge.handle("students.list")
    def list_students(_payload):
        return service.list_students()

    @bridge.handle("students.create")
    def create_student(payload):
        data = as_dict(payload)
        student_pk = service.create_student(
            name=data.get("name"),
            student_id=data.get("student_id"),
            section_id=data.get("section_id"),
            schedule=data.get("schedule"),
        )
        return {"id": student_pk}

    @bridge.handle("students.update")
    def update_student(payload):
        data = as_dict(payload)
        student_pk = service.update_student(
            id=data.get("id"),
            name=data.get("name"),
            student_id=data.get("student_id"),
            section_id=data.get("section_id"),
            schedule=data.get("schedule"),
        )
        return {"id": student_pk}

    @bridge.handle("students.delete")
    def delete_student(payload):
        return {"id": service.delete_student(id_of(payload))}

    @bridge.handle("students.resetAttendanceTable")
    def reset_attendance_table(_payload):
        service.reset_attendance_table()
        return None
