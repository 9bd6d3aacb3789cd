from __future__ import annotations

from ..attendance.controller import register as register_attendance
from ..container import Container
from ..dashboard.controller import register as register_dashboard
from ..sections.controller import register as register_sections
from ..students.controller import register as register_students
from ..users.controller import register as register_users
from .dispatcher import Bridge


def build_bridge(container: Container) -> Bridge:
    bridge = Bridge()

    register_users(bridge, container)
    register_sections(bridge, container)
    register_students(bridge, container)
    register_attendance(bridge, container)
    register_dashboard(bridge, container)

    @bridge.handle("settings.dbPath")
    def db_path(_payload):
        return {"path": container.conn.path}

    return bridge
