from __future__ import annotations

from ..bridge.dispatcher import Bridge
from ..bridge.payload import as_dict, id_of
from ..container import Container


def register(bridge: Bridge, container: Container) -> None:
    service = container.section_service

    @bridge.handle("sections.list")
    def list_sections(_payload):
        return service.list_sections()

    @bridge.handle("sections.create")
    def create_section(payload):
        data = as_dict(payload)
        return {"id": service.create_section(name=data.get("name"), schedule=data.get("schedule"))}

    @bridge.handle("sections.update")
    def update_section(payload):
        data = as_dict(payload)
        section_id = service.update_section(
            section_id=data.get("id"),
            name=data.get("name"),
            schedule=data.get("schedule"),
        )
        return {"id": section_id}

    @bridge.handle("sections.delete")
    def delete_section(payload):
        return {"id": service.delete_section(id_of(payload))}
