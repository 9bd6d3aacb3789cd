from __future__ import annotations

from ..bridge.dispatcher import Bridge
from ..bridge.payload import as_dict
from ..container import Container


def register(bridge: Bridge, container: Container) -> None:
    auth = container.auth_service

    @bridge.handle("auth.register")
    def register_user(payload):
        data = as_dict(payload)
        user_id = auth.register(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
        )
        return {"id": user_id}

    @bridge.handle("auth.login")
    def login(payload):
        data = as_dict(payload)
        return auth.login(email=data.get("email"), password=data.get("password"))
