from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from ..common.serialization import to_jsonable
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]

INVALID_CHANNEL = "Invalid channel"

# Channel names used by the desktop shell before operations were renamed.
LEGACY_CHANNELS = {
    "auth:login": "auth.login",
    "auth:register": "auth.register",
    "get:dbPath": "settings.dbPath",
    "students:get": "students.list",
    "students:add": "students.create",
    "students:update": "students.update",
    "students:delete": "students.delete",
    "students:reset-db": "students.resetAttendanceTable",
    "sections:get": "sections.list",
    "sections:add": "sections.create",
    "sections:update": "sections.update",
    "sections:delete": "sections.delete",
    "dashboard:getData": "dashboard.getStats",
    "attendance:get": "attendance.get",
    "attendance:mark": "attendance.mark",
    "attendance:getByDateRange": "attendance.getByRange",
}


def ok(data: Any = None) -> Dict[str, Any]:
    return {"success": True, "data": to_jsonable(data)}


def fail(error: str, code: str) -> Dict[str, Any]:
    return {"success": False, "error": error, "code": code}


class Bridge:
    """Request/response boundary: one named operation + payload in, envelope out.

    Never raises; every failure becomes ``{"success": False, "error": ...}``.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def handle(self, operation: str, handler: Optional[Handler] = None):
        """Register ``handler`` for ``operation``; usable as a decorator."""

        def decorator(fn: Handler) -> Handler:
            if operation in self._handlers:
                raise ValueError(f"Operation already registered: {operation}")
            self._handlers[operation] = fn
            return fn

        if handler is not None:
            return decorator(handler)
        return decorator

    def resolve(self, operation: str) -> Optional[str]:
        name = LEGACY_CHANNELS.get(operation, operation)
        return name if name in self._handlers else None

    def operations(self) -> list[str]:
        return sorted(self._handlers)

    def invoke(self, operation: str, payload: Any = None) -> Dict[str, Any]:
        name = self.resolve(operation)
        if name is None:
            logger.warning("Rejected unknown operation %r", operation)
            return fail(INVALID_CHANNEL, "InvalidChannel")

        try:
            result = self._handlers[name](payload)
        except DomainError as e:
            logger.warning("%s failed: %s", name, e)
            return fail(str(e), e.code)
        except Exception as e:
            logger.exception("Unexpected error in %s", name)
            return fail(str(e) or e.__class__.__name__, "InternalError")

        return ok(result)
