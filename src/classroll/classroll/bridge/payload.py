from __future__ import annotations

from typing import Any, Dict

from ..core.exceptions import ValidationError


def as_dict(payload: Any) -> Dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Payload must be an object")
    return payload


def id_of(payload: Any) -> Any:
    """Delete calls send either a bare id or ``{"id": ...}``."""
    if isinstance(payload, dict):
        return payload.get("id")
    return payload
