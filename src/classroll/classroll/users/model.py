from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Registered account; only used to gate the UI behind a login.

    Note: Plain data object (no DB access code).
    """

    id: int
    name: str
    email: str
    password_hash: str
    created_at: Optional[str] = None
