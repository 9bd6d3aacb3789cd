from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Section:
    """A class section; `schedule` is a free-text display string."""

    id: int
    name: str
    schedule: str
    created_at: Optional[str] = None
