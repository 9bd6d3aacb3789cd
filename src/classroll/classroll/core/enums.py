from __future__ import annotations

from enum import Enum


class MarkStatus(str, Enum):
    """Attendance mark stored in the `attendance.status` column."""

    PRESENT = "P"
    LATE = "L"
    ABSENT = "A"


class MarkAction(str, Enum):
    """What `attendance.mark` did to the (student, date) cell."""

    UPDATED = "updated"
    DELETED = "deleted"
