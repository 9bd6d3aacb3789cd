from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Section
from .repository import SectionRepository


def _to_section(row: Dict[str, Any]) -> Section:
    return Section(
        id=int(row["id"]),
        name=row["name"],
        schedule=row["schedule"],
        created_at=row.get("created_at"),
    )


class SQLiteSectionRepository(SectionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Section]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, schedule, created_at FROM sections ORDER BY id DESC")
            return [_to_section(r) for r in fetchall(cur)]

    def get_by_id(self, section_id: int) -> Optional[Section]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, schedule, created_at FROM sections WHERE id=?", (section_id,))
            row = fetchone(cur)
            return _to_section(row) if row else None

    def create(self, *, name: str, schedule: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO sections (name, schedule) VALUES (?, ?)", (name, schedule))
            return int(cur.lastrowid)

    def update(self, *, section_id: int, name: str, schedule: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE sections SET name=?, schedule=? WHERE id=?",
                (name, schedule, section_id),
            )
            return cur.rowcount > 0

    def delete(self, section_id: int) -> bool:
        # Students keep their section_id; the reference is left dangling.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM sections WHERE id=?", (section_id,))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM sections")
            return int(fetchone(cur)["total"])
