from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Student, StudentRecord
from .repository import StudentRepository


def _to_student(row: Dict[str, Any]) -> Student:
    return Student(
        id=int(row["id"]),
        student_id=row["student_id"],
        name=row["name"],
        section_id=row.get("section_id"),
        schedule=row.get("schedule"),
        created_at=row.get("created_at"),
    )


class SQLiteStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_with_sections(self) -> Sequence[StudentRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    st.id, st.student_id, st.name, st.section_id, st.schedule, st.created_at,
                    sec.name AS section_name,
                    sec.schedule AS section_schedule
                FROM students st
                LEFT JOIN sections sec ON sec.id = st.section_id
                ORDER BY st.id DESC
                """
            )
            return [
                StudentRecord(
                    id=int(r["id"]),
                    student_id=r["student_id"],
                    name=r["name"],
                    section_id=r.get("section_id"),
                    schedule=r.get("schedule"),
                    section_name=r.get("section_name"),
                    section_schedule=r.get("section_schedule"),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]

    def get_by_id(self, student_pk: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, student_id, name, section_id, schedule, created_at FROM students WHERE id=?",
                (student_pk,),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, student_id, name, section_id, schedule, created_at FROM students WHERE student_id=?",
                (student_id,),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def create(
        self,
        *,
        student_id: str,
        name: str,
        section_id: Optional[int],
        schedule: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO students (student_id, name, section_id, schedule) VALUES (?, ?, ?, ?)",
                (student_id, name, section_id, schedule),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        student_pk: int,
        student_id: str,
        name: str,
        section_id: Optional[int],
        schedule: Optional[str],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET student_id=?, name=?, section_id=?, schedule=?
                WHERE id=?
                """,
                (student_id, name, section_id, schedule, student_pk),
            )
            return cur.rowcount > 0

    def delete_with_attendance(self, student_pk: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE student_id=?", (student_pk,))
            removed = cur.rowcount
            cur.execute("DELETE FROM students WHERE id=?", (student_pk,))
            return int(removed)

    def count(self, *, section_id: Optional[int] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            if section_id is None:
                cur.execute("SELECT COUNT(*) AS total FROM students")
            else:
                cur.execute("SELECT COUNT(*) AS total FROM students WHERE section_id=?", (section_id,))
            return int(fetchone(cur)["total"])
