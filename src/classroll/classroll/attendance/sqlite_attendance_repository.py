from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import MarkAction, MarkStatus
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import AttendanceGridRow, AttendanceMark, AttendanceRangeRow, MarkResult
from .repository import AttendanceRepository


class SQLiteAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_mark(self, *, student_id: int, day: date) -> Optional[AttendanceMark]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, student_id, date, status FROM attendance WHERE student_id=? AND date=?",
                (student_id, day.isoformat()),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceMark(
                id=int(r["id"]),
                student_id=int(r["student_id"]),
                date=date.fromisoformat(r["date"]),
                status=MarkStatus(r["status"]),
            )

    def apply_mark(self, *, student_id: int, day: date, status: Optional[MarkStatus]) -> MarkResult:
        params = (student_id, day.isoformat())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM attendance WHERE student_id=? AND date=?", params)
            existing = fetchone(cur)

            if status is None:
                if existing:
                    cur.execute("DELETE FROM attendance WHERE id=?", (existing["id"],))
                return MarkResult(action=MarkAction.DELETED)

            cur.execute(
                """
                INSERT INTO attendance (student_id, date, status)
                VALUES (?, ?, ?)
                ON CONFLICT (student_id, date) DO UPDATE SET status=excluded.status
                """,
                (student_id, day.isoformat(), status.value),
            )
            # Re-read inside the transaction to confirm the final state.
            cur.execute("SELECT id, status FROM attendance WHERE student_id=? AND date=?", params)
            row = fetchone(cur)
            return MarkResult(action=MarkAction.UPDATED, id=int(row["id"]))

    def get_grid(
        self,
        *,
        start_date: date,
        end_date: date,
        section_id: Optional[int] = None,
    ) -> Sequence[AttendanceGridRow]:
        where = ""
        params: list[object] = [start_date.isoformat(), end_date.isoformat()]
        if section_id is not None:
            where = "WHERE st.section_id=?"
            params.append(int(section_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                WITH RECURSIVE days(day) AS (
                    SELECT date(?)
                    UNION ALL
                    SELECT date(day, '+1 day') FROM days WHERE day < date(?)
                )
                SELECT
                    st.id AS student_id, st.student_id AS student_code, st.name AS student_name,
                    st.section_id, days.day, a.id AS mark_id, a.status
                FROM students st
                CROSS JOIN days
                LEFT JOIN attendance a ON a.student_id = st.id AND a.date = days.day
                {where}
                ORDER BY st.id ASC, days.day ASC
                """,
                tuple(params),
            )
            return [
                AttendanceGridRow(
                    student_id=int(r["student_id"]),
                    student_code=r["student_code"],
                    student_name=r["student_name"],
                    section_id=r.get("section_id"),
                    date=date.fromisoformat(r["day"]),
                    status=MarkStatus(r["status"]) if r.get("status") else None,
                    mark_id=r.get("mark_id"),
                )
                for r in fetchall(cur)
            ]

    def get_range_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        section_id: Optional[int] = None,
    ) -> Sequence[AttendanceRangeRow]:
        clauses = ["a.date BETWEEN ? AND ?"]
        params: list[object] = [start_date.isoformat(), end_date.isoformat()]
        if section_id is not None:
            clauses.append("st.section_id=?")
            params.append(int(section_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    a.id, a.student_id, a.date, a.status,
                    st.student_id AS student_code, st.name AS student_name, st.section_id,
                    sec.name AS section_name
                FROM attendance a
                JOIN students st ON st.id = a.student_id
                LEFT JOIN sections sec ON sec.id = st.section_id
                WHERE {where}
                ORDER BY a.date ASC, st.id ASC
                """,
                tuple(params),
            )
            return [
                AttendanceRangeRow(
                    id=int(r["id"]),
                    student_id=int(r["student_id"]),
                    student_code=r["student_code"],
                    student_name=r["student_name"],
                    section_id=r.get("section_id"),
                    section_name=r.get("section_name"),
                    date=date.fromisoformat(r["date"]),
                    status=MarkStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]
