from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall
from .model import DailyCount
from .repository import StatsRepository


class SQLiteStatsRepository(StatsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_daily_counts(
        self,
        *,
        start_date: date,
        end_date: date,
        section_id: Optional[int] = None,
    ) -> Sequence[DailyCount]:
        clauses = ["a.date BETWEEN ? AND ?"]
        params: list[object] = [start_date.isoformat(), end_date.isoformat()]
        if section_id is not None:
            clauses.append("st.section_id=?")
            params.append(int(section_id))

        where = " AND ".join(clauses)

        # Inner join on students: marks of deleted students are not counted.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    a.date,
                    COUNT(CASE WHEN a.status = 'P' THEN 1 END) AS present_count,
                    COUNT(CASE WHEN a.status = 'L' THEN 1 END) AS late_count,
                    COUNT(CASE WHEN a.status = 'A' THEN 1 END) AS absent_count
                FROM attendance a
                JOIN students st ON st.id = a.student_id
                WHERE {where}
                GROUP BY a.date
                ORDER BY a.date ASC
                """,
                tuple(params),
            )
            return [
                DailyCount(
                    date=date.fromisoformat(r["date"]),
                    present=int(r["present_count"]),
                    late=int(r["late_count"]),
                    absent=int(r["absent_count"]),
                )
                for r in fetchall(cur)
            ]
