from __future__ import annotations

import logging
import sqlite3
from typing import Iterable

from ..core.exceptions import StorageError
from .connection import DatabaseConnection
from .sqlite_base import db_cursor

logger = logging.getLogger(__name__)

USERS_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    email TEXT UNIQUE,
    password TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

SECTIONS_SQL = """
CREATE TABLE IF NOT EXISTS sections (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    schedule TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

STUDENTS_SQL = """
CREATE TABLE IF NOT EXISTS students (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    student_id TEXT NOT NULL UNIQUE,
    name TEXT NOT NULL,
    section_id INTEGER,
    schedule TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (section_id) REFERENCES sections (id)
);
"""

ATTENDANCE_SQL = """
CREATE TABLE IF NOT EXISTS attendance (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    student_id INTEGER,
    date DATE,
    status TEXT CHECK(status IN ('P', 'L', 'A')),
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (student_id) REFERENCES students (id)
);
-- Databases created before the unique index may hold duplicate marks; keep the newest.
DELETE FROM attendance
WHERE id NOT IN (SELECT MAX(id) FROM attendance GROUP BY student_id, date);
CREATE UNIQUE INDEX IF NOT EXISTS ux_attendance_student_date ON attendance (student_id, date);
"""

SCHEMA_SQL = USERS_SQL + SECTIONS_SQL + STUDENTS_SQL + ATTENDANCE_SQL

TABLES = ("users", "sections", "students", "attendance")


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter (handles ';' inside quotes, skips '--' comment lines).
    buf: list[str] = []
    in_single = False
    in_double = False

    for line in sql.splitlines(keepends=True):
        if not in_single and not in_double and line.lstrip().startswith("--"):
            continue
        for ch in line:
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == ";" and not in_single and not in_double:
                stmt = "".join(buf).strip()
                buf.clear()
                if stmt:
                    yield stmt
                continue
            buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)


def ensure_schema(conn_factory: DatabaseConnection, *, strict: bool = False) -> bool:
    """Create missing tables; never drops data.

    Returns False when creation failed and ``strict`` is off: the app keeps
    running in a degraded state and the failure is only logged.
    """
    try:
        with db_cursor(conn_factory) as (_, cur):
            _exec_sql(cur, SCHEMA_SQL)
    except StorageError:
        if strict:
            raise
        logger.exception("Schema creation failed for %s", conn_factory.path)
        return False
    logger.info("Schema ready (%s)", conn_factory.path)
    return True


def create_tables(conn_factory: DatabaseConnection) -> None:
    with db_cursor(conn_factory) as (_, cur):
        _exec_sql(cur, SCHEMA_SQL)


def drop_all_tables(conn_factory: DatabaseConnection) -> None:
    with db_cursor(conn_factory) as (_, cur):
        for table in reversed(TABLES):
            cur.execute(f"DROP TABLE IF EXISTS {table}")
    logger.warning("Dropped tables: %s", ", ".join(TABLES))


def reset_attendance_table(conn_factory: DatabaseConnection) -> None:
    """Drop and recreate `attendance` only; students/sections/users stay."""
    with db_cursor(conn_factory) as (_, cur):
        cur.execute("DROP TABLE IF EXISTS attendance")
        _exec_sql(cur, ATTENDANCE_SQL)
    logger.warning("Attendance table reset")


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute("SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name")
        return [row[0] for row in cur.fetchall()]


def backup_to(conn_factory: DatabaseConnection, target_path: str) -> None:
    """Copy the live database into ``target_path`` with SQLite's online backup."""
    with conn_factory.lock:
        source = conn_factory.connect()
        target = sqlite3.connect(target_path)
        try:
            source.backup(target)
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e
        finally:
            target.close()
