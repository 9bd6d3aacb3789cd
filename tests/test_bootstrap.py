from __future__ import annotations

import sqlite3

import pytest

from src.classroll.classroll.container import build_container
from src.classroll.classroll.core.exceptions import StorageError
from src.classroll.classroll.database.bootstrap import _iter_sql_statements, ensure_schema, list_tables
from src.classroll.classroll.database.connection import DatabaseConnection, DBConfig
from src.classroll.classroll.database.sqlite_base import db_cursor, fetchall


def test_ensure_schema_is_idempotent_and_keeps_data(container, student_pk):
    assert ensure_schema(container.conn) is True
    assert ensure_schema(container.conn) is True

    assert list_tables(container.conn) == ["attendance", "sections", "students", "users"]
    assert [s.id for s in container.student_service.list_students()] == [student_pk]


def test_schema_failure_is_logged_unless_strict(tmp_path, caplog):
    # A directory cannot be opened as a database file.
    conn = DatabaseConnection(DBConfig(path=str(tmp_path)))

    assert ensure_schema(conn) is False
    assert "Schema creation failed" in caplog.text

    with pytest.raises(StorageError):
        ensure_schema(conn, strict=True)


def test_unusable_database_folder_is_a_storage_error(tmp_path, caplog):
    # The parent "folder" is a regular file, so it can neither be created nor opened.
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")
    path = blocker / "db.sqlite"
    conn = DatabaseConnection(DBConfig(path=str(path)))

    assert ensure_schema(conn) is False
    assert "Schema creation failed" in caplog.text

    with pytest.raises(StorageError):
        ensure_schema(conn, strict=True)

    container = build_container(database_path=str(path), strict_schema=False)
    with pytest.raises(StorageError):
        container.section_service.list_sections()


def test_old_database_duplicates_are_collapsed_before_unique_index(tmp_path):
    path = tmp_path / "legacy.sqlite"
    raw = sqlite3.connect(path)
    raw.executescript(
        """
        CREATE TABLE attendance (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            student_id INTEGER,
            date DATE,
            status TEXT CHECK(status IN ('P', 'L', 'A')),
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP
        );
        INSERT INTO attendance (student_id, date, status) VALUES (1, '2024-03-01', 'P');
        INSERT INTO attendance (student_id, date, status) VALUES (1, '2024-03-01', 'A');
        INSERT INTO attendance (student_id, date, status) VALUES (2, '2024-03-01', 'L');
        """
    )
    raw.commit()
    raw.close()

    conn = DatabaseConnection(DBConfig(path=str(path)))
    try:
        assert ensure_schema(conn, strict=True) is True
        with db_cursor(conn) as (_, cur):
            cur.execute("SELECT student_id, status FROM attendance ORDER BY student_id")
            assert fetchall(cur) == [{"student_id": 1, "status": "A"}, {"student_id": 2, "status": "L"}]
    finally:
        conn.close()


def test_sql_splitter_ignores_semicolons_in_quotes_and_comments():
    sql = "-- note; here\nINSERT INTO t VALUES ('a;b');\nSELECT 1;"

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


def test_failed_unit_of_work_rolls_back(container):
    with pytest.raises(StorageError):
        with db_cursor(container.conn) as (_, cur):
            cur.execute("INSERT INTO sections (name, schedule) VALUES ('A', 'B')")
            cur.execute("SELECT * FROM no_such_table")

    assert container.section_service.list_sections() == []
