from __future__ import annotations

import random
from datetime import date

from src.classroll.classroll.database.sqlite_base import db_cursor, fetchall
from src.classroll.classroll.seed.seeder import SECTIONS, seed_database, seed_days


def test_seed_days_are_weekdays_before_today(fixed_today):
    days = seed_days(fixed_today)

    assert len(days) == 21
    assert days[0] == date(2024, 3, 1)
    assert days[-1] == date(2024, 3, 29)
    assert all(d.weekday() < 5 and d < fixed_today for d in days)


def test_seed_database_replaces_everything(container, student_pk, fixed_today):
    summary = seed_database(container.conn, rng=random.Random(7), today=fixed_today)

    assert summary.sections == len(SECTIONS) == 10
    assert summary.students == 30
    assert summary.attendance == 30 * 21

    students = container.student_service.list_students()
    assert "Ann Lee" not in {s.name for s in students}
    assert sorted(s.student_id for s in students)[0] == "2024-0001"
    assert all(s.schedule == s.section_schedule for s in students)

    with db_cursor(container.conn) as (_, cur):
        cur.execute("SELECT DISTINCT status FROM attendance")
        assert {r["status"] for r in fetchall(cur)} <= {"P", "L", "A"}


def test_seeded_month_keeps_percentages_bounded(container, fixed_today):
    seed_database(container.conn, rng=random.Random(1), today=fixed_today)

    stats = container.dashboard_service.get_stats(month=3, year=2024).stats

    assert stats.total_students == 30
    assert stats.marked_days == 21
    assert stats.present_percentage + stats.late_percentage + stats.absent_percentage <= 100.0 + 1e-9
