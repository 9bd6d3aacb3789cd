"""Development fixture: wipes the database and fills it with demo data.

Only reached through ``AUTO_SEED_DB=1`` or ``scripts/seed_db.py``.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import (
    SEED_HISTORY_DAYS,
    SEED_STATUS_WEIGHTS,
    SEED_STUDENT_COUNT,
    SEED_STUDENT_ID_PREFIX,
)
from ..database.bootstrap import create_tables, drop_all_tables
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone

logger = logging.getLogger(__name__)

SECTIONS = (
    ("BSIT-1A", "MWF 8:00 AM - 9:30 AM"),
    ("BSIT-1B", "MWF 9:30 AM - 11:00 AM"),
    ("BSIT-2A", "TTH 8:00 AM - 9:30 AM"),
    ("BSIT-2B", "TTH 9:30 AM - 11:00 AM"),
    ("BSCS-1A", "MWF 1:00 PM - 2:30 PM"),
    ("BSCS-1B", "MWF 2:30 PM - 4:00 PM"),
    ("BSCS-2A", "TTH 1:00 PM - 2:30 PM"),
    ("BSCS-2B", "TTH 2:30 PM - 4:00 PM"),
    ("BSIS-1A", "MWF 4:00 PM - 5:30 PM"),
    ("BSIS-1B", "TTH 4:00 PM - 5:30 PM"),
)

FIRST_NAMES = (
    "John", "Maria", "Michael", "Sarah", "David", "Anna", "James", "Emma",
    "Daniel", "Sofia", "Matthew", "Olivia", "Andrew", "Isabella", "Joseph",
    "Sophia", "William", "Mia", "Alexander", "Charlotte",
)

LAST_NAMES = (
    "Smith", "Garcia", "Martinez", "Johnson", "Brown", "Davis", "Rodriguez",
    "Miller", "Wilson", "Anderson", "Taylor", "Thomas", "Moore", "Martin",
    "Jackson", "Thompson", "White", "Lopez", "Lee", "Gonzalez",
)


@dataclass(frozen=True)
class SeedSummary:
    sections: int
    students: int
    attendance: int


def generate_student_name(rng: random.Random) -> str:
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"


def pick_status(rng: random.Random) -> str:
    statuses = [s for s, _ in SEED_STATUS_WEIGHTS]
    weights = [w for _, w in SEED_STATUS_WEIGHTS]
    return rng.choices(statuses, weights=weights, k=1)[0]


def seed_days(today: date) -> list[date]:
    """Weekdays among the SEED_HISTORY_DAYS days before ``today``."""
    start = today - timedelta(days=SEED_HISTORY_DAYS)
    days = (start + timedelta(days=i) for i in range(SEED_HISTORY_DAYS))
    return [d for d in days if d.weekday() < 5]


def seed_database(
    conn_factory: DatabaseConnection,
    *,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> SeedSummary:
    rng = rng or random.Random()
    today = today or today_local()

    logger.info("Starting database seeding")
    drop_all_tables(conn_factory)
    create_tables(conn_factory)

    with db_cursor(conn_factory) as (_, cur):
        cur.executemany("INSERT INTO sections (name, schedule) VALUES (?, ?)", SECTIONS)
        cur.execute("SELECT id, name, schedule FROM sections ORDER BY id")
        sections = fetchall(cur)
        logger.info("Inserted %s sections", len(sections))

        students = []
        for i in range(1, SEED_STUDENT_COUNT + 1):
            section = rng.choice(sections)
            students.append(
                (
                    f"{SEED_STUDENT_ID_PREFIX}-{i:04d}",
                    generate_student_name(rng),
                    section["id"],
                    section["schedule"],
                )
            )
        cur.executemany(
            "INSERT INTO students (student_id, name, section_id, schedule) VALUES (?, ?, ?, ?)",
            students,
        )
        cur.execute("SELECT id FROM students ORDER BY id")
        student_ids = [r["id"] for r in fetchall(cur)]
        logger.info("Inserted %s students", len(student_ids))

        days = seed_days(today)
        marks = [(sid, d.isoformat(), pick_status(rng)) for sid in student_ids for d in days]
        cur.executemany("INSERT INTO attendance (student_id, date, status) VALUES (?, ?, ?)", marks)

        cur.execute(
            """
            SELECT
                (SELECT COUNT(*) FROM sections) AS sections,
                (SELECT COUNT(*) FROM students) AS students,
                (SELECT COUNT(*) FROM attendance) AS attendance
            """
        )
        counts = fetchone(cur)

    summary = SeedSummary(
        sections=int(counts["sections"]),
        students=int(counts["students"]),
        attendance=int(counts["attendance"]),
    )
    logger.info(
        "Seeding complete: sections=%s students=%s attendance=%s",
        summary.sections, summary.students, summary.attendance,
    )
    return summary
