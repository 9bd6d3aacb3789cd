from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .dashboard.service import DashboardService
from .dashboard.sqlite_stats_repository import SQLiteStatsRepository
from .database.bootstrap import ensure_schema, reset_attendance_table
from .database.connection import DatabaseConnection, DBConfig
from .sections.service import SectionService
from .sections.sqlite_section_repository import SQLiteSectionRepository
from .students.service import StudentService
from .students.sqlite_student_repository import SQLiteStudentRepository
from .users.service import AuthService
from .users.sqlite_user_repository import SQLiteUserRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: SQLiteUserRepository
    sections_repo: SQLiteSectionRepository
    students_repo: SQLiteStudentRepository
    attendance_repo: SQLiteAttendanceRepository
    stats_repo: SQLiteStatsRepository

    auth_service: AuthService
    section_service: SectionService
    student_service: StudentService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def build_container(*, database_path: str, init_schema: bool = True, strict_schema: bool = False) -> Container:
    conn = DatabaseConnection(DBConfig(path=str(database_path)))
    if init_schema:
        ensure_schema(conn, strict=strict_schema)

    users_repo = SQLiteUserRepository(conn)
    sections_repo = SQLiteSectionRepository(conn)
    students_repo = SQLiteStudentRepository(conn)
    attendance_repo = SQLiteAttendanceRepository(conn)
    stats_repo = SQLiteStatsRepository(conn)

    auth_service = AuthService(users_repo)
    section_service = SectionService(sections_repo)
    student_service = StudentService(
        students_repo,
        sections_repo,
        reset_attendance=partial(reset_attendance_table, conn),
    )
    attendance_service = AttendanceService(attendance_repo, students_repo)
    dashboard_service = DashboardService(stats_repo, students_repo, sections_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        sections_repo=sections_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        stats_repo=stats_repo,
        auth_service=auth_service,
        section_service=section_service,
        student_service=student_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
    )
