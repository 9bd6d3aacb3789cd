from __future__ import annotations

from datetime import date

from src.classroll.classroll.dashboard.model import DailyCount


def test_daily_counts_group_by_date_and_respect_section(container, section_id, student_pk):
    other_section = container.section_service.create_section(name="BSCS-2B", schedule="TTH 2:30 PM")
    other = container.student_service.create_student(name="Bo", student_id="2024-0002", section_id=other_section)
    ledger = container.attendance_service
    ledger.mark(student_id=student_pk, day="2024-03-01", status="P")
    ledger.mark(student_id=other, day="2024-03-01", status="L")
    ledger.mark(student_id=other, day="2024-03-02", status="A")
    ledger.mark(student_id=other, day="2024-04-01", status="A")

    counts = container.stats_repo.get_daily_counts(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31))
    assert counts == [
        DailyCount(date(2024, 3, 1), 1, 1, 0),
        DailyCount(date(2024, 3, 2), 0, 0, 1),
    ]

    only_first = container.stats_repo.get_daily_counts(
        start_date=date(2024, 3, 1), end_date=date(2024, 3, 31), section_id=section_id
    )
    assert only_first == [DailyCount(date(2024, 3, 1), 1, 0, 0)]


def test_deleted_students_do_not_count(container, student_pk):
    container.attendance_service.mark(student_id=student_pk, day="2024-03-01", status="P")
    container.student_service.delete_student(student_pk)

    data = container.dashboard_service.get_stats(month=3, year=2024)

    assert data.stats.total_students == 0
    assert data.stats.total_present == 0
