from __future__ import annotations

from datetime import date

import pytest

from src.classroll.classroll.core.exceptions import ConstraintViolation, NotFound, ValidationError
from src.classroll.classroll.database.sqlite_base import db_cursor, fetchone


def test_list_is_newest_first_with_section_fields(container, section_id):
    svc = container.student_service
    first = svc.create_student(name="A", student_id="S-1", section_id=section_id)
    second = svc.create_student(name="B", student_id="S-2")

    rows = svc.list_students()

    assert [r.id for r in rows] == [second, first]
    assert rows[1].section_name == "BSIT-1A"
    assert rows[1].section_schedule == "MWF 8:00 AM - 9:30 AM"
    assert rows[1].schedule == "MWF 8:00 AM - 9:30 AM"
    assert rows[0].section_id is None
    assert rows[0].section_name is None


def test_duplicate_student_id_is_a_constraint_violation(container, student_pk):
    with pytest.raises(ConstraintViolation):
        container.student_service.create_student(name="Other", student_id="2024-0001")


def test_unknown_section_is_a_constraint_violation(container):
    with pytest.raises(ConstraintViolation):
        container.student_service.create_student(name="A", student_id="S-1", section_id=404)


def test_blank_name_is_rejected(container):
    with pytest.raises(ValidationError):
        container.student_service.create_student(name="  ", student_id="S-1")


def test_update_is_full_replace(container, student_pk, section_id):
    svc = container.student_service
    svc.update_student(id=student_pk, name="Ann B. Lee", student_id="2024-0100", section_id=None, schedule="")

    row = container.students_repo.get_by_id(student_pk)
    assert (row.name, row.student_id, row.section_id, row.schedule) == ("Ann B. Lee", "2024-0100", None, None)


def test_update_keeps_own_student_id_but_not_anothers(container, student_pk):
    svc = container.student_service
    svc.update_student(id=student_pk, name="Ann", student_id="2024-0001")
    other = svc.create_student(name="Bo", student_id="2024-0002")

    with pytest.raises(ConstraintViolation):
        svc.update_student(id=other, name="Bo", student_id="2024-0001")


def test_update_missing_student_is_not_found(container):
    with pytest.raises(NotFound):
        container.student_service.update_student(id=999, name="X", student_id="X-1")


def test_delete_cascades_to_attendance(container, student_pk):
    container.attendance_service.mark(student_id=student_pk, day="2024-03-01", status="P")

    container.student_service.delete_student(student_pk)

    assert container.students_repo.get_by_id(student_pk) is None
    with db_cursor(container.conn) as (_, cur):
        cur.execute("SELECT COUNT(*) AS n FROM attendance WHERE student_id=?", (student_pk,))
        assert fetchone(cur)["n"] == 0


def test_reset_attendance_table_keeps_students(container, student_pk):
    container.attendance_service.mark(student_id=student_pk, day="2024-03-01", status="P")

    container.student_service.reset_attendance_table()

    assert container.attendance_repo.get_mark(student_id=student_pk, day=date(2024, 3, 1)) is None
    assert [s.id for s in container.student_service.list_students()] == [student_pk]
