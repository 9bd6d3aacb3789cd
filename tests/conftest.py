from __future__ import annotations

from datetime import date

import pytest

from src.classroll.classroll.bridge.registry import build_bridge
from src.classroll.classroll.container import build_container


@pytest.fixture
def container():
    c = build_container(database_path=":memory:", strict_schema=True)
    yield c
    c.conn.close()


@pytest.fixture
def bridge(container):
    return build_bridge(container)


@pytest.fixture
def fixed_today():
    return date(2024, 3, 31)


@pytest.fixture
def section_id(container):
    return container.section_service.create_section(name="BSIT-1A", schedule="MWF 8:00 AM - 9:30 AM")


@pytest.fixture
def student_pk(container, section_id):
    return container.student_service.create_student(name="Ann Lee", student_id="2024-0001", section_id=section_id)
