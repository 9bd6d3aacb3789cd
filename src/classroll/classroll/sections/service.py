from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_int, require_non_empty
from ..core.exceptions import NotFound
from .model import Section
from .repository import SectionRepository

logger = logging.getLogger(__name__)


class SectionService:
    """Use case: manage sections."""

    def __init__(self, sections: SectionRepository):
        self._sections = sections

    def list_sections(self) -> Sequence[Section]:
        return self._sections.list_all()

    def create_section(self, *, name: str, schedule: str) -> int:
        name = require_non_empty(name, "Section name")
        schedule = require_non_empty(schedule, "Schedule")
        section_id = self._sections.create(name=name, schedule=schedule)
        logger.info("Created section id=%s name=%s", section_id, name)
        return section_id

    def update_section(self, *, section_id, name: str, schedule: str) -> int:
        section_id = require_int(section_id, "Section id")
        name = require_non_empty(name, "Section name")
        schedule = require_non_empty(schedule, "Schedule")
        if not self._sections.update(section_id=section_id, name=name, schedule=schedule):
            raise NotFound("Section not found")
        return section_id

    def delete_section(self, section_id) -> int:
        section_id = require_int(section_id, "Section id")
        self._sections.delete(section_id)
        logger.info("Deleted section id=%s", section_id)
        return section_id
