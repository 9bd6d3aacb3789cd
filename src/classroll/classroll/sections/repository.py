from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Section


class SectionRepository(Protocol):
    def list_all(self) -> Sequence[Section]:
        raise NotImplementedError

    def get_by_id(self, section_id: int) -> Optional[Section]:
        raise NotImplementedError

    def create(self, *, name: str, schedule: str) -> int:
        raise NotImplementedError

    def update(self, *, section_id: int, name: str, schedule: str) -> bool:
        raise NotImplementedError

    def delete(self, section_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
