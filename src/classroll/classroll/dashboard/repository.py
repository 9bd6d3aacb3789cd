from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DailyCount


class StatsRepository(Protocol):
    def get_daily_counts(
        self,
        *,
        start_date: date,
        end_date: date,
        section_id: Optional[int] = None,
    ) -> Sequence[DailyCount]:
        """Mark counts per date, only for dates that have at least one mark."""

        raise NotImplementedError
