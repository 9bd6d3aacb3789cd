from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Union

from ..core.exceptions import ValidationError


def parse_iso_date(value: Union[str, date]) -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # Drop a time part ("2024-03-01T08:00:00" / "2024-03-01 08:00") only when one is present.
    for sep in ("T", " "):
        if len(text) > 10 and text[10] == sep:
            text = text[:10]
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}") from None


def parse_month_year(month, year) -> tuple[int, int]:
    """Accept '03'/'2024' strings as sent by the UI as well as ints."""
    try:
        m = int(month)
        y = int(year)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month/year: {month!r}/{year!r}") from None
    if not 1 <= m <= 12:
        raise ValidationError(f"Invalid month: {month!r}")
    if not 1 <= y <= 9999:
        raise ValidationError(f"Invalid year: {year!r}")
    return m, y


def month_bounds(month: int, year: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def iter_days(start: date, end: date) -> Iterator[date]:
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
