"""Calendar note domain models and date helpers."""

from dataclasses import dataclass
from datetime import date, datetime

DECEMBER = 12


@dataclass(frozen=True)
class CalendarNote:
    """A free-text note pinned to a day."""

    id: str
    date: date
    title: str
    content: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first day of the month and the first day of the next."""
    start = date(year, month, 1)
    if month == DECEMBER:
        return start, date(year + 1, 1, 1)
    return start, date(year, month + 1, 1)
