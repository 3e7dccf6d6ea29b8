from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


@dataclass(frozen=True)
class WeekWindow:
    """Monday to Sunday span (both inclusive) used to scope weekly overtime."""

    start: date
    end: date

    @classmethod
    def containing(cls, day: date) -> "WeekWindow":
        start = day - timedelta(days=day.weekday())
        return cls(start=start, end=start + timedelta(days=6))
