from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Punch


class PunchRepository(Protocol):
    """Storage of raw punches, grouped by the work date of their shift."""

    def list_for_day(self, employee_id: str, work_date: date) -> Sequence[Punch]:
        raise NotImplementedError

    def append(self, employee_id: str, work_date: date, punch: Punch) -> None:
        raise NotImplementedError
