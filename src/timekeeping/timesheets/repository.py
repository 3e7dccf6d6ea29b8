from __future__ import annotations

from contextlib import AbstractContextManager
from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DayRecord


class TimesheetStore(Protocol):
    """Giao diện repository cho DayRecord (Timesheet Store).

    Implementations raise StoreUnavailable on I/O failures. ``week_lock`` must
    serialize recalculation per (employee_id, week_start) across every caller
    sharing the store.
    """

    def query_by_employee_and_date_range(self, employee_id: str, start: date, end: date) -> Sequence[DayRecord]:
        raise NotImplementedError

    def get(self, employee_id: str, work_date: date) -> Optional[DayRecord]:
        raise NotImplementedError

    def upsert(self, record: DayRecord) -> None:
        raise NotImplementedError

    def delete(self, employee_id: str, work_date: date) -> bool:
        raise NotImplementedError

    def week_lock(self, employee_id: str, week_start: date) -> AbstractContextManager:
        raise NotImplementedError
