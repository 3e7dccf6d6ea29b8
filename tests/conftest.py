from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from timekeeping.container import wire_services
from timekeeping.core.enums import CalculationMethod
from timekeeping.core.exceptions import StoreUnavailable
from timekeeping.punches.model import Punch
from timekeeping.timesheets.locks import WeekLockRegistry
from timekeeping.timesheets.model import DayRecord


class InMemoryDirectory:
    def __init__(self, rows: Optional[dict] = None):
        self.rows: dict[str, dict] = dict(rows or {})
        self.unavailable = False
        self.calls = 0

    def add(self, employee_id: str, **attrs) -> None:
        self.rows[employee_id] = {"id": employee_id, "full_name": employee_id.upper(), **attrs}

    def get(self, employee_id: str):
        self.calls += 1
        if self.unavailable:
            raise StoreUnavailable("directory down")
        return self.rows.get(employee_id)


class InMemoryTimesheetStore:
    """Returns week queries newest-first so callers cannot rely on store order."""

    def __init__(self):
        self.records: dict[tuple[str, date], DayRecord] = {}
        self.writes: list[DayRecord] = []
        self.fail_upsert_on: set[date] = set()
        self.locks = WeekLockRegistry(timeout=1)

    def query_by_employee_and_date_range(self, employee_id: str, start: date, end: date):
        rows = [r for (emp, d), r in self.records.items() if emp == employee_id and start <= d <= end]
        rows.sort(key=lambda r: r.work_date, reverse=True)
        return rows

    def get(self, employee_id: str, work_date: date):
        return self.records.get((employee_id, work_date))

    def upsert(self, record: DayRecord) -> None:
        if record.work_date in self.fail_upsert_on:
            raise StoreUnavailable(f"write failed for {record.work_date}")
        self.records[(record.employee_id, record.work_date)] = record
        self.writes.append(record)

    def delete(self, employee_id: str, work_date: date) -> bool:
        return self.records.pop((employee_id, work_date), None) is not None

    def week_lock(self, employee_id: str, week_start: date):
        return self.locks.hold(employee_id, week_start)

    def seed(self, employee_id: str, work_date: date, hours: float, **overrides) -> DayRecord:
        values = dict(
            employee_id=employee_id,
            work_date=work_date,
            time_in="08:00",
            time_out=None,
            break_duration=0.0,
            regular_hours=hours,
            overtime_hours=0.0,
            double_overtime_hours=0.0,
            total_hours=hours,
            calculation_method=CalculationMethod.WEEKLY_CUMULATIVE,
        )
        values.update(overrides)
        record = DayRecord(**values)
        self.records[(employee_id, work_date)] = record
        return record


class InMemoryPunches:
    def __init__(self):
        self.by_day: dict[tuple[str, date], list[Punch]] = {}

    def list_for_day(self, employee_id: str, work_date: date):
        return list(self.by_day.get((employee_id, work_date), []))

    def append(self, employee_id: str, work_date: date, punch: Punch) -> None:
        self.by_day.setdefault((employee_id, work_date), []).append(punch)


@pytest.fixture
def directory() -> InMemoryDirectory:
    d = InMemoryDirectory()
    d.add("ft-1", employment_type="full_time")
    d.add("pt-1", employment_type="part_time")
    d.add("ct-1", employment_type="contractor")
    d.add("ex-1", employment_type="full_time", is_exempt=True, pay_type="salaried")
    return d


@pytest.fixture
def store() -> InMemoryTimesheetStore:
    return InMemoryTimesheetStore()


@pytest.fixture
def punch_repo() -> InMemoryPunches:
    return InMemoryPunches()


@pytest.fixture
def container(directory, store, punch_repo):
    return wire_services(employee_directory=directory, timesheet_store=store, punch_repo=punch_repo)
