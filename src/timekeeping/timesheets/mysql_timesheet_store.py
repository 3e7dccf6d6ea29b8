from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from typing import Iterator, Optional, Sequence

import mysql.connector

from ..core.constants import DEFAULT_WEEK_LOCK_TIMEOUT_SECONDS
from ..core.enums import CalculationMethod
from ..core.exceptions import StoreUnavailable
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone, normalize_mysql_time
from .locks import WeekLockRegistry
from .model import DayRecord
from .repository import TimesheetStore

_COLUMNS = """
    employee_id, work_date, time_in, time_out, break_duration,
    regular_hours, overtime_hours, daily_double_overtime, total_hours,
    calculation_method, is_manual_override, weekly_hours_at_calculation,
    calculation_timestamp
"""


def _to_record(r: dict) -> DayRecord:
    weekly = r.get("weekly_hours_at_calculation")
    return DayRecord(
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        time_in=normalize_mysql_time(r.get("time_in")),
        time_out=normalize_mysql_time(r.get("time_out")),
        break_duration=as_float(r.get("break_duration")),
        regular_hours=as_float(r.get("regular_hours")),
        overtime_hours=as_float(r.get("overtime_hours")),
        double_overtime_hours=as_float(r.get("daily_double_overtime")),
        total_hours=as_float(r.get("total_hours")),
        calculation_method=CalculationMethod(r["calculation_method"]),
        is_manual_override=bool(r.get("is_manual_override")),
        weekly_hours_at_calculation=float(weekly) if weekly is not None else None,
        calculated_at=r.get("calculation_timestamp"),
    )


class MySQLTimesheetStore(TimesheetStore):
    """Timesheet Store on MySQL.

    Week locks are taken twice: an in-process lock so threads of one worker
    queue up locally, then a MySQL named lock (GET_LOCK) held on a dedicated
    session so other workers sharing the database are serialized too.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, lock_timeout: int = DEFAULT_WEEK_LOCK_TIMEOUT_SECONDS):
        self._conn_factory = conn_factory
        self._lock_timeout = int(lock_timeout)
        self._local_locks = WeekLockRegistry(timeout=self._lock_timeout)

    def query_by_employee_and_date_range(self, employee_id: str, start: date, end: date) -> Sequence[DayRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM timesheet_entries
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (str(employee_id), start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get(self, employee_id: str, work_date: date) -> Optional[DayRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM timesheet_entries
                WHERE employee_id=%s AND work_date=%s
                """,
                (str(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: DayRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timesheet_entries(
                    employee_id, work_date, time_in, time_out, break_duration,
                    regular_hours, overtime_hours, daily_double_overtime, total_hours,
                    calculation_method, is_manual_override, weekly_hours_at_calculation,
                    calculation_timestamp
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    time_in=VALUES(time_in),
                    time_out=VALUES(time_out),
                    break_duration=VALUES(break_duration),
                    regular_hours=VALUES(regular_hours),
                    overtime_hours=VALUES(overtime_hours),
                    daily_double_overtime=VALUES(daily_double_overtime),
                    total_hours=VALUES(total_hours),
                    calculation_method=VALUES(calculation_method),
                    is_manual_override=VALUES(is_manual_override),
                    weekly_hours_at_calculation=VALUES(weekly_hours_at_calculation),
                    calculation_timestamp=VALUES(calculation_timestamp)
                """,
                (
                    record.employee_id,
                    record.work_date,
                    record.time_in,
                    record.time_out,
                    record.break_duration,
                    record.regular_hours,
                    record.overtime_hours,
                    record.double_overtime_hours,
                    record.total_hours,
                    record.calculation_method.value,
                    int(record.is_manual_override),
                    record.weekly_hours_at_calculation,
                    record.calculated_at,
                ),
            )

    def delete(self, employee_id: str, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM timesheet_entries WHERE employee_id=%s AND work_date=%s",
                (str(employee_id), work_date),
            )
            return cur.rowcount > 0

    @contextmanager
    def week_lock(self, employee_id: str, week_start: date) -> Iterator[None]:
        name = f"{self._conn_factory.database}:week:{employee_id}:{week_start.isoformat()}"[:64]
        with self._local_locks.hold(employee_id, week_start):
            try:
                conn = self._conn_factory.connect()
            except mysql.connector.Error as e:
                raise StoreUnavailable(f"Database unavailable: {e}") from e
            try:
                cur = conn.cursor()
                try:
                    cur.execute("SELECT GET_LOCK(%s, %s)", (name, self._lock_timeout))
                    (acquired,) = cur.fetchone()
                    if acquired != 1:
                        raise StoreUnavailable(f"Week {week_start} of {employee_id} is being recalculated")
                    try:
                        yield
                    finally:
                        cur.execute("SELECT RELEASE_LOCK(%s)", (name,))
                        cur.fetchone()
                finally:
                    cur.close()
            except mysql.connector.Error as e:
                raise StoreUnavailable(f"Database error: {e}") from e
            finally:
                conn.close()
