from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import WeekWindow, now_local
from ..core.constants import RECALC_TOLERANCE_HOURS
from ..core.exceptions import CascadeIncomplete, StoreUnavailable
from ..employees.resolver import EmployeeProfileResolver
from ..timesheets.model import DayRecord
from ..timesheets.repository import TimesheetStore
from .engine import OvertimeRuleEngine
from .model import Classification

logger = logging.getLogger(__name__)


def _differs(record: DayRecord, result: Classification) -> bool:
    return (
        abs(record.regular_hours - result.regular) > RECALC_TOLERANCE_HOURS
        or abs(record.overtime_hours - result.overtime) > RECALC_TOLERANCE_HOURS
        or abs(record.double_overtime_hours - result.double_overtime) > RECALC_TOLERANCE_HOURS
        or record.calculation_method != result.method
    )


class WeeklyRecalculationService:
    """Re-derive every weekly-cumulative day of a week in date order.

    Overtime of a day depends on the hours of every earlier day, so the walk
    always starts from Monday and covers the whole week. Manual overrides feed
    the running total but are never rewritten. Runs for the same employee and
    week are serialized through the store's week lock.
    """

    def __init__(
        self,
        employees: EmployeeProfileResolver,
        timesheets: TimesheetStore,
        *,
        engine: Optional[OvertimeRuleEngine] = None,
    ):
        self._employees = employees
        self._timesheets = timesheets
        self._engine = engine or OvertimeRuleEngine()

    def recalculate_week(
        self,
        employee_id: str,
        any_date_in_week: date,
        *,
        now: Optional[datetime] = None,
    ) -> list[DayRecord]:
        """Return the day records that were rewritten (empty when nothing changed)."""
        employee = self._employees.resolve(employee_id)
        window = WeekWindow.containing(any_date_in_week)

        rule = self._engine.factory.for_employee(employee)
        if rule is not self._engine.factory.weekly:
            logger.info(
                "week_recalculation_skipped",
                extra={
                    "employee_id": employee.employee_id,
                    "week_start": window.start,
                    "employment_type": employee.employment_type.value,
                    "is_exempt": employee.is_exempt,
                },
            )
            return []

        now = now or now_local()
        updated: list[DayRecord] = []
        last_written: Optional[date] = None

        with self._timesheets.week_lock(employee.employee_id, window.start):
            records = self._timesheets.query_by_employee_and_date_range(employee.employee_id, window.start, window.end)
            cumulative = 0.0

            for record in sorted(records, key=lambda r: r.work_date):
                if record.is_manual_override:
                    cumulative += record.total_hours
                    continue

                result = rule.classify(hours_today=record.total_hours, week_other_days_total=cumulative)
                if _differs(record, result):
                    new_record = replace(
                        record,
                        regular_hours=result.regular,
                        overtime_hours=result.overtime,
                        double_overtime_hours=result.double_overtime,
                        total_hours=result.total,
                        calculation_method=result.method,
                        weekly_hours_at_calculation=result.weekly_hours_at_calculation,
                        calculated_at=now,
                    )
                    try:
                        self._timesheets.upsert(new_record)
                    except StoreUnavailable as e:
                        logger.error(
                            "week_recalculation_aborted",
                            extra={
                                "employee_id": employee.employee_id,
                                "week_start": window.start,
                                "failed_date": record.work_date,
                                "last_written_date": last_written,
                            },
                        )
                        raise CascadeIncomplete(
                            f"Recalculation of week {window.start} stopped at {record.work_date}",
                            last_written_date=last_written,
                            updated=updated,
                        ) from e
                    updated.append(new_record)
                    last_written = record.work_date

                cumulative += record.total_hours

        logger.info(
            "week_recalculation_completed",
            extra={
                "employee_id": employee.employee_id,
                "week_start": window.start,
                "records": len(records),
                "updated": len(updated),
                "weekly_total": cumulative,
            },
        )
        return updated
