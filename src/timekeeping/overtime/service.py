from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import WeekWindow, now_local
from ..common.time_arithmetic import elapsed_hours, round4
from ..common.validators import is_blank, try_float, try_minutes
from ..core.constants import MAX_HOURS_PER_DAY, OVERNIGHT_CUTOFF_MINUTES
from ..core.exceptions import ValidationFailed
from ..employees.resolver import EmployeeProfileResolver
from ..timesheets.model import DayRecord, TimesheetEntry
from ..timesheets.repository import TimesheetStore
from .cascade import WeeklyRecalculationService
from .engine import OvertimeRuleEngine
from .model import SaveResult, ValidationResult

logger = logging.getLogger(__name__)


def calculate_hours_worked(time_in: Optional[str], time_out: Optional[str], break_duration: float = 0) -> float:
    """Worked hours between two clock times, rounded to the quarter hour.

    Missing clock times mean nothing was worked yet.
    """
    if is_blank(time_in) or is_blank(time_out):
        return 0.0
    return round4(elapsed_hours(time_in, time_out, break_duration))


def validate_timesheet_entry(entry: TimesheetEntry) -> ValidationResult:
    errors: list[str] = []

    if is_blank(entry.employee_id):
        errors.append("Employee ID is required")
    if entry.work_date is None:
        errors.append("Date is required")

    in_minutes = out_minutes = None
    if not is_blank(entry.time_in):
        in_minutes = try_minutes(entry.time_in, "Time in", errors)
    if not is_blank(entry.time_out):
        out_minutes = try_minutes(entry.time_out, "Time out", errors)

    if in_minutes is not None and out_minutes is not None and out_minutes <= in_minutes:
        overnight = entry.spans_midnight
        if overnight is None:
            overnight = in_minutes >= OVERNIGHT_CUTOFF_MINUTES and out_minutes < OVERNIGHT_CUTOFF_MINUTES
        if not overnight:
            errors.append("Time out must be after time in (unless overnight shift)")

    break_duration = try_float(entry.break_duration, "Break duration", errors)
    if break_duration is not None and break_duration < 0:
        errors.append("Break duration cannot be negative")

    total_hours = try_float(entry.total_hours, "Total hours", errors)
    if total_hours is None and in_minutes is not None and out_minutes is not None:
        total_hours = elapsed_hours(entry.time_in, entry.time_out, max(break_duration or 0.0, 0.0))
    if total_hours is not None and total_hours < 0:
        errors.append("Total hours cannot be negative")
    if total_hours is not None and total_hours > MAX_HOURS_PER_DAY:
        errors.append("Total hours cannot exceed 24 hours per day")

    return ValidationResult(is_valid=not errors, errors=errors)


class OvertimeService:
    """Use case: compute, persist and re-derive day records.

    Collaborators are injected; nothing here holds a process-wide client.
    """

    def __init__(
        self,
        employees: EmployeeProfileResolver,
        timesheets: TimesheetStore,
        *,
        engine: Optional[OvertimeRuleEngine] = None,
        cascade: Optional[WeeklyRecalculationService] = None,
    ):
        self._employees = employees
        self._timesheets = timesheets
        self._engine = engine or OvertimeRuleEngine()
        self._cascade = cascade or WeeklyRecalculationService(employees, timesheets, engine=self._engine)

    calculate_hours_worked = staticmethod(calculate_hours_worked)
    validate_timesheet_entry = staticmethod(validate_timesheet_entry)

    def calculate_overtime_entry(
        self,
        employee_id: str,
        work_date: date,
        time_in: Optional[str],
        time_out: Optional[str],
        break_duration: float = 0,
        is_manual_override: bool = False,
        *,
        total_hours: Optional[float] = None,
        now: Optional[datetime] = None,
    ) -> DayRecord:
        """Classify one day against the employee's rule.

        A manual override without clock times carries its hours in
        ``total_hours``.
        """
        logger.info(
            "overtime_calculation_started",
            extra={"employee_id": employee_id, "work_date": work_date, "is_manual_override": is_manual_override},
        )

        employee = self._employees.resolve(employee_id)
        if is_manual_override and total_hours is not None and (is_blank(time_in) or is_blank(time_out)):
            hours_today = round4(total_hours)
        else:
            hours_today = calculate_hours_worked(time_in, time_out, break_duration)

        week_other_days_total = None
        if self._engine.needs_weekly_context(employee, is_manual_override=is_manual_override):
            window = WeekWindow.containing(work_date)
            week = self._timesheets.query_by_employee_and_date_range(employee.employee_id, window.start, window.end)
            week_other_days_total = sum(r.total_hours for r in week if r.work_date != work_date)

        result = self._engine.classify(
            employee,
            hours_today,
            week_other_days_total,
            is_manual_override=is_manual_override,
        )

        logger.info(
            "overtime_classified",
            extra={
                "employee_id": employee.employee_id,
                "work_date": work_date,
                "employment_type": employee.employment_type.value,
                "method": result.method.value,
                "regular_hours": result.regular,
                "overtime_hours": result.overtime,
                "double_overtime_hours": result.double_overtime,
                "total_hours": result.total,
            },
        )

        return DayRecord(
            employee_id=employee.employee_id,
            work_date=work_date,
            time_in=time_in or None,
            time_out=time_out or None,
            break_duration=float(break_duration or 0),
            regular_hours=result.regular,
            overtime_hours=result.overtime,
            double_overtime_hours=result.double_overtime,
            total_hours=result.total,
            calculation_method=result.method,
            is_manual_override=bool(is_manual_override),
            weekly_hours_at_calculation=result.weekly_hours_at_calculation,
            calculated_at=now or now_local(),
        )

    def prepare_timesheet_entry(self, entry: TimesheetEntry, *, now: Optional[datetime] = None) -> DayRecord:
        """Validate and classify one day without writing anything."""
        check = validate_timesheet_entry(entry)
        if not check.is_valid:
            raise ValidationFailed(check.errors)

        return self.calculate_overtime_entry(
            str(entry.employee_id),
            entry.work_date,
            entry.time_in,
            entry.time_out,
            float(entry.break_duration or 0),
            entry.is_manual_override,
            total_hours=float(entry.total_hours) if entry.total_hours not in (None, "") else None,
            now=now,
        )

    def write_day_record(self, record: DayRecord) -> None:
        self._timesheets.upsert(record)

    def reconcile_week(self, record: DayRecord, *, now: Optional[datetime] = None) -> SaveResult:
        """Re-derive the week of a freshly written day.

        The returned record is the cascade's version of that day when the
        cascade rewrote it.
        """
        recalculated = self._cascade.recalculate_week(record.employee_id, record.work_date, now=now)
        for updated in recalculated:
            if updated.work_date == record.work_date:
                record = updated
        return SaveResult(record=record, recalculated=recalculated)

    def save_timesheet_entry(self, entry: TimesheetEntry, *, now: Optional[datetime] = None) -> SaveResult:
        """Validate, calculate and store one day, then re-derive its week.

        The cascade starts only after the day's own write has returned.
        """
        record = self.prepare_timesheet_entry(entry, now=now)
        self.write_day_record(record)
        return self.reconcile_week(record, now=now)

    def delete_timesheet_entry(self, employee_id: str, work_date: date, *, now: Optional[datetime] = None) -> list[DayRecord]:
        if self._timesheets.get(employee_id, work_date) is None:
            logger.info("timesheet_entry_missing", extra={"employee_id": employee_id, "work_date": work_date})
            return []
        self._timesheets.delete(employee_id, work_date)
        return self._cascade.recalculate_week(employee_id, work_date, now=now)

    def recalculate_week(self, employee_id: str, any_date_in_week: date, *, now: Optional[datetime] = None) -> list[DayRecord]:
        return self._cascade.recalculate_week(employee_id, any_date_in_week, now=now)
