from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import ClockStatus, PunchType
from ..overtime.model import SaveResult
from ..overtime.service import OvertimeService
from ..timesheets.model import TimesheetEntry
from .model import Punch, PunchSummary, StatusSnapshot, TransitionCheck
from .repository import PunchRepository
from .state_machine import assert_transition, current_status, ordered, summarize, validate_transition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PunchResult:
    punch: Punch
    work_date: date
    status: ClockStatus
    saved: Optional[SaveResult] = None


class PunchService:
    """Use case: clock in / break / clock out.

    A clock-out closes the day: the punches are turned into a timesheet entry
    and handed to the overtime service, which stores it and re-derives the
    week.
    """

    def __init__(self, punches: PunchRepository, overtime: OvertimeService):
        self._punches = punches
        self._overtime = overtime

    def _open_day(self, employee_id: str, today: date) -> tuple[date, Sequence[Punch]]:
        """Work date the next punch belongs to.

        A shift still open from yesterday (overnight) keeps yesterday's date.
        """
        todays = self._punches.list_for_day(employee_id, today)
        if todays:
            return today, todays

        yesterday = today - timedelta(days=1)
        previous = self._punches.list_for_day(employee_id, yesterday)
        if previous and current_status(previous).status != ClockStatus.OUT:
            return yesterday, previous
        return today, todays

    def status(self, employee_id: str, *, now: Optional[datetime] = None) -> StatusSnapshot:
        now = now or now_local()
        _, punches = self._open_day(employee_id, now.date())
        return current_status(punches)

    def summary(self, employee_id: str, *, now: Optional[datetime] = None) -> PunchSummary:
        now = now or now_local()
        _, punches = self._open_day(employee_id, now.date())
        return summarize(punches, now=now)

    def check(self, employee_id: str, punch_type: str, *, now: Optional[datetime] = None) -> TransitionCheck:
        now = now or now_local()
        _, punches = self._open_day(employee_id, now.date())
        return validate_transition(punches, punch_type)

    def record_punch(self, employee_id: str, punch_type: str, *, now: Optional[datetime] = None) -> PunchResult:
        now = now or now_local()
        work_date, punches = self._open_day(employee_id, now.date())

        new_status = assert_transition(punches, punch_type)
        punch = Punch(type=PunchType(punch_type), timestamp=now)

        if punch.type != PunchType.OUT:
            self._append(employee_id, work_date, punch)
            return PunchResult(punch=punch, work_date=work_date, status=new_status)

        # Nothing is appended until the day record is stored; a failed
        # clock-out leaves the shift open.
        record = self._overtime.prepare_timesheet_entry(self._to_entry(employee_id, work_date, [*punches, punch]), now=now)
        self._overtime.write_day_record(record)
        self._append(employee_id, work_date, punch)
        saved = self._overtime.reconcile_week(record, now=now)
        return PunchResult(
            punch=punch,
            work_date=work_date,
            status=new_status,
            saved=saved,
        )

    def _append(self, employee_id: str, work_date: date, punch: Punch) -> None:
        self._punches.append(employee_id, work_date, punch)
        logger.info(
            "punch_recorded",
            extra={"employee_id": employee_id, "work_date": work_date, "punch_type": punch.type.value},
        )

    @staticmethod
    def _to_entry(employee_id: str, work_date: date, punches: Sequence[Punch]) -> TimesheetEntry:
        """First clock-in to last clock-out; everything not worked counts as break."""
        day = ordered(punches)
        first_in = next(p for p in day if p.type == PunchType.IN)
        last_out = day[-1]

        span_hours = (last_out.timestamp - first_in.timestamp).total_seconds() / 3600
        worked = summarize(day, now=last_out.timestamp).worked_hours
        return TimesheetEntry(
            employee_id=employee_id,
            work_date=work_date,
            time_in=first_in.timestamp.strftime("%H:%M"),
            time_out=last_out.timestamp.strftime("%H:%M"),
            break_duration=round(max(span_hours - worked, 0.0), 4),
            spans_midnight=last_out.timestamp.date() != first_in.timestamp.date(),
        )
