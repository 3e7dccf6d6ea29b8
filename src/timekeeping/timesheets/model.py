from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import CalculationMethod


@dataclass(frozen=True)
class DayRecord:
    """Thực thể miền (domain): Bảng công một ngày của một nhân viên.

    Identity is (employee_id, work_date). ``total_hours`` is always the sum of
    the three quarter-hour components.
    """

    employee_id: str
    work_date: date
    time_in: Optional[str]
    time_out: Optional[str]
    break_duration: float
    regular_hours: float
    overtime_hours: float
    double_overtime_hours: float
    total_hours: float
    calculation_method: CalculationMethod
    is_manual_override: bool = False
    weekly_hours_at_calculation: Optional[float] = None
    calculated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "time_in": self.time_in,
            "time_out": self.time_out,
            "break_duration": self.break_duration,
            "regular_hours": self.regular_hours,
            "overtime_hours": self.overtime_hours,
            "double_overtime_hours": self.double_overtime_hours,
            "total_hours": self.total_hours,
            "calculation_method": self.calculation_method.value,
            "is_manual_override": self.is_manual_override,
            "weekly_hours_at_calculation": self.weekly_hours_at_calculation,
            "calculated_at": self.calculated_at.isoformat() if self.calculated_at else None,
        }


@dataclass(frozen=True)
class TimesheetEntry:
    """Input of a day: what an employee or admin submits before calculation.

    ``spans_midnight`` is None when only clock strings are known; the
    validator then guesses an overnight shift from the noon cutoff.
    """

    employee_id: Optional[str]
    work_date: Optional[date]
    time_in: Optional[str]
    time_out: Optional[str]
    break_duration: float = 0.0
    total_hours: Optional[float] = None
    is_manual_override: bool = False
    spans_midnight: Optional[bool] = None
