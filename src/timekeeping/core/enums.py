from __future__ import annotations

from enum import Enum


class EmploymentType(str, Enum):
    """Payroll category of an employee.

    UNRECOGNIZED is never stored; the resolver maps unknown directory values to
    it so that the rule factory can route them to the weekly-cumulative rule
    instead of silently paying no overtime.
    """

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    TEMPORARY = "temporary"
    CONTRACTOR = "contractor"
    INTERN = "intern"
    SEASONAL = "seasonal"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: str | None) -> "EmploymentType":
        if not value:
            return cls.FULL_TIME
        try:
            member = cls(str(value).strip().lower())
        except ValueError:
            return cls.UNRECOGNIZED
        return member


WEEKLY_CUMULATIVE_TYPES = frozenset(
    {
        EmploymentType.FULL_TIME,
        EmploymentType.TEMPORARY,
        EmploymentType.INTERN,
        EmploymentType.SEASONAL,
        EmploymentType.UNRECOGNIZED,
    }
)


class PayType(str, Enum):
    HOURLY = "hourly"
    SALARIED = "salaried"


class CalculationMethod(str, Enum):
    """How the hour split of a day record was derived."""

    WEEKLY_CUMULATIVE = "weekly_cumulative"
    DAILY_THRESHOLD = "daily_threshold"
    MANUAL_OVERRIDE = "manual_override"
    EXEMPT_NO_CALCULATION = "exempt_no_calculation"


class PunchType(str, Enum):
    IN = "in"
    BREAK = "break"
    OUT = "out"


class ClockStatus(str, Enum):
    """Clock state derived from the latest punch of the day."""

    OUT = "out"
    IN = "in"
    BREAK = "break"
