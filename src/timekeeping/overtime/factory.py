from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import EmploymentType
from ..employees.model import EmployeeProfile
from .rules.base import OvertimeRule
from .rules.daily_threshold import DailyThresholdRule
from .rules.flat_rules import ExemptRule, ManualOverrideRule
from .rules.weekly_cumulative import WeeklyCumulativeRule


@dataclass
class OvertimeRuleFactory:
    """Factory Pattern: choose the overtime rule for an employee and entry.

    Priority: exemption, then manual override, then employment type. Unknown
    employment types get the weekly rule so they are never paid zero overtime
    by accident.
    """

    exempt: OvertimeRule = field(default_factory=ExemptRule)
    manual_override: OvertimeRule = field(default_factory=ManualOverrideRule)
    weekly: OvertimeRule = field(default_factory=WeeklyCumulativeRule)
    daily: OvertimeRule = field(default_factory=DailyThresholdRule)

    def for_employee(self, employee: EmployeeProfile, *, is_manual_override: bool = False) -> OvertimeRule:
        if employee.is_exempt:
            return self.exempt
        if is_manual_override:
            return self.manual_override
        return self.for_employment_type(employee.employment_type)

    def for_employment_type(self, employment_type: EmploymentType) -> OvertimeRule:
        if employment_type == EmploymentType.CONTRACTOR:
            return self.exempt
        if employment_type == EmploymentType.PART_TIME:
            return self.daily
        return self.weekly
