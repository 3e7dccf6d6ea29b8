from __future__ import annotations

from typing import Optional

from ..employees.model import EmployeeProfile
from .factory import OvertimeRuleFactory
from .model import Classification


class OvertimeRuleEngine:
    """Split a day's hours into regular / overtime / double overtime."""

    def __init__(self, factory: Optional[OvertimeRuleFactory] = None):
        self._factory = factory or OvertimeRuleFactory()

    @property
    def factory(self) -> OvertimeRuleFactory:
        return self._factory

    def classify(
        self,
        employee: EmployeeProfile,
        total_hours_today: float,
        week_other_days_total: Optional[float] = None,
        *,
        is_manual_override: bool = False,
    ) -> Classification:
        rule = self._factory.for_employee(employee, is_manual_override=is_manual_override)
        return rule.classify(hours_today=total_hours_today, week_other_days_total=week_other_days_total)

    def needs_weekly_context(self, employee: EmployeeProfile, *, is_manual_override: bool = False) -> bool:
        return self._factory.for_employee(employee, is_manual_override=is_manual_override).needs_weekly_context
