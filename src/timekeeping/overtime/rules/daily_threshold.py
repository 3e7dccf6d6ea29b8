from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...core.constants import DAILY_DOUBLE_OVERTIME_THRESHOLD_HOURS, DAILY_OVERTIME_THRESHOLD_HOURS
from ...core.enums import CalculationMethod
from ..model import Classification
from .base import OvertimeRule, build_classification


@dataclass
class DailyThresholdRule(OvertimeRule):
    """Part-time tiers on a single day: time-and-a-half past 8h, double past 12h."""

    overtime_after: float = DAILY_OVERTIME_THRESHOLD_HOURS
    double_after: float = DAILY_DOUBLE_OVERTIME_THRESHOLD_HOURS

    def classify(self, *, hours_today: float, week_other_days_total: Optional[float] = None) -> Classification:
        if hours_today > self.double_after:
            regular = self.overtime_after
            overtime = self.double_after - self.overtime_after
            double_overtime = hours_today - self.double_after
        elif hours_today > self.overtime_after:
            regular = self.overtime_after
            overtime = hours_today - self.overtime_after
            double_overtime = 0.0
        else:
            regular, overtime, double_overtime = hours_today, 0.0, 0.0

        return build_classification(
            regular=regular,
            overtime=overtime,
            double_overtime=double_overtime,
            method=CalculationMethod.DAILY_THRESHOLD,
        )
