from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...common.time_arithmetic import round4
from ...core.constants import WEEKLY_OVERTIME_THRESHOLD_HOURS
from ...core.enums import CalculationMethod
from ..model import Classification
from .base import OvertimeRule, build_classification


@dataclass
class WeeklyCumulativeRule(OvertimeRule):
    """Overtime once the Monday-Sunday running total passes the threshold.

    Only the part of today's hours above the threshold is overtime; there is
    no double-overtime tier.
    """

    threshold: float = WEEKLY_OVERTIME_THRESHOLD_HOURS
    needs_weekly_context = True

    def classify(self, *, hours_today: float, week_other_days_total: Optional[float] = None) -> Classification:
        new_total = float(week_other_days_total or 0.0) + hours_today

        overtime = 0.0
        if new_total > self.threshold:
            overtime = min(hours_today, new_total - self.threshold)

        return build_classification(
            regular=hours_today - overtime,
            overtime=overtime,
            double_overtime=0.0,
            method=CalculationMethod.WEEKLY_CUMULATIVE,
            weekly_hours_at_calculation=round4(new_total),
        )
