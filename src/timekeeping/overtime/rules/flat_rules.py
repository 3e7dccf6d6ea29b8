from __future__ import annotations

from typing import Optional

from ...core.enums import CalculationMethod
from ..model import Classification
from .base import OvertimeRule, build_classification


class ExemptRule(OvertimeRule):
    """Exempt employees and contractors: every hour is regular."""

    def classify(self, *, hours_today: float, week_other_days_total: Optional[float] = None) -> Classification:
        return build_classification(
            regular=hours_today,
            overtime=0.0,
            double_overtime=0.0,
            method=CalculationMethod.EXEMPT_NO_CALCULATION,
        )


class ManualOverrideRule(OvertimeRule):
    """Administrative entry: hours are taken as given, no thresholds apply."""

    def classify(self, *, hours_today: float, week_other_days_total: Optional[float] = None) -> Classification:
        return build_classification(
            regular=hours_today,
            overtime=0.0,
            double_overtime=0.0,
            method=CalculationMethod.MANUAL_OVERRIDE,
        )
