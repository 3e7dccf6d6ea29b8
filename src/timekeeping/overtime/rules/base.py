from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...common.time_arithmetic import round4
from ...core.enums import CalculationMethod
from ..model import Classification


def build_classification(
    *,
    regular: float,
    overtime: float,
    double_overtime: float,
    method: CalculationMethod,
    weekly_hours_at_calculation: Optional[float] = None,
) -> Classification:
    """Round every component and derive the total from the rounded parts."""
    regular, overtime, double_overtime = round4(regular), round4(overtime), round4(double_overtime)
    return Classification(
        regular=regular,
        overtime=overtime,
        double_overtime=double_overtime,
        total=round4(regular + overtime + double_overtime),
        method=method,
        weekly_hours_at_calculation=weekly_hours_at_calculation,
    )


class OvertimeRule(ABC):
    """Strategy Pattern: encapsulate how a day's hours are split."""

    # Rules that read the other days of the week set this to True.
    needs_weekly_context: bool = False

    @abstractmethod
    def classify(self, *, hours_today: float, week_other_days_total: Optional[float] = None) -> Classification:
        raise NotImplementedError
