from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import CalculationMethod
from ..timesheets.model import DayRecord


@dataclass(frozen=True)
class Classification:
    """Hour split of one day as decided by an overtime rule."""

    regular: float
    overtime: float
    double_overtime: float
    total: float
    method: CalculationMethod
    weekly_hours_at_calculation: Optional[float] = None


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SaveResult:
    record: DayRecord
    recalculated: list[DayRecord] = field(default_factory=list)
