from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..core.enums import EmploymentType, PayType


@dataclass(frozen=True)
class EmployeeProfile:
    """Thực thể miền (domain): Hồ sơ tính lương của nhân viên.

    Read-only for the overtime rules; the directory owns the record.
    """

    employee_id: str
    full_name: str
    employment_type: EmploymentType
    is_exempt: bool = False
    pay_type: PayType = PayType.HOURLY
    hourly_rate: float = 0.0
    salary_amount: float = 0.0
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER
    status: str = "active"
