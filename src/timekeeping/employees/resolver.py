from __future__ import annotations

import logging
from typing import Any, Mapping

from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..core.enums import EmploymentType, PayType
from ..core.exceptions import DomainError, EmployeeLookupFailed
from .model import EmployeeProfile
from .repository import EmployeeDirectory

logger = logging.getLogger(__name__)


class EmployeeProfileResolver:
    """Use case: turn a directory row into an EmployeeProfile.

    A failed lookup is reported as EmployeeLookupFailed. Defaults apply only to
    optional attributes of a record that was actually found, so a directory
    outage can never be paid out as a made-up full-time profile.
    """

    def __init__(self, directory: EmployeeDirectory):
        self._directory = directory

    def resolve(self, employee_id: str) -> EmployeeProfile:
        try:
            row = self._directory.get(employee_id)
        except EmployeeLookupFailed:
            raise
        except (DomainError, OSError, LookupError) as e:
            logger.warning("employee_lookup_failed", extra={"employee_id": employee_id, "reason": str(e)})
            raise EmployeeLookupFailed(f"Employee directory unavailable for {employee_id}", transient=True) from e

        if not row:
            logger.warning("employee_lookup_failed", extra={"employee_id": employee_id, "reason": "not_found"})
            raise EmployeeLookupFailed(f"Employee {employee_id} not found")

        return self._to_profile(employee_id, row)

    @staticmethod
    def _to_profile(employee_id: str, row: Mapping[str, Any]) -> EmployeeProfile:
        try:
            pay_type = PayType(str(row.get("pay_type") or PayType.HOURLY.value).strip().lower())
        except ValueError:
            pay_type = PayType.HOURLY

        return EmployeeProfile(
            employee_id=str(row.get("id") or employee_id),
            full_name=row.get("full_name") or "",
            employment_type=EmploymentType.parse(row.get("employment_type")),
            is_exempt=bool(row.get("is_exempt") or False),
            pay_type=pay_type,
            hourly_rate=float(row.get("hourly_rate") or 0),
            salary_amount=float(row.get("salary_amount") or 0),
            overtime_multiplier=float(row.get("overtime_rate_multiplier") or DEFAULT_OVERTIME_MULTIPLIER),
            status=row.get("status") or "active",
        )
