from __future__ import annotations

from typing import Any, Mapping, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import EmployeeDirectory


class MySQLEmployeeDirectory(EmployeeDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: str) -> Optional[Mapping[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, full_name, employment_type, is_exempt, pay_type, status,
                       hourly_rate, salary_amount, overtime_rate_multiplier
                FROM employees
                WHERE id=%s
                """,
                (str(employee_id),),
            )
            return fetchone(cur)
