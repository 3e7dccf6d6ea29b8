from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Punch
from .repository import PunchRepository


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_day(self, employee_id: str, work_date: date) -> Sequence[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT punch_type, punched_at
                FROM time_punches
                WHERE employee_id=%s AND work_date=%s
                ORDER BY punched_at ASC, punch_id ASC
                """,
                (str(employee_id), work_date),
            )
            return [Punch(type=PunchType(r["punch_type"]), timestamp=r["punched_at"]) for r in fetchall(cur)]

    def append(self, employee_id: str, work_date: date, punch: Punch) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_punches(employee_id, work_date, punch_type, punched_at)
                VALUES(%s,%s,%s,%s)
                """,
                (str(employee_id), work_date, punch.type.value, punch.timestamp),
            )
