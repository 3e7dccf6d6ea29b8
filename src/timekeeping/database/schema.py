"""DDL for the MySQL adapters.

Statements are idempotent (CREATE TABLE IF NOT EXISTS) so ``apply_schema`` is
safe to run on every start when AUTO_INIT_DB is enabled.
"""

from __future__ import annotations

from .connection import DatabaseConnection
from .mysql_base import db_cursor

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS employees (
        id VARCHAR(64) PRIMARY KEY,
        full_name VARCHAR(255) NOT NULL,
        employment_type VARCHAR(32) NULL,
        is_exempt TINYINT(1) NOT NULL DEFAULT 0,
        pay_type VARCHAR(16) NULL,
        status VARCHAR(16) NULL,
        hourly_rate DECIMAL(10, 2) NULL,
        salary_amount DECIMAL(12, 2) NULL,
        overtime_rate_multiplier DECIMAL(4, 2) NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS timesheet_entries (
        employee_id VARCHAR(64) NOT NULL,
        work_date DATE NOT NULL,
        time_in TIME NULL,
        time_out TIME NULL,
        break_duration DECIMAL(5, 2) NOT NULL DEFAULT 0,
        regular_hours DECIMAL(5, 2) NOT NULL DEFAULT 0,
        overtime_hours DECIMAL(5, 2) NOT NULL DEFAULT 0,
        daily_double_overtime DECIMAL(5, 2) NOT NULL DEFAULT 0,
        total_hours DECIMAL(5, 2) NOT NULL DEFAULT 0,
        calculation_method VARCHAR(32) NOT NULL,
        is_manual_override TINYINT(1) NOT NULL DEFAULT 0,
        weekly_hours_at_calculation DECIMAL(6, 2) NULL,
        calculation_timestamp DATETIME NULL,
        PRIMARY KEY (employee_id, work_date)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS time_punches (
        punch_id BIGINT AUTO_INCREMENT PRIMARY KEY,
        employee_id VARCHAR(64) NOT NULL,
        work_date DATE NOT NULL,
        punch_type VARCHAR(8) NOT NULL,
        punched_at DATETIME NOT NULL,
        INDEX idx_punches_day (employee_id, work_date, punched_at)
    )
    """,
)


def apply_schema(conn_factory: DatabaseConnection) -> None:
    with db_cursor(conn_factory) as (_, cur):
        for stmt in SCHEMA_STATEMENTS:
            cur.execute(stmt)
