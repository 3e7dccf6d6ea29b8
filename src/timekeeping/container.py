from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_WEEK_LOCK_TIMEOUT_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_directory import MySQLEmployeeDirectory
from .employees.repository import EmployeeDirectory
from .employees.resolver import EmployeeProfileResolver
from .overtime.cascade import WeeklyRecalculationService
from .overtime.engine import OvertimeRuleEngine
from .overtime.factory import OvertimeRuleFactory
from .overtime.service import OvertimeService
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService
from .timesheets.mysql_timesheet_store import MySQLTimesheetStore
from .timesheets.repository import TimesheetStore


@dataclass(frozen=True)
class Container:
    employee_directory: EmployeeDirectory
    timesheet_store: TimesheetStore
    punch_repo: PunchRepository

    employee_resolver: EmployeeProfileResolver
    overtime_engine: OvertimeRuleEngine
    recalculation_service: WeeklyRecalculationService
    overtime_service: OvertimeService
    punch_service: PunchService


def wire_services(
    *,
    employee_directory: EmployeeDirectory,
    timesheet_store: TimesheetStore,
    punch_repo: PunchRepository,
) -> Container:
    """Build the service graph over any repository implementations."""
    employee_resolver = EmployeeProfileResolver(employee_directory)
    overtime_engine = OvertimeRuleEngine(OvertimeRuleFactory())
    recalculation_service = WeeklyRecalculationService(employee_resolver, timesheet_store, engine=overtime_engine)
    overtime_service = OvertimeService(
        employee_resolver,
        timesheet_store,
        engine=overtime_engine,
        cascade=recalculation_service,
    )
    punch_service = PunchService(punch_repo, overtime_service)

    return Container(
        employee_directory=employee_directory,
        timesheet_store=timesheet_store,
        punch_repo=punch_repo,
        employee_resolver=employee_resolver,
        overtime_engine=overtime_engine,
        recalculation_service=recalculation_service,
        overtime_service=overtime_service,
        punch_service=punch_service,
    )


def build_container(*, db_config: dict, lock_timeout: int = DEFAULT_WEEK_LOCK_TIMEOUT_SECONDS) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    return wire_services(
        employee_directory=MySQLEmployeeDirectory(conn),
        timesheet_store=MySQLTimesheetStore(conn, lock_timeout=lock_timeout),
        punch_repo=MySQLPunchRepository(conn),
    )
