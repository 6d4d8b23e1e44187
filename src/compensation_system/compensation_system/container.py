from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceStore
from .compensation.mysql_compensation_repository import MySQLCompensationRepository
from .compensation.repository import CompensationStore
from .compensation.service import CompensationService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeProvider
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayProvider
from .settings.model import AttendanceSettings
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsProvider


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceStore
    compensation_repo: CompensationStore
    settings_repo: SettingsProvider
    holiday_repo: HolidayProvider
    employee_repo: EmployeeProvider

    compensation_service: CompensationService


def build_container(*, db_config: dict, attendance_defaults: Optional[dict] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    attendance_repo = MySQLAttendanceRepository(conn)
    compensation_repo = MySQLCompensationRepository(conn)
    settings_repo = MySQLSettingsRepository(
        conn, defaults=AttendanceSettings.from_mapping(attendance_defaults or {})
    )
    holiday_repo = MySQLHolidayRepository(conn)
    employee_repo = MySQLEmployeeRepository(conn)

    compensation_service = CompensationService(
        attendance_repo,
        compensation_repo,
        settings_repo,
        holiday_repo,
        employee_repo,
    )

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        compensation_repo=compensation_repo,
        settings_repo=settings_repo,
        holiday_repo=holiday_repo,
        employee_repo=employee_repo,
        compensation_service=compensation_service,
    )
