from __future__ import annotations

import json
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceSettings, EmploymentType
from .repository import SettingsProvider

_SETTINGS_COLUMNS = (
    "late_grace_period",
    "late_deduction_per_minute",
    "undertime_grace_period",
    "undertime_deduction_per_minute",
    "overtime_grace_period",
    "overtime_hourly_multiplier",
    "regular_holiday_multiplier",
    "special_holiday_multiplier",
    "night_differential_multiplier",
    "night_differential_start_hour",
    "night_differential_end_hour",
    "count_early_time_in_as_overtime",
)


class MySQLSettingsRepository(SettingsProvider):
    def __init__(self, conn_factory: DatabaseConnection, *, defaults: Optional[AttendanceSettings] = None):
        self._conn_factory = conn_factory
        self._defaults = defaults or AttendanceSettings()

    def load_attendance_settings(self) -> AttendanceSettings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {', '.join(_SETTINGS_COLUMNS)} FROM attendance_settings WHERE settings_id=1")
            r = fetchone(cur)
            if not r:
                return self._defaults
            return AttendanceSettings.from_mapping(r, base=self._defaults)

    def load_employment_types(self) -> Sequence[EmploymentType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT type, hours_of_work, requires_time_tracking, weekly_schedules, month_schedules
                FROM employment_types
                ORDER BY type ASC
                """
            )
            rows = fetchall(cur)
            return [
                EmploymentType.from_mapping(
                    {
                        "type": r["type"],
                        "hoursOfWork": float(r["hours_of_work"]) if r.get("hours_of_work") is not None else None,
                        "requiresTimeTracking": bool(r["requires_time_tracking"]),
                        "weeklySchedules": json.loads(r["weekly_schedules"]) if r.get("weekly_schedules") else None,
                        "monthSchedules": json.loads(r["month_schedules"]) if r.get("month_schedules") else None,
                    }
                )
                for r in rows
            ]
