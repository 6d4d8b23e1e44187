from __future__ import annotations

import json
from datetime import timedelta

import mysql.connector
import pytest

from src.compensation_system.compensation_system.compensation.model import Compensation
from src.compensation_system.compensation_system.compensation.mysql_compensation_repository import (
    MySQLCompensationRepository,
)
from src.compensation_system.compensation_system.core.enums import CompensationState, DayType
from src.compensation_system.compensation_system.core.exceptions import PersistenceError
from src.compensation_system.compensation_system.database.mysql_base import normalize_clock
from src.compensation_system.compensation_system.settings.model import AttendanceSettings, DailySchedule, EmploymentType
from src.compensation_system.compensation_system.settings.mysql_settings_repository import MySQLSettingsRepository


class FakeCursor:
    def __init__(self, rows, fail=False):
        self._rows = rows
        self._fail = fail
        self.executed = []

    def execute(self, sql, params=None):
        if self._fail:
            raise mysql.connector.Error("lost connection")
        self.executed.append((sql, params))

    def executemany(self, sql, seq):
        self.executed.append((sql, list(seq)))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows=(), fail=False):
        self.cursor = FakeCursor(list(rows), fail=fail)
        self.conn = FakeConn(self.cursor)

    def connect(self):
        return self.conn


def test_settings_accept_camel_and_snake_case():
    s = AttendanceSettings.from_mapping({"lateGracePeriod": 10, "late_deduction_per_minute": "2.5"})

    assert s.late_grace_period == 10
    assert s.late_deduction_per_minute == 2.5
    assert s.undertime_grace_period == 5


@pytest.mark.parametrize("raw, expected", [("false", False), ("0", False), ("True", True), (1, True), (0, False)])
def test_early_overtime_flag_parses_text_booleans(raw, expected):
    s = AttendanceSettings.from_mapping({"countEarlyTimeInAsOvertime": raw})

    assert s.count_early_time_in_as_overtime is expected


def test_unreadable_boolean_is_rejected():
    with pytest.raises(ValueError):
        AttendanceSettings.from_mapping({"countEarlyTimeInAsOvertime": "sometimes"})


def test_schedule_flags_parse_text_booleans():
    et = EmploymentType.from_mapping({"type": "sales", "requiresTimeTracking": "false"})

    assert et.requires_time_tracking is False
    assert DailySchedule.from_mapping({"timeIn": "", "timeOut": "", "isOff": "true"}).is_off is True


def test_unset_multipliers_fall_back_to_defaults():
    s = AttendanceSettings.from_mapping(
        {"overtimeHourlyMultiplier": 0, "specialHolidayMultiplier": None, "nightDifferentialStartHour": 0}
    )

    assert s.overtime_hourly_multiplier == 1.25
    assert s.special_holiday_multiplier == 2.0
    assert s.night_differential_start_hour == 22


def test_settings_row_is_layered_over_configured_defaults():
    factory = FakeConnFactory(rows=[{"late_grace_period": 0, "count_early_time_in_as_overtime": 1}])
    repo = MySQLSettingsRepository(factory, defaults=AttendanceSettings(late_deduction_per_minute=3.0))

    s = repo.load_attendance_settings()

    assert s.late_grace_period == 0
    assert s.late_deduction_per_minute == 3.0
    assert s.count_early_time_in_as_overtime is True


def test_missing_settings_row_returns_defaults():
    defaults = AttendanceSettings(late_grace_period=7)

    assert MySQLSettingsRepository(FakeConnFactory(), defaults=defaults).load_attendance_settings() is defaults


def test_employment_types_are_read_from_json_columns():
    factory = FakeConnFactory(
        rows=[
            {
                "type": "regular",
                "hours_of_work": 8,
                "requires_time_tracking": 1,
                "weekly_schedules": json.dumps([{"dayOfWeek": 1, "timeIn": "08:00", "timeOut": "17:00"}]),
                "month_schedules": None,
            }
        ]
    )

    (et,) = MySQLSettingsRepository(factory).load_employment_types()

    assert et.type == "regular"
    assert et.weekly_schedules[0].time_out == "17:00"
    assert et.month_schedules is None


def test_compensation_rows_round_trip_state():
    record = Compensation(
        employee_id="E1",
        year=2025,
        month=1,
        day=6,
        day_type=DayType.SPECIAL,
        net_pay=950.5,
        absence=True,
        state=CompensationState.SYNTHESIZED,
    )
    factory = FakeConnFactory()
    MySQLCompensationRepository(factory).save_or_update([record])

    sql, rows = factory.cursor.executed[0]
    assert "ON DUPLICATE KEY UPDATE" in sql
    row = rows[0]
    assert row[4] == "Special"
    assert row[-2] == "SYNTHESIZED"
    assert row[-1] == 1
    assert factory.conn.committed is True

    stored = dict(zip(sql.split("(")[1].split(")")[0].replace(" ", "").split(","), row))
    loaded = MySQLCompensationRepository(FakeConnFactory(rows=[stored])).load_compensation_for_month("E1", 2025, 1)
    assert loaded == [record]


def test_database_errors_become_persistence_errors():
    factory = FakeConnFactory(fail=True)

    with pytest.raises(PersistenceError):
        MySQLCompensationRepository(factory).load_compensation_for_month("E1", 2025, 1)
    assert factory.conn.rolled_back is True


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(hours=8, minutes=5), "08:05"),
        ("8:30:00", "08:30"),
        ("present", "present"),
        ("", None),
        (None, None),
    ],
)
def test_normalize_clock(value, expected):
    assert normalize_clock(value) == expected
