from __future__ import annotations

from datetime import date

import pytest

from src.compensation_system.compensation_system.attendance.model import Attendance
from src.compensation_system.compensation_system.compensation.service import CompensationService
from src.compensation_system.compensation_system.core.enums import HolidayType
from src.compensation_system.compensation_system.core.exceptions import PersistenceError
from src.compensation_system.compensation_system.employees.model import Employee
from src.compensation_system.compensation_system.holidays.model import Holiday
from src.compensation_system.compensation_system.settings.model import (
    AttendanceSettings,
    EmploymentType,
    WeeklySchedule,
)


class FakeAttendanceRepo:
    def __init__(self, entries=None):
        self._rows = {(e.employee_id, e.year, e.month, e.day): e for e in (entries or [])}

    def load_attendance_for_month(self, employee_id, year, month):
        return [
            e
            for (eid, y, m, _d), e in sorted(self._rows.items(), key=lambda kv: kv[0][3])
            if eid == str(employee_id) and y == year and m == month
        ]

    def save_attendance(self, entries):
        for e in entries:
            self._rows[(e.employee_id, e.year, e.month, e.day)] = e

    def get(self, employee_id, year, month, day):
        return self._rows.get((employee_id, year, month, day))


class FakeCompensationRepo:
    def __init__(self, records=None, *, fail_on_days=()):
        self._rows = {r.key: r for r in (records or [])}
        self._fail_on_days = set(fail_on_days)
        self.saves = 0

    def load_compensation_for_month(self, employee_id, year, month):
        return [r for (eid, y, m, _d), r in self._rows.items() if eid == str(employee_id) and y == year and m == month]

    def save_or_update(self, records):
        for r in records:
            if r.day in self._fail_on_days:
                raise PersistenceError(f"Deadlock while saving day {r.day}")
            self._rows[r.key] = r
            self.saves += 1

    def get(self, employee_id, year, month, day):
        return self._rows.get((employee_id, year, month, day))


class FakeSettingsRepo:
    def __init__(self, settings, types):
        self._settings = settings
        self._types = list(types)

    def load_attendance_settings(self):
        return self._settings

    def load_employment_types(self):
        return list(self._types)


class FakeHolidayRepo:
    def __init__(self, holidays=None):
        self._holidays = list(holidays or [])

    def load_holidays(self, year, month):
        return list(self._holidays)


class FakeEmployeeRepo:
    def __init__(self, employees):
        self._employees = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id):
        return self._employees.get(str(employee_id))


def office_week(time_in="08:00", time_out="16:00"):
    # Monday..Friday working, Saturday/Sunday present in the pattern but without times
    days = [WeeklySchedule(day_of_week=d, time_in=time_in, time_out=time_out) for d in range(1, 6)]
    days += [WeeklySchedule(day_of_week=6), WeeklySchedule(day_of_week=7)]
    return tuple(days)


@pytest.fixture
def settings():
    return AttendanceSettings()


@pytest.fixture
def regular_type():
    return EmploymentType(type="regular", hours_of_work=8, weekly_schedules=office_week())


@pytest.fixture
def field_type():
    # Weekdays only, no weekend entries at all.
    return EmploymentType(
        type="field",
        hours_of_work=8,
        weekly_schedules=tuple(WeeklySchedule(day_of_week=d, time_in="08:00", time_out="16:00") for d in range(1, 6)),
    )


@pytest.fixture
def sales_type():
    return EmploymentType(type="sales", requires_time_tracking=False, weekly_schedules=office_week())


@pytest.fixture
def employees():
    return [
        Employee(employee_id="E1", name="Ana Cruz", employment_type="regular", daily_rate=800),
        Employee(employee_id="E2", name="Ben Reyes", employment_type="field", daily_rate=800),
        Employee(employee_id="E3", name="Carla Diaz", employment_type="sales", daily_rate=1000),
    ]


@pytest.fixture
def new_year_holiday():
    # 2025-01-10 is a Friday
    return Holiday(
        start_date=date(2025, 1, 10),
        end_date=date(2025, 1, 10),
        type=HolidayType.REGULAR,
        multiplier=1.5,
        name="Founders Day",
    )


@pytest.fixture
def january_entries():
    # 2025-01-06 is a Monday
    return [
        Attendance("E1", 2025, 1, 6, "08:00", "16:00"),
        Attendance("E1", 2025, 1, 7, "08:10", "18:30"),
        Attendance("E1", 2025, 1, 8),
        Attendance("E1", 2025, 1, 9, "08:00", None),
        Attendance("E1", 2025, 1, 40, "08:00", "16:00"),
    ]


@pytest.fixture
def make_service(settings, regular_type, field_type, sales_type, employees, new_year_holiday):
    def _make(*, entries=(), records=(), fail_on_days=(), holidays=None, types=None):
        attendance = FakeAttendanceRepo(list(entries))
        compensations = FakeCompensationRepo(list(records), fail_on_days=fail_on_days)
        service = CompensationService(
            attendance,
            compensations,
            FakeSettingsRepo(settings, [regular_type, field_type, sales_type] if types is None else types),
            FakeHolidayRepo([new_year_holiday] if holidays is None else holidays),
            FakeEmployeeRepo(employees),
        )
        return service, attendance, compensations

    return _make
