from __future__ import annotations

from datetime import date

import pytest

from src.compensation_system.compensation_system.attendance.model import Attendance
from src.compensation_system.compensation_system.compensation.absence import AbsenceDeterminer
from src.compensation_system.compensation_system.compensation.assembler import CompensationAssembler, day_type_for
from src.compensation_system.compensation_system.compensation.model import Compensation, PayMetrics, TimeMetrics
from src.compensation_system.compensation_system.compensation.strategies.base import DayContext
from src.compensation_system.compensation_system.compensation.strategies.detailed_strategy import DetailedStrategy
from src.compensation_system.compensation_system.compensation.strategies.factory import CompensationStrategyFactory
from src.compensation_system.compensation_system.compensation.strategies.simplified_strategy import SimplifiedStrategy
from src.compensation_system.compensation_system.core.enums import (
    CompensationState,
    DayClassification,
    DayType,
    HolidayType,
)
from src.compensation_system.compensation_system.core.exceptions import MissingScheduleError
from src.compensation_system.compensation_system.employees.model import Employee
from src.compensation_system.compensation_system.holidays.model import Holiday
from src.compensation_system.compensation_system.schedules.resolver import ScheduleResolver
from src.compensation_system.compensation_system.settings.model import AttendanceSettings, DailySchedule, EmploymentType

MONDAY = date(2025, 1, 6)
SATURDAY = date(2025, 1, 4)


def _ctx(employment_type, work_date, time_in=None, time_out=None, *, holiday=None, existing=None, daily_rate=800):
    employee = Employee(employee_id="E1", name="Ana Cruz", employment_type=employment_type.type, daily_rate=daily_rate)
    return DayContext(
        attendance=Attendance("E1", work_date.year, work_date.month, work_date.day, time_in, time_out),
        employee=employee,
        employment_type=employment_type,
        work_date=work_date,
        settings=AttendanceSettings(),
        schedule=ScheduleResolver().resolve(employment_type, work_date),
        holiday=holiday,
        existing=existing,
    )


def _holiday(day, multiplier=1.5, htype=HolidayType.REGULAR):
    return Holiday(start_date=day, end_date=day, type=htype, multiplier=multiplier)


def test_presence_only_employee_on_holiday_gets_holiday_rate(sales_type):
    ctx = _ctx(sales_type, date(2025, 1, 10), "present", "present", holiday=_holiday(date(2025, 1, 10)), daily_rate=1000)

    record = SimplifiedStrategy().compute(ctx)

    assert record.gross_pay == pytest.approx(1500)
    assert record.net_pay == pytest.approx(1500)
    assert record.day_type == DayType.HOLIDAY
    assert record.absence is False
    assert record.state == CompensationState.SYNTHESIZED
    assert record.manual_override is True


def test_presence_only_employee_marked_present_gets_daily_rate(sales_type):
    ctx = _ctx(sales_type, MONDAY, "present", None, daily_rate=1000)

    record = SimplifiedStrategy().compute(ctx)

    assert record.gross_pay == 1000
    assert record.daily_rate == 1000
    assert record.absence is False


def test_no_punches_on_a_workday_is_an_absence(regular_type):
    ctx = _ctx(regular_type, MONDAY)

    record = SimplifiedStrategy().compute(ctx)

    assert record.absence is True
    assert record.gross_pay == 0
    assert record.net_pay == 0
    assert record.day_type == DayType.REGULAR


def test_presence_only_employee_without_entries_is_not_absent(sales_type):
    ctx = _ctx(sales_type, MONDAY, daily_rate=1000)

    record = SimplifiedStrategy().compute(ctx)

    assert ctx.schedule.is_working_day is True
    assert ctx.calculation_schedule is None
    assert record.absence is False
    assert record.gross_pay == 0
    assert record.net_pay == 0


def test_calculation_schedule_drops_days_off(regular_type):
    assert _ctx(regular_type, SATURDAY).calculation_schedule is None
    assert _ctx(regular_type, MONDAY).calculation_schedule == DailySchedule("08:00", "16:00")


def test_no_punches_on_a_holiday_is_not_an_absence(regular_type):
    ctx = _ctx(regular_type, MONDAY, holiday=_holiday(MONDAY, 2.0))

    record = SimplifiedStrategy().compute(ctx)

    assert record.absence is False
    assert record.gross_pay == pytest.approx(1600)


def test_no_punches_on_a_rest_day_is_off(regular_type):
    status = AbsenceDeterminer().classify(
        schedule=ScheduleResolver().resolve(regular_type, SATURDAY),
        holiday=None,
        attendance=Attendance("E1", 2025, 1, 4),
        employment_type=regular_type,
    )

    assert status.is_absent is False
    assert status.classification == DayClassification.OFF


def test_presence_sentinel_does_not_count_for_time_tracked_types(regular_type):
    status = AbsenceDeterminer().classify(
        schedule=DailySchedule("08:00", "16:00"),
        holiday=None,
        attendance=Attendance("E1", 2025, 1, 6, "present", None),
        employment_type=regular_type,
    )

    assert status.is_present is False
    assert status.classification == DayClassification.ABSENT


def test_absent_day_zeroes_pay_even_with_stale_metrics():
    employee = Employee(employee_id="E1", name="Ana Cruz", employment_type="regular", daily_rate=800)
    status = AbsenceDeterminer().classify(
        schedule=DailySchedule("08:00", "16:00"),
        holiday=None,
        attendance=Attendance("E1", 2025, 1, 6),
    )
    stale = PayMetrics(gross_pay=800, net_pay=780, base_gross_pay=800)

    record = CompensationAssembler().assemble(
        Attendance("E1", 2025, 1, 6),
        employee,
        TimeMetrics(hours_worked=8),
        stale,
        1,
        2025,
        status=status,
    )

    assert record.absence is True
    assert record.gross_pay == 0
    assert record.net_pay == 0
    assert record.hours_worked == 0


def test_assembler_keeps_notes_and_override_of_existing_record(regular_type):
    existing = Compensation(
        employee_id="E1", year=2025, month=1, day=6, notes="approved by HR", state=CompensationState.MANUALLY_OVERRIDDEN
    )
    ctx = _ctx(regular_type, MONDAY, "08:00", "16:00", existing=existing)

    record = DetailedStrategy().compute(ctx)

    assert record.notes == "approved by HR"
    assert record.state == CompensationState.MANUALLY_OVERRIDDEN
    assert record.gross_pay == pytest.approx(800)


def test_detailed_record_is_computed_not_flagged(regular_type):
    record = DetailedStrategy().compute(_ctx(regular_type, MONDAY, "08:00", "16:00"))

    assert record.state == CompensationState.COMPUTED
    assert record.manual_override is False
    assert record.daily_rate == 800


def test_night_shift_on_rest_day_is_paid_against_standard_hours(regular_type):
    record = DetailedStrategy().compute(_ctx(regular_type, SATURDAY, "22:00", "08:00"))

    assert record.overtime_minutes == 120
    assert record.late_minutes == 0
    assert record.night_differential_hours == 8
    assert record.absence is False


def test_day_type_follows_holiday_kind():
    assert day_type_for(None) == DayType.REGULAR
    assert day_type_for(_holiday(MONDAY)) == DayType.HOLIDAY
    assert day_type_for(_holiday(MONDAY, htype=HolidayType.SPECIAL)) == DayType.SPECIAL


def test_factory_picks_simplified_for_presence_only_type(sales_type):
    factory = CompensationStrategyFactory()

    assert factory.for_day(_ctx(sales_type, MONDAY, "08:00", "16:00")) is factory.simplified


def test_factory_picks_simplified_without_both_punches(regular_type):
    factory = CompensationStrategyFactory()

    assert factory.for_day(_ctx(regular_type, MONDAY, "08:00", None)) is factory.simplified
    assert factory.for_day(_ctx(regular_type, MONDAY)) is factory.simplified


def test_factory_picks_detailed_for_punched_days(regular_type):
    factory = CompensationStrategyFactory()

    assert factory.for_day(_ctx(regular_type, MONDAY, "08:00", "16:00")) is factory.detailed
    assert factory.for_day(_ctx(regular_type, SATURDAY, "08:00", "16:00")) is factory.detailed


def test_factory_requires_a_schedule_for_punched_days(field_type):
    with pytest.raises(MissingScheduleError):
        CompensationStrategyFactory().for_day(_ctx(field_type, SATURDAY, "08:00", "16:00"))


def test_factory_falls_back_when_schedule_times_are_incomplete():
    et = EmploymentType(type="regular", month_schedules={"2025-01": {"2025-01-06": DailySchedule("08:00", "")}})
    factory = CompensationStrategyFactory()

    assert factory.for_day(_ctx(et, MONDAY, "08:00", "16:00")) is factory.simplified
