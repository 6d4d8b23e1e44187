from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import minutes_between
from ...core.constants import DEFAULT_HOURS_OF_WORK, OVERTIME_BLOCK_MINUTES
from ...holidays.model import Holiday
from ...settings.model import AttendanceSettings, EmploymentType
from ..model import PayMetrics, TimeMetrics, TimeWindow
from .base import PayMetricsCalculator, TimeMetricsCalculator
from .holiday_pay import holiday_bonus
from .night_differential import NightDifferentialCalculator


def deduction_minutes(minutes: int, grace_period: int) -> int:
    """Minutes beyond the grace period; nothing within it."""
    return max(0, minutes - grace_period)


def whole_hour_overtime(raw_minutes: float) -> int:
    """Overtime is credited in full hours only (59 extra minutes pay nothing)."""
    return int(max(0, raw_minutes) // OVERTIME_BLOCK_MINUTES) * OVERTIME_BLOCK_MINUTES


def standard_hours_of(employment_type: Optional[EmploymentType]) -> float:
    if employment_type is None:
        return float(DEFAULT_HOURS_OF_WORK)
    return employment_type.standard_hours


class StandardTimeMetricsCalculator(TimeMetricsCalculator):
    """Late/undertime against the schedule, overtime against both schedule and standard hours."""

    def compute(
        self,
        actual: TimeWindow,
        scheduled: Optional[TimeWindow],
        settings: AttendanceSettings,
        employment_type: Optional[EmploymentType],
    ) -> TimeMetrics:
        total_minutes_worked = abs(actual.minutes)
        standard_minutes = standard_hours_of(employment_type) * 60
        hours_worked = total_minutes_worked / 60

        if scheduled is None:
            overtime_minutes = whole_hour_overtime(total_minutes_worked - standard_minutes)
            return TimeMetrics(
                overtime_minutes=overtime_minutes,
                overtime_deduction_minutes=overtime_minutes,
                hours_worked=hours_worked,
            )

        late_minutes = max(0, minutes_between(actual.time_in, scheduled.time_in))
        undertime_minutes = max(0, minutes_between(scheduled.time_out, actual.time_out))
        early_minutes = max(0, minutes_between(scheduled.time_in, actual.time_in))
        late_out_minutes = max(0, minutes_between(actual.time_out, scheduled.time_out))

        if settings.count_early_time_in_as_overtime:
            overtime_from_schedule = early_minutes + late_out_minutes
        else:
            overtime_from_schedule = late_out_minutes
        overtime_from_total = max(0, total_minutes_worked - standard_minutes)
        overtime_minutes = whole_hour_overtime(max(overtime_from_total, overtime_from_schedule))

        return TimeMetrics(
            late_minutes=late_minutes,
            undertime_minutes=undertime_minutes,
            overtime_minutes=overtime_minutes,
            late_deduction_minutes=deduction_minutes(late_minutes, settings.late_grace_period),
            undertime_deduction_minutes=deduction_minutes(undertime_minutes, settings.undertime_grace_period),
            overtime_deduction_minutes=overtime_minutes,
            hours_worked=hours_worked,
        )


class StandardPayMetricsCalculator(PayMetricsCalculator):
    """Standard rule: daily rate + overtime + night premium + holiday bonus - late/undertime deductions."""

    def __init__(self, night_differential: Optional[NightDifferentialCalculator] = None):
        self._night = night_differential or NightDifferentialCalculator()

    def compute(
        self,
        time_metrics: TimeMetrics,
        settings: AttendanceSettings,
        daily_rate: float,
        *,
        holiday: Optional[Holiday] = None,
        actual: Optional[TimeWindow] = None,
        scheduled: Optional[TimeWindow] = None,
        employment_type: Optional[EmploymentType] = None,
    ) -> PayMetrics:
        # scheduled is accepted for symmetry only: night pay follows the clock, not the roster.
        hourly_rate = daily_rate / standard_hours_of(employment_type)
        overtime_hourly_rate = hourly_rate * settings.overtime_hourly_multiplier

        night_hours, night_pay = 0, 0.0
        if actual is not None:
            night = self._night.compute(actual.time_in, actual.time_out, settings, hourly_rate)
            night_hours, night_pay = night.hours, night.pay

        late_deduction = time_metrics.late_deduction_minutes * settings.late_deduction_per_minute
        undertime_deduction = time_metrics.undertime_deduction_minutes * settings.undertime_deduction_per_minute
        overtime_pay = (time_metrics.overtime_minutes / 60) * overtime_hourly_rate
        total_deductions = late_deduction + undertime_deduction
        bonus = holiday_bonus(daily_rate, holiday, settings)

        gross_pay = daily_rate + overtime_pay + night_pay + bonus
        return PayMetrics(
            deductions=total_deductions,
            late_deduction=late_deduction,
            undertime_deduction=undertime_deduction,
            overtime_pay=overtime_pay,
            holiday_bonus=bonus,
            night_differential_hours=night_hours,
            night_differential_pay=night_pay,
            gross_pay=gross_pay,
            net_pay=gross_pay - total_deductions,
            base_gross_pay=daily_rate,
        )
