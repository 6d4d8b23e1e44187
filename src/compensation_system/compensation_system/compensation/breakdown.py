from __future__ import annotations

from typing import Optional

from ..settings.model import AttendanceSettings, EmploymentType
from .calculator.standard_calculator import standard_hours_of
from .model import PaymentBreakdown, PayMetrics, TimeMetrics


def build_payment_breakdown(
    time_metrics: TimeMetrics,
    pay_metrics: PayMetrics,
    settings: AttendanceSettings,
    daily_rate: float,
    employment_type: Optional[EmploymentType],
) -> PaymentBreakdown:
    hourly_rate = daily_rate / standard_hours_of(employment_type)
    return PaymentBreakdown(
        base_pay=pay_metrics.base_gross_pay,
        overtime_pay=pay_metrics.overtime_pay,
        night_differential_pay=pay_metrics.night_differential_pay,
        holiday_bonus=pay_metrics.holiday_bonus,
        late_deduction=pay_metrics.late_deduction,
        undertime_deduction=pay_metrics.undertime_deduction,
        total_deductions=pay_metrics.deductions,
        net_pay=pay_metrics.net_pay,
        details={
            "hourlyRate": hourly_rate,
            "overtimeHourlyRate": hourly_rate * settings.overtime_hourly_multiplier,
            "overtimeMinutes": time_metrics.overtime_minutes,
            "nightDifferentialHours": pay_metrics.night_differential_hours,
            "lateMinutes": time_metrics.late_minutes,
            "undertimeMinutes": time_metrics.undertime_minutes,
            "lateGracePeriod": settings.late_grace_period,
            "undertimeGracePeriod": settings.undertime_grace_period,
            "lateDeductionPerMinute": settings.late_deduction_per_minute,
            "undertimeDeductionPerMinute": settings.undertime_deduction_per_minute,
        },
    )
