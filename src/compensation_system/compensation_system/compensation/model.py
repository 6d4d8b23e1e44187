from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from ..core.enums import CompensationState, DayType


@dataclass(frozen=True)
class TimeWindow:
    time_in: datetime
    time_out: datetime

    @property
    def minutes(self) -> int:
        return int(round((self.time_out - self.time_in).total_seconds() / 60))


@dataclass(frozen=True)
class NormalizedTimes:
    actual: TimeWindow
    scheduled: Optional[TimeWindow] = None


@dataclass(frozen=True)
class TimeMetrics:
    late_minutes: int = 0
    undertime_minutes: int = 0
    overtime_minutes: int = 0
    late_deduction_minutes: int = 0
    undertime_deduction_minutes: int = 0
    # Same value as overtime_minutes; kept as its own column for payroll reports.
    overtime_deduction_minutes: int = 0
    hours_worked: float = 0.0


@dataclass(frozen=True)
class NightDifferential:
    hours: int = 0
    pay: float = 0.0


@dataclass(frozen=True)
class PayMetrics:
    deductions: float = 0.0
    late_deduction: float = 0.0
    undertime_deduction: float = 0.0
    overtime_pay: float = 0.0
    holiday_bonus: float = 0.0
    night_differential_hours: int = 0
    night_differential_pay: float = 0.0
    gross_pay: float = 0.0
    net_pay: float = 0.0
    base_gross_pay: float = 0.0


# Fields a human may edit on a compensation record.
OVERRIDABLE_FIELDS = frozenset(
    {
        "gross_pay",
        "net_pay",
        "deductions",
        "late_deduction",
        "undertime_deduction",
        "overtime_pay",
        "holiday_bonus",
        "night_differential_pay",
        "daily_rate",
        "notes",
    }
)


@dataclass(frozen=True)
class Compensation:
    """Persisted per-day pay record, keyed by (employee_id, year, month, day)."""

    employee_id: str
    year: int
    month: int
    day: int
    day_type: DayType = DayType.REGULAR
    daily_rate: float = 0.0

    late_minutes: int = 0
    undertime_minutes: int = 0
    overtime_minutes: int = 0
    late_deduction_minutes: int = 0
    undertime_deduction_minutes: int = 0
    overtime_deduction_minutes: int = 0
    hours_worked: float = 0.0

    deductions: float = 0.0
    late_deduction: float = 0.0
    undertime_deduction: float = 0.0
    overtime_pay: float = 0.0
    holiday_bonus: float = 0.0
    night_differential_hours: int = 0
    night_differential_pay: float = 0.0
    gross_pay: float = 0.0
    net_pay: float = 0.0
    base_gross_pay: float = 0.0

    absence: bool = False
    notes: str = ""
    state: CompensationState = CompensationState.COMPUTED

    @property
    def key(self) -> tuple[str, int, int, int]:
        return (self.employee_id, self.year, self.month, self.day)

    @property
    def manual_override(self) -> bool:
        """Legacy flag view: anything not produced by the detailed pipeline needs review."""
        return self.state != CompensationState.COMPUTED

    @property
    def is_overridden(self) -> bool:
        return self.state == CompensationState.MANUALLY_OVERRIDDEN

    def with_override(self, **changes) -> "Compensation":
        """Apply a human edit and take ownership of the monetary fields."""
        return replace(self, **changes, state=CompensationState.MANUALLY_OVERRIDDEN)

    def released(self) -> "Compensation":
        """Hand the record back to automatic computation."""
        return replace(self, state=CompensationState.COMPUTED)

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "dayType": self.day_type.value,
            "dailyRate": self.daily_rate,
            "lateMinutes": self.late_minutes,
            "undertimeMinutes": self.undertime_minutes,
            "overtimeMinutes": self.overtime_minutes,
            "lateDeductionMinutes": self.late_deduction_minutes,
            "undertimeDeductionMinutes": self.undertime_deduction_minutes,
            "overtimeDeductionMinutes": self.overtime_deduction_minutes,
            "hoursWorked": self.hours_worked,
            "deductions": self.deductions,
            "lateDeduction": self.late_deduction,
            "undertimeDeduction": self.undertime_deduction,
            "overtimePay": self.overtime_pay,
            "holidayBonus": self.holiday_bonus,
            "nightDifferentialHours": self.night_differential_hours,
            "nightDifferentialPay": self.night_differential_pay,
            "grossPay": self.gross_pay,
            "netPay": self.net_pay,
            "baseGrossPay": self.base_gross_pay,
            "absence": self.absence,
            "notes": self.notes,
            "manualOverride": self.manual_override,
            "state": self.state.value,
        }


@dataclass(frozen=True)
class PaymentBreakdown:
    """Explains how a day's net pay was reached."""

    base_pay: float
    overtime_pay: float
    night_differential_pay: float
    holiday_bonus: float
    late_deduction: float
    undertime_deduction: float
    total_deductions: float
    net_pay: float
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "basePay": self.base_pay,
            "overtimePay": self.overtime_pay,
            "nightDifferentialPay": self.night_differential_pay,
            "holidayBonus": self.holiday_bonus,
            "deductions": {
                "late": self.late_deduction,
                "undertime": self.undertime_deduction,
                "total": self.total_deductions,
            },
            "netPay": self.net_pay,
            "details": dict(self.details),
        }
