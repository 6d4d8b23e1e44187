from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..attendance.model import Attendance
from ..core.enums import CompensationState, DayType, HolidayType
from ..employees.model import Employee
from ..holidays.model import Holiday
from .absence import DayStatus
from .model import Compensation, PayMetrics, TimeMetrics


def day_type_for(holiday: Optional[Holiday]) -> DayType:
    if holiday is None:
        return DayType.REGULAR
    return DayType.HOLIDAY if holiday.type == HolidayType.REGULAR else DayType.SPECIAL


class CompensationAssembler:
    """Builds the persisted record from the computed metrics.

    notes and a human-set override survive from the existing record; the
    assembler itself never marks a record as manually overridden.
    """

    def assemble(
        self,
        attendance: Attendance,
        employee: Employee,
        time_metrics: TimeMetrics,
        pay_metrics: PayMetrics,
        month: int,
        year: int,
        *,
        status: DayStatus,
        holiday: Optional[Holiday] = None,
        existing: Optional[Compensation] = None,
    ) -> Compensation:
        absent = status.is_absent
        state = CompensationState.MANUALLY_OVERRIDDEN if existing and existing.is_overridden else CompensationState.COMPUTED
        values = dict(
            employee_id=employee.employee_id,
            year=year,
            month=month,
            day=int(attendance.day),
            day_type=day_type_for(holiday),
            daily_rate=float(employee.daily_rate or 0),
            late_minutes=time_metrics.late_minutes,
            undertime_minutes=time_metrics.undertime_minutes,
            overtime_minutes=time_metrics.overtime_minutes,
            late_deduction_minutes=time_metrics.late_deduction_minutes,
            undertime_deduction_minutes=time_metrics.undertime_deduction_minutes,
            overtime_deduction_minutes=time_metrics.overtime_deduction_minutes,
            hours_worked=0.0 if absent else time_metrics.hours_worked,
            deductions=pay_metrics.deductions,
            late_deduction=pay_metrics.late_deduction,
            undertime_deduction=pay_metrics.undertime_deduction,
            overtime_pay=pay_metrics.overtime_pay,
            holiday_bonus=pay_metrics.holiday_bonus,
            night_differential_hours=pay_metrics.night_differential_hours,
            night_differential_pay=pay_metrics.night_differential_pay,
            gross_pay=0.0 if absent else pay_metrics.gross_pay,
            net_pay=0.0 if absent else pay_metrics.net_pay,
            base_gross_pay=pay_metrics.base_gross_pay,
            absence=absent,
            state=state,
        )
        if existing is not None:
            return replace(existing, **values)
        return Compensation(**values)

    def base_compensation(
        self,
        attendance: Attendance,
        employee: Employee,
        month: int,
        year: int,
        *,
        holiday: Optional[Holiday] = None,
        existing: Optional[Compensation] = None,
    ) -> Compensation:
        """Zeroed record for the presence-only path, flagged for review."""

        state = CompensationState.MANUALLY_OVERRIDDEN if existing and existing.is_overridden else CompensationState.SYNTHESIZED
        return Compensation(
            employee_id=employee.employee_id,
            year=year,
            month=month,
            day=int(attendance.day),
            day_type=day_type_for(holiday),
            daily_rate=float(employee.daily_rate or 0),
            notes=existing.notes if existing else "",
            state=state,
        )
