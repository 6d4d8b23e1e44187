from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...attendance.model import Attendance
from ...core.enums import PayPath
from ...employees.model import Employee
from ...holidays.model import Holiday
from ...settings.model import AttendanceSettings, DailySchedule, EmploymentType
from ..absence import DayStatus
from ..model import Compensation, PayMetrics, TimeMetrics


@dataclass(frozen=True)
class DayContext:
    """Everything one day's computation reads; nothing here is fetched per day."""

    attendance: Attendance
    employee: Employee
    employment_type: Optional[EmploymentType]
    work_date: date
    settings: AttendanceSettings
    # calendar schedule as resolved, including days off
    schedule: Optional[DailySchedule]
    holiday: Optional[Holiday] = None
    existing: Optional[Compensation] = None

    @property
    def daily_rate(self) -> float:
        return float(self.employee.daily_rate or 0)

    @property
    def calculation_schedule(self) -> Optional[DailySchedule]:
        """Schedule that counts for pay and absence: None for presence-only types and days off."""
        employment_type = self.employment_type
        if employment_type is None or not employment_type.requires_time_tracking:
            return None
        if self.schedule is None or not self.schedule.is_working_day:
            return None
        return self.schedule


@dataclass(frozen=True)
class DayComputation:
    path: PayPath
    status: DayStatus
    time_metrics: TimeMetrics
    pay_metrics: PayMetrics


class CompensationStrategy(ABC):
    """Strategy Pattern: encapsulate how one day's pay is derived."""

    @abstractmethod
    def evaluate(self, ctx: DayContext) -> DayComputation:
        raise NotImplementedError

    @abstractmethod
    def compute(self, ctx: DayContext) -> Compensation:
        raise NotImplementedError
