from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...holidays.model import Holiday
from ...settings.model import AttendanceSettings, EmploymentType
from ..model import PayMetrics, TimeMetrics, TimeWindow


class TimeMetricsCalculator(ABC):
    """Calculator interface (Strategy Pattern for time rules)."""

    @abstractmethod
    def compute(
        self,
        actual: TimeWindow,
        scheduled: Optional[TimeWindow],
        settings: AttendanceSettings,
        employment_type: Optional[EmploymentType],
    ) -> TimeMetrics:
        raise NotImplementedError


class PayMetricsCalculator(ABC):
    """Calculator interface (Strategy Pattern for pay rules)."""

    @abstractmethod
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
        raise NotImplementedError
