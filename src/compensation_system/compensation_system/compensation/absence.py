from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import Attendance
from ..core.enums import DayClassification
from ..holidays.model import Holiday
from ..settings.model import DailySchedule, EmploymentType


@dataclass(frozen=True)
class DayStatus:
    is_workday: bool
    is_holiday: bool
    has_time_entries: bool
    is_present: bool
    is_absent: bool

    @property
    def classification(self) -> DayClassification:
        if self.is_holiday:
            return DayClassification.HOLIDAY
        if self.is_absent:
            return DayClassification.ABSENT
        if self.is_present:
            return DayClassification.WORKED
        return DayClassification.OFF


class AbsenceDeterminer:
    """Decides worked/absent/holiday/off for one day.

    Every pay path asks this class, so absence means the same thing everywhere:
    a working schedule, no holiday, and no complete pair of entries.
    """

    def classify(
        self,
        *,
        schedule: Optional[DailySchedule],
        holiday: Optional[Holiday],
        attendance: Attendance,
        employment_type: Optional[EmploymentType] = None,
    ) -> DayStatus:
        is_workday = schedule is not None and schedule.is_working_day
        is_holiday = holiday is not None
        has_time_entries = attendance.has_time_entries
        is_present = has_time_entries or (
            (employment_type is None or not employment_type.requires_time_tracking) and attendance.marked_present
        )
        is_absent = is_workday and not is_holiday and not has_time_entries and not is_present
        return DayStatus(
            is_workday=is_workday,
            is_holiday=is_holiday,
            has_time_entries=has_time_entries,
            is_present=is_present,
            is_absent=is_absent,
        )
