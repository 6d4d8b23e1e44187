from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import date_key, format_12h, month_key
from ..core.exceptions import IncompleteScheduleTimesError
from ..settings.model import DailySchedule, EmploymentType
from .model import ScheduleInfo


class ScheduleResolver:
    """Single place that answers "what are the working hours on this date".

    A month-specific entry always wins over the weekly pattern, even when it
    marks the day off.
    """

    def resolve(self, employment_type: Optional[EmploymentType], work_date: date) -> Optional[DailySchedule]:
        if employment_type is None:
            return None

        months = employment_type.month_schedules or {}
        override = (months.get(month_key(work_date)) or {}).get(date_key(work_date))
        if override is not None:
            return override

        if employment_type.weekly_schedules:
            # isoweekday(): Monday=1 .. Sunday=7
            weekday = work_date.isoweekday()
            for entry in employment_type.weekly_schedules:
                if entry.day_of_week == weekday:
                    return DailySchedule(
                        time_in=entry.time_in,
                        time_out=entry.time_out,
                        is_off=not entry.time_in or not entry.time_out,
                    )
        return None

    def resolve_for_calculation(
        self, employment_type: Optional[EmploymentType], work_date: date
    ) -> Optional[DailySchedule]:
        """Schedule that drives time-based pay, or None.

        Presence-only employment types and days off resolve to None. A working
        schedule missing one of its times raises IncompleteScheduleTimesError.
        """

        if employment_type is None or not employment_type.requires_time_tracking:
            return None

        schedule = self.resolve(employment_type, work_date)
        if schedule is None or schedule.is_off:
            return None
        if not schedule.has_times:
            raise IncompleteScheduleTimesError(
                f"Schedule for {employment_type.type!r} on {work_date.isoformat()} is missing timeIn/timeOut"
            )
        return schedule

    def is_workday(self, employment_type: Optional[EmploymentType], work_date: date) -> bool:
        schedule = self.resolve(employment_type, work_date)
        return schedule is not None and schedule.is_working_day

    def info(self, employment_type: Optional[EmploymentType], work_date: date) -> ScheduleInfo:
        schedule = self.resolve(employment_type, work_date)
        has_schedule = schedule is not None and schedule.is_working_day
        formatted = None
        if has_schedule:
            formatted = f"{format_12h(schedule.time_in)} - {format_12h(schedule.time_out)}"
        return ScheduleInfo(
            schedule=schedule,
            has_schedule=has_schedule,
            is_rest_day=employment_type is not None and not has_schedule,
            formatted=formatted,
        )
