from __future__ import annotations

from datetime import date
from typing import Optional

from ...common.datetime_utils import combine_with_rollover
from ...core.exceptions import ValidationError
from ...settings.model import DailySchedule
from ..model import NormalizedTimes, TimeWindow


class TimeNormalizer:
    """Turns "HH:mm" punches and schedule times into absolute instants.

    The same midnight rule applies to both pairs: an out-time whose hour is
    earlier than the in-time's hour belongs to the next calendar day.
    """

    def normalize(
        self,
        work_date: date,
        actual_time_in: str,
        actual_time_out: str,
        schedule: Optional[DailySchedule],
    ) -> NormalizedTimes:
        try:
            actual = TimeWindow(*combine_with_rollover(work_date, actual_time_in, actual_time_out))
        except (TypeError, ValueError, AttributeError):
            raise ValidationError(
                f"Punches {actual_time_in!r}/{actual_time_out!r} on {work_date.isoformat()} are not clock times"
            )

        if schedule is None or schedule.is_off or not schedule.has_times:
            return NormalizedTimes(actual=actual, scheduled=None)

        try:
            scheduled = TimeWindow(*combine_with_rollover(work_date, schedule.time_in, schedule.time_out))
        except (TypeError, ValueError, AttributeError):
            raise ValidationError(
                f"Schedule {schedule.time_in!r}/{schedule.time_out!r} on {work_date.isoformat()} are not clock times"
            )
        return NormalizedTimes(actual=actual, scheduled=scheduled)
