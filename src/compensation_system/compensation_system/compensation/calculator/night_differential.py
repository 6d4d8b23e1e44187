from __future__ import annotations

import math
from datetime import datetime, timedelta

from ...core.constants import NIGHT_DIFFERENTIAL_MIN_HOURS
from ...settings.model import AttendanceSettings
from ..model import NightDifferential


class NightDifferentialCalculator:
    """Night premium from clock time alone.

    The shift is walked hour by hour from time-in; an hour counts when its
    starting clock hour is inside [start_hour, 24) or [0, end_hour).
    """

    def compute(
        self,
        actual_time_in: datetime,
        actual_time_out: datetime,
        settings: AttendanceSettings,
        hourly_rate: float,
    ) -> NightDifferential:
        start_hour = settings.night_differential_start_hour
        end_hour = settings.night_differential_end_hour

        total_hours = math.ceil((actual_time_out - actual_time_in).total_seconds() / 3600)
        night_hours = 0
        current = actual_time_in
        for _ in range(max(total_hours, 0)):
            if self.is_night_hour(current.hour, start_hour, end_hour):
                night_hours += 1
            current += timedelta(hours=1)

        if night_hours < NIGHT_DIFFERENTIAL_MIN_HOURS:
            return NightDifferential(hours=0, pay=0.0)

        return NightDifferential(
            hours=night_hours,
            pay=night_hours * hourly_rate * settings.night_differential_multiplier,
        )

    @staticmethod
    def is_night_hour(hour: int, start_hour: int, end_hour: int) -> bool:
        return start_hour <= hour < 24 or 0 <= hour < end_hour
