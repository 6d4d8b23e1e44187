from __future__ import annotations

from typing import Optional

from ...holidays.model import Holiday
from ...settings.model import AttendanceSettings


def holiday_multiplier(holiday: Holiday, settings: AttendanceSettings) -> float:
    """Multiplier on the holiday entry, else the configured one for its type."""
    if holiday.multiplier:
        return float(holiday.multiplier)
    return settings.holiday_multiplier_for(holiday.type)


def holiday_bonus(daily_rate: float, holiday: Optional[Holiday], settings: AttendanceSettings) -> float:
    """Premium over base pay, so that base + bonus == daily_rate * multiplier.

    Both pay paths use this one formula. A multiplier below 1 yields a
    negative bonus, i.e. a reduced total for the day.
    """

    if holiday is None:
        return 0.0
    return daily_rate * (holiday_multiplier(holiday, settings) - 1)
