from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Union

from ..core.enums import HolidayType


@dataclass(frozen=True)
class Holiday:
    """Holiday calendar entry, inclusive on both ends."""

    start_date: Union[date, datetime]
    end_date: Union[date, datetime]
    type: HolidayType
    multiplier: float
    name: str = ""
    holiday_id: Optional[int] = None

    def covers(self, day: date) -> bool:
        # End date counts through 23:59:59, so compare calendar dates only.
        return _as_date(self.start_date) <= _as_date(day) <= _as_date(self.end_date)


def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def find_holiday(holidays: Iterable[Holiday], day: date) -> Optional[Holiday]:
    """First holiday covering day, if any."""
    for holiday in holidays:
        if holiday.covers(day):
            return holiday
    return None
