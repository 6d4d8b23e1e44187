from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..settings.model import DailySchedule


@dataclass(frozen=True)
class ScheduleInfo:
    """Read-model for timesheet/roster views."""

    schedule: Optional[DailySchedule]
    has_schedule: bool
    is_rest_day: bool
    formatted: Optional[str] = None
