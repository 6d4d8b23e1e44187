from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import PRESENT_SENTINEL
from ..core.enums import MissingTimeField


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one employee's punches for one day.

    time_in/time_out hold "HH:mm", the "present" sentinel for presence-only
    employment types, or None when nothing was recorded.
    """

    employee_id: str
    year: int
    month: int
    day: int
    time_in: Optional[str] = None
    time_out: Optional[str] = None

    @property
    def has_time_entries(self) -> bool:
        return bool(self.time_in) and bool(self.time_out)

    @property
    def marked_present(self) -> bool:
        return PRESENT_SENTINEL in (self.time_in, self.time_out)

    @property
    def has_clock_punches(self) -> bool:
        """Both punches are real clock times (not the presence sentinel)."""
        return self.has_time_entries and not self.marked_present


@dataclass(frozen=True)
class MissingTimeLog:
    """A day where only one of the two punches was recorded."""

    employee_id: str
    employee_name: str
    employment_type: Optional[str]
    year: int
    month: int
    day: int
    missing_type: MissingTimeField
    time_in: Optional[str] = None
    time_out: Optional[str] = None
