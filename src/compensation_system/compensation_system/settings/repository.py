from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceSettings, EmploymentType


class SettingsProvider(Protocol):
    def load_attendance_settings(self) -> AttendanceSettings:
        """Current pay rules; defaults when nothing has been saved yet."""

        raise NotImplementedError

    def load_employment_types(self) -> Sequence[EmploymentType]:
        raise NotImplementedError
