from __future__ import annotations

from typing import Protocol, Sequence

from .model import Attendance


class AttendanceStore(Protocol):
    def load_attendance_for_month(self, employee_id: str, year: int, month: int) -> Sequence[Attendance]:
        raise NotImplementedError

    def save_attendance(self, entries: Sequence[Attendance]) -> None:
        raise NotImplementedError
