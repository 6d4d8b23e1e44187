from __future__ import annotations

from typing import Iterable, Optional

from ..core.enums import MissingTimeField
from ..employees.model import Employee
from .model import Attendance, MissingTimeLog


def find_missing_time_logs(
    entries: Iterable[Attendance],
    employee: Employee,
    year: int,
    month: int,
    *,
    employment_type: Optional[str] = None,
) -> list[MissingTimeLog]:
    """List the days of a month where exactly one punch is missing."""

    logs: list[MissingTimeLog] = []
    for entry in entries:
        if entry.year != year or entry.month != month:
            continue
        if bool(entry.time_in) == bool(entry.time_out):
            continue
        logs.append(
            MissingTimeLog(
                employee_id=employee.employee_id,
                employee_name=employee.name,
                employment_type=employment_type or employee.employment_type,
                year=year,
                month=month,
                day=int(entry.day),
                missing_type=MissingTimeField.TIME_OUT if entry.time_in else MissingTimeField.TIME_IN,
                time_in=entry.time_in,
                time_out=entry.time_out,
            )
        )
    logs.sort(key=lambda log: log.day)
    return logs
