from __future__ import annotations

from typing import Sequence

from ..core.enums import CompensationState, DayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Compensation
from .repository import CompensationStore

_COLUMNS = (
    "employee_id",
    "year",
    "month",
    "day",
    "day_type",
    "daily_rate",
    "late_minutes",
    "undertime_minutes",
    "overtime_minutes",
    "late_deduction_minutes",
    "undertime_deduction_minutes",
    "overtime_deduction_minutes",
    "hours_worked",
    "deductions",
    "late_deduction",
    "undertime_deduction",
    "overtime_pay",
    "holiday_bonus",
    "night_differential_hours",
    "night_differential_pay",
    "gross_pay",
    "net_pay",
    "base_gross_pay",
    "absence",
    "notes",
    "state",
)
_KEY = {"employee_id", "year", "month", "day"}
_INTS = {
    "late_minutes",
    "undertime_minutes",
    "overtime_minutes",
    "late_deduction_minutes",
    "undertime_deduction_minutes",
    "overtime_deduction_minutes",
    "night_differential_hours",
}


def _row_to_compensation(r: dict) -> Compensation:
    values = {}
    for col in _COLUMNS:
        raw = r.get(col)
        if col == "employee_id":
            values[col] = str(raw)
        elif col in ("year", "month", "day") or col in _INTS:
            values[col] = int(raw or 0)
        elif col == "day_type":
            values[col] = DayType(raw or DayType.REGULAR.value)
        elif col == "state":
            values[col] = CompensationState(raw or CompensationState.COMPUTED.value)
        elif col == "absence":
            values[col] = bool(raw)
        elif col == "notes":
            values[col] = raw or ""
        else:
            values[col] = float(raw or 0)
    return Compensation(**values)


def _compensation_to_row(c: Compensation) -> tuple:
    out = []
    for col in _COLUMNS:
        value = getattr(c, col)
        if col in ("day_type", "state"):
            value = value.value
        elif col == "absence":
            value = 1 if value else 0
        out.append(value)
    # manual_override is kept as a plain column for reports that only know the flag.
    out.append(1 if c.manual_override else 0)
    return tuple(out)


class MySQLCompensationRepository(CompensationStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_compensation_for_month(self, employee_id: str, year: int, month: int) -> Sequence[Compensation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {', '.join(_COLUMNS)}
                FROM compensations
                WHERE employee_id=%s AND year=%s AND month=%s
                ORDER BY day ASC
                """,
                (str(employee_id), int(year), int(month)),
            )
            return [_row_to_compensation(r) for r in fetchall(cur)]

    def save_or_update(self, records: Sequence[Compensation]) -> None:
        if not records:
            return
        columns = list(_COLUMNS) + ["manual_override"]
        placeholders = ",".join(["%s"] * len(columns))
        updates = ", ".join(f"{col}=VALUES({col})" for col in columns if col not in _KEY)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                f"""
                INSERT INTO compensations({', '.join(columns)})
                VALUES({placeholders})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                [_compensation_to_row(c) for c in records],
            )
