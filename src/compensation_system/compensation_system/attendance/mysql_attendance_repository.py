from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_clock
from .model import Attendance
from .repository import AttendanceStore


class MySQLAttendanceRepository(AttendanceStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_attendance_for_month(self, employee_id: str, year: int, month: int) -> Sequence[Attendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, year, month, day, time_in, time_out
                FROM attendances
                WHERE employee_id=%s AND year=%s AND month=%s
                ORDER BY day ASC
                """,
                (str(employee_id), int(year), int(month)),
            )
            rows = fetchall(cur)
            return [
                Attendance(
                    employee_id=str(r["employee_id"]),
                    year=int(r["year"]),
                    month=int(r["month"]),
                    day=int(r["day"]),
                    time_in=normalize_clock(r.get("time_in")),
                    time_out=normalize_clock(r.get("time_out")),
                )
                for r in rows
            ]

    def save_attendance(self, entries: Sequence[Attendance]) -> None:
        if not entries:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendances(employee_id, year, month, day, time_in, time_out)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE time_in=VALUES(time_in), time_out=VALUES(time_out)
                """,
                [(e.employee_id, e.year, e.month, e.day, e.time_in, e.time_out) for e in entries],
            )
