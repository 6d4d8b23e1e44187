from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import days_in_month
from ..core.enums import HolidayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday
from .repository import HolidayProvider


class MySQLHolidayRepository(HolidayProvider):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_holidays(self, year: int, month: int) -> Sequence[Holiday]:
        first = date(int(year), int(month), 1)
        last = date(int(year), int(month), days_in_month(int(year), int(month)))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, name, start_date, end_date, type, multiplier
                FROM holidays
                WHERE start_date <= %s AND end_date >= %s
                ORDER BY start_date ASC
                """,
                (last, first),
            )
            rows = fetchall(cur)
            return [
                Holiday(
                    holiday_id=int(r["holiday_id"]),
                    name=r.get("name") or "",
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    type=HolidayType(r["type"]),
                    multiplier=float(r["multiplier"]),
                )
                for r in rows
            ]
