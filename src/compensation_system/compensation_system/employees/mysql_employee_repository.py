from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Employee
from .repository import EmployeeProvider


class MySQLEmployeeRepository(EmployeeProvider):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, name, employment_type, daily_rate FROM employees WHERE employee_id=%s",
                (str(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(
                employee_id=str(r["employee_id"]),
                name=r["name"],
                employment_type=r.get("employment_type"),
                daily_rate=float(r.get("daily_rate") or 0),
            )
