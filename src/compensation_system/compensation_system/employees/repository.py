from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class EmployeeProvider(Protocol):
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError
