from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: the slice of an employee the pay engine needs."""

    employee_id: str
    name: str
    employment_type: Optional[str]
    daily_rate: float = 0.0
