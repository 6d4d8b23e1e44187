from __future__ import annotations

from typing import Protocol, Sequence

from .model import Compensation


class CompensationStore(Protocol):
    def load_compensation_for_month(self, employee_id: str, year: int, month: int) -> Sequence[Compensation]:
        raise NotImplementedError

    def save_or_update(self, records: Sequence[Compensation]) -> None:
        """Upsert by (employee_id, year, month, day)."""

        raise NotImplementedError
