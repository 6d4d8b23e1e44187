from __future__ import annotations

from typing import Protocol, Sequence

from .model import Holiday


class HolidayProvider(Protocol):
    def load_holidays(self, year: int, month: int) -> Sequence[Holiday]:
        """Holidays overlapping the given month."""

        raise NotImplementedError
