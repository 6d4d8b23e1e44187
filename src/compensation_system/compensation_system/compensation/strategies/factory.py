from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...core.exceptions import IncompleteScheduleTimesError, MissingScheduleError
from ...schedules.resolver import ScheduleResolver
from .base import CompensationStrategy, DayContext
from .detailed_strategy import DetailedStrategy
from .simplified_strategy import SimplifiedStrategy

logger = logging.getLogger(__name__)


@dataclass
class CompensationStrategyFactory:
    """Factory Pattern: choose the pay path for a day."""

    resolver: ScheduleResolver = field(default_factory=ScheduleResolver)
    simplified: CompensationStrategy = field(default_factory=SimplifiedStrategy)
    detailed: CompensationStrategy = field(default_factory=DetailedStrategy)

    def for_day(self, ctx: DayContext) -> CompensationStrategy:
        employment_type = ctx.employment_type
        if employment_type is None or not employment_type.requires_time_tracking:
            return self.simplified
        if not ctx.attendance.has_clock_punches:
            return self.simplified

        if ctx.schedule is None:
            raise MissingScheduleError(
                f"No schedule for {employment_type.type!r} on {ctx.work_date.isoformat()}"
            )

        try:
            self.resolver.resolve_for_calculation(employment_type, ctx.work_date)
        except IncompleteScheduleTimesError as e:
            logger.warning("[compensation] %s; using presence-only pay for employee_id=%s", e, ctx.employee.employee_id)
            return self.simplified

        return self.detailed
