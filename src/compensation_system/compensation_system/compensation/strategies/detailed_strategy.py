from __future__ import annotations

from typing import Optional

from ...core.enums import PayPath
from ..absence import AbsenceDeterminer
from ..assembler import CompensationAssembler
from ..calculator.base import PayMetricsCalculator, TimeMetricsCalculator
from ..calculator.normalizer import TimeNormalizer
from ..calculator.standard_calculator import StandardPayMetricsCalculator, StandardTimeMetricsCalculator
from ..model import Compensation
from .base import CompensationStrategy, DayComputation, DayContext


class DetailedStrategy(CompensationStrategy):
    """Full pipeline for time-tracked days with both punches.

    On a rest day the normalizer yields no scheduled window, so overtime is
    measured against standard hours only.
    """

    def __init__(
        self,
        *,
        normalizer: Optional[TimeNormalizer] = None,
        time_calculator: Optional[TimeMetricsCalculator] = None,
        pay_calculator: Optional[PayMetricsCalculator] = None,
        absence: Optional[AbsenceDeterminer] = None,
        assembler: Optional[CompensationAssembler] = None,
    ):
        self._normalizer = normalizer or TimeNormalizer()
        self._time = time_calculator or StandardTimeMetricsCalculator()
        self._pay = pay_calculator or StandardPayMetricsCalculator()
        self._absence = absence or AbsenceDeterminer()
        self._assembler = assembler or CompensationAssembler()

    def evaluate(self, ctx: DayContext) -> DayComputation:
        entry = ctx.attendance
        times = self._normalizer.normalize(ctx.work_date, entry.time_in, entry.time_out, ctx.calculation_schedule)
        time_metrics = self._time.compute(times.actual, times.scheduled, ctx.settings, ctx.employment_type)
        pay_metrics = self._pay.compute(
            time_metrics,
            ctx.settings,
            ctx.daily_rate,
            holiday=ctx.holiday,
            actual=times.actual,
            scheduled=times.scheduled,
            employment_type=ctx.employment_type,
        )
        status = self._absence.classify(
            schedule=ctx.calculation_schedule,
            holiday=ctx.holiday,
            attendance=entry,
            employment_type=ctx.employment_type,
        )
        return DayComputation(path=PayPath.DETAILED, status=status, time_metrics=time_metrics, pay_metrics=pay_metrics)

    def compute(self, ctx: DayContext) -> Compensation:
        result = self.evaluate(ctx)
        return self._assembler.assemble(
            ctx.attendance,
            ctx.employee,
            result.time_metrics,
            result.pay_metrics,
            ctx.work_date.month,
            ctx.work_date.year,
            status=result.status,
            holiday=ctx.holiday,
            existing=ctx.existing,
        )
