from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ...core.enums import PayPath
from ..absence import AbsenceDeterminer
from ..assembler import CompensationAssembler
from ..calculator.holiday_pay import holiday_bonus
from ..model import Compensation, PayMetrics, TimeMetrics
from .base import CompensationStrategy, DayComputation, DayContext


class SimplifiedStrategy(CompensationStrategy):
    """Presence-only pay: holiday rate, daily rate when present, otherwise nothing."""

    def __init__(
        self,
        absence: Optional[AbsenceDeterminer] = None,
        assembler: Optional[CompensationAssembler] = None,
    ):
        self._absence = absence or AbsenceDeterminer()
        self._assembler = assembler or CompensationAssembler()

    def evaluate(self, ctx: DayContext) -> DayComputation:
        status = self._absence.classify(
            schedule=ctx.calculation_schedule,
            holiday=ctx.holiday,
            attendance=ctx.attendance,
            employment_type=ctx.employment_type,
        )
        daily_rate = ctx.daily_rate
        bonus = holiday_bonus(daily_rate, ctx.holiday, ctx.settings)
        if status.is_holiday:
            base, gross = daily_rate, daily_rate + bonus
        elif status.is_present:
            base, gross = daily_rate, daily_rate
        else:
            base, gross = 0.0, 0.0

        pay = PayMetrics(
            holiday_bonus=bonus,
            gross_pay=gross,
            net_pay=gross,
            base_gross_pay=base,
        )
        return DayComputation(path=PayPath.SIMPLIFIED, status=status, time_metrics=TimeMetrics(), pay_metrics=pay)

    def compute(self, ctx: DayContext) -> Compensation:
        result = self.evaluate(ctx)
        record = self._assembler.base_compensation(
            ctx.attendance,
            ctx.employee,
            ctx.work_date.month,
            ctx.work_date.year,
            holiday=ctx.holiday,
            existing=ctx.existing,
        )
        pay = result.pay_metrics
        absent = result.status.is_absent
        return replace(
            record,
            holiday_bonus=pay.holiday_bonus,
            base_gross_pay=pay.base_gross_pay,
            gross_pay=0.0 if absent else pay.gross_pay,
            net_pay=0.0 if absent else pay.net_pay,
            absence=absent,
        )
