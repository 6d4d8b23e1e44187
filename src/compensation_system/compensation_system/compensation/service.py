from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..attendance.missing_time import find_missing_time_logs
from ..attendance.model import Attendance, MissingTimeLog
from ..attendance.repository import AttendanceStore
from ..common.datetime_utils import days_in_month
from ..common.validators import require_month, require_non_negative
from ..core.exceptions import (
    InvalidDateError,
    ManualOverrideError,
    MissingScheduleError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ..employees.model import Employee
from ..employees.repository import EmployeeProvider
from ..holidays.model import Holiday, find_holiday
from ..holidays.repository import HolidayProvider
from ..schedules.model import ScheduleInfo
from ..schedules.resolver import ScheduleResolver
from ..settings.model import AttendanceSettings, EmploymentType
from ..settings.repository import SettingsProvider
from .breakdown import build_payment_breakdown
from .model import OVERRIDABLE_FIELDS, Compensation, PaymentBreakdown
from .repository import CompensationStore
from .strategies.base import DayContext
from .strategies.factory import CompensationStrategyFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthInputs:
    """Lookups shared by every day of one employee-month, loaded once."""

    employee: Employee
    employment_type: Optional[EmploymentType]
    settings: AttendanceSettings
    holidays: Sequence[Holiday]
    year: int
    month: int


@dataclass
class BatchResult:
    employee_id: str
    year: int
    month: int
    computed: list[Compensation] = field(default_factory=list)
    skipped_existing: list[int] = field(default_factory=list)
    skipped_overridden: list[int] = field(default_factory=list)
    invalid_days: list[int] = field(default_factory=list)
    missing_schedule_days: list[int] = field(default_factory=list)
    failed_days: dict[int, str] = field(default_factory=dict)
    missing_time_logs: list[MissingTimeLog] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "year": self.year,
            "month": self.month,
            "computed": [c.to_dict() for c in self.computed],
            "skippedExisting": list(self.skipped_existing),
            "skippedOverridden": list(self.skipped_overridden),
            "invalidDays": list(self.invalid_days),
            "missingScheduleDays": list(self.missing_schedule_days),
            "failedDays": {str(k): v for k, v in self.failed_days.items()},
            "missingTimeLogs": [
                {"day": log.day, "missingType": log.missing_type.value, "timeIn": log.time_in, "timeOut": log.time_out}
                for log in self.missing_time_logs
            ],
        }


class CompensationService:
    def __init__(
        self,
        attendance: AttendanceStore,
        compensations: CompensationStore,
        settings: SettingsProvider,
        holidays: HolidayProvider,
        employees: EmployeeProvider,
        *,
        resolver: Optional[ScheduleResolver] = None,
        strategy_factory: Optional[CompensationStrategyFactory] = None,
    ):
        self._attendance = attendance
        self._compensations = compensations
        self._settings = settings
        self._holidays = holidays
        self._employees = employees
        self._resolver = resolver or ScheduleResolver()
        self._factory = strategy_factory or CompensationStrategyFactory(resolver=self._resolver)

    # ------------------------------------------------------------------ loading

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(str(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def _load_month(self, employee_id: str, year: int, month: int) -> MonthInputs:
        year, month = require_month(year, month)
        employee = self._get_employee(employee_id)
        types = {t.type: t for t in self._settings.load_employment_types()}
        return MonthInputs(
            employee=employee,
            employment_type=types.get(employee.employment_type) if employee.employment_type else None,
            settings=self._settings.load_attendance_settings(),
            holidays=list(self._holidays.load_holidays(year, month)),
            year=year,
            month=month,
        )

    @staticmethod
    def _work_date(year: int, month: int, day: int) -> date:
        if int(day) < 1 or int(day) > days_in_month(year, month):
            raise InvalidDateError(year, month, int(day))
        return date(year, month, int(day))

    def _context(self, inputs: MonthInputs, entry: Attendance, existing: Optional[Compensation]) -> DayContext:
        work_date = self._work_date(inputs.year, inputs.month, entry.day)
        return DayContext(
            attendance=entry,
            employee=inputs.employee,
            employment_type=inputs.employment_type,
            work_date=work_date,
            settings=inputs.settings,
            schedule=self._resolver.resolve(inputs.employment_type, work_date),
            holiday=find_holiday(inputs.holidays, work_date),
            existing=existing,
        )

    def _find_existing(self, employee_id: str, year: int, month: int, day: int) -> Optional[Compensation]:
        for record in self._compensations.load_compensation_for_month(employee_id, year, month):
            if record.day == int(day):
                return record
        return None

    def _find_entry(self, employee_id: str, year: int, month: int, day: int) -> Attendance:
        for entry in self._attendance.load_attendance_for_month(employee_id, year, month):
            if int(entry.day) == int(day):
                return entry
        # No punches recorded at all.
        return Attendance(employee_id=str(employee_id), year=year, month=month, day=int(day))

    # ------------------------------------------------------------------ batch

    def compute_month(self, employee_id: str, year: int, month: int, *, recompute: bool = False) -> BatchResult:
        """Compute and persist every attendance day of one employee-month.

        Days are handled one at a time and saved individually; a bad day is
        recorded on the result and never stops the rest of the batch.
        Manually overridden records are left untouched even with recompute.
        """

        inputs = self._load_month(employee_id, year, month)
        employee = inputs.employee
        result = BatchResult(employee_id=employee.employee_id, year=inputs.year, month=inputs.month)

        entries = self._attendance.load_attendance_for_month(employee.employee_id, inputs.year, inputs.month)
        existing_by_day = {
            c.day: c
            for c in self._compensations.load_compensation_for_month(employee.employee_id, inputs.year, inputs.month)
        }

        for entry in entries:
            day = int(entry.day)
            try:
                ctx = self._context(inputs, entry, existing_by_day.get(day))
            except InvalidDateError as e:
                logger.warning("[compensation] skipping entry: %s", e)
                result.invalid_days.append(day)
                continue

            found = ctx.existing
            if found is not None and not recompute:
                result.skipped_existing.append(day)
                continue
            if found is not None and found.is_overridden:
                logger.info("[compensation] day %s is manually overridden, not recomputed", ctx.work_date.isoformat())
                result.skipped_overridden.append(day)
                continue

            try:
                record = self._factory.for_day(ctx).compute(ctx)
            except MissingScheduleError as e:
                logger.warning("[compensation] %s (employee_id=%s)", e, employee.employee_id)
                result.missing_schedule_days.append(day)
                continue
            except ValidationError as e:
                logger.warning("[compensation] day %s not computed: %s", ctx.work_date.isoformat(), e)
                result.failed_days[day] = str(e)
                continue

            try:
                self._compensations.save_or_update([record])
            except PersistenceError as e:
                logger.exception("[compensation] saving day %s failed", ctx.work_date.isoformat())
                result.failed_days[day] = str(e)
                continue

            existing_by_day[day] = record
            result.computed.append(record)
            logger.debug(
                "[compensation] %s computed: %s absence=%s net=%.2f",
                ctx.work_date.isoformat(),
                record.day_type.value,
                record.absence,
                record.net_pay,
            )

        result.missing_time_logs = find_missing_time_logs(
            entries,
            employee,
            inputs.year,
            inputs.month,
            employment_type=inputs.employment_type.type if inputs.employment_type else None,
        )
        logger.info(
            "[compensation] %s %04d-%02d: entries=%s computed=%s skipped=%s overridden=%s invalid=%s "
            "missing_schedule=%s failed=%s",
            employee.employee_id,
            inputs.year,
            inputs.month,
            len(entries),
            len(result.computed),
            len(result.skipped_existing),
            len(result.skipped_overridden),
            len(result.invalid_days),
            len(result.missing_schedule_days),
            len(result.failed_days),
        )
        return result

    # ------------------------------------------------------------------ single day

    def compute_day(self, employee_id: str, year: int, month: int, day: int, *, force: bool = False) -> Compensation:
        """Recompute one day. force=True is the explicit action that takes a record back from a human edit."""

        inputs = self._load_month(employee_id, year, month)
        employee_id = inputs.employee.employee_id
        self._work_date(inputs.year, inputs.month, day)

        existing = self._find_existing(employee_id, inputs.year, inputs.month, day)
        if existing is not None and existing.is_overridden and not force:
            raise ManualOverrideError(
                f"Compensation for day {day} was edited by hand; recompute with force to replace it"
            )

        if existing is not None and existing.is_overridden:
            logger.info("[compensation] day %s: manual override released by forced recompute", day)
            existing = existing.released()

        entry = self._find_entry(employee_id, inputs.year, inputs.month, day)
        ctx = self._context(inputs, entry, existing)
        record = self._factory.for_day(ctx).compute(ctx)

        self._compensations.save_or_update([record])
        return record

    def record_attendance(self, entry: Attendance) -> Optional[Compensation]:
        """Save a day's punches and refresh its compensation.

        Returns None when the record is hand-edited or no schedule applies;
        the attendance itself is saved either way.
        """

        inputs = self._load_month(entry.employee_id, entry.year, entry.month)
        self._work_date(inputs.year, inputs.month, entry.day)
        self._attendance.save_attendance([entry])

        existing = self._find_existing(inputs.employee.employee_id, inputs.year, inputs.month, entry.day)
        if existing is not None and existing.is_overridden:
            logger.info("[compensation] attendance saved, day %s keeps its manual override", entry.day)
            return None

        ctx = self._context(inputs, entry, existing)
        try:
            record = self._factory.for_day(ctx).compute(ctx)
        except MissingScheduleError as e:
            logger.warning("[compensation] attendance saved without compensation: %s", e)
            return None

        self._compensations.save_or_update([record])
        return record

    def apply_manual_override(self, employee_id: str, year: int, month: int, day: int, **fields) -> Compensation:
        unknown = set(fields) - OVERRIDABLE_FIELDS
        if unknown:
            raise ValidationError(f"Fields cannot be overridden: {', '.join(sorted(unknown))}")
        if not fields:
            raise ValidationError("Nothing to override")

        changes: dict = {}
        for name, value in fields.items():
            if name == "notes":
                changes[name] = str(value or "")
            elif name == "holiday_bonus":
                try:
                    changes[name] = float(value)
                except (TypeError, ValueError):
                    raise ValidationError("holiday_bonus must be a number")
            else:
                changes[name] = require_non_negative(value, name)

        existing = self._find_existing(str(employee_id), int(year), int(month), int(day))
        if existing is None:
            raise NotFoundError(f"No compensation for day {day} of {int(year):04d}-{int(month):02d}")

        record = existing.with_override(**changes)
        self._compensations.save_or_update([record])
        return record

    # ------------------------------------------------------------------ read side

    def list_month(self, employee_id: str, year: int, month: int) -> list[Compensation]:
        year, month = require_month(year, month)
        self._get_employee(employee_id)
        records = self._compensations.load_compensation_for_month(str(employee_id), year, month)
        return sorted(records, key=lambda c: c.day)

    def breakdown(self, employee_id: str, year: int, month: int, day: int) -> PaymentBreakdown:
        inputs = self._load_month(employee_id, year, month)
        entry = self._find_entry(inputs.employee.employee_id, inputs.year, inputs.month, day)
        ctx = self._context(inputs, entry, None)
        computation = self._factory.for_day(ctx).evaluate(ctx)
        return build_payment_breakdown(
            computation.time_metrics,
            computation.pay_metrics,
            inputs.settings,
            ctx.daily_rate,
            inputs.employment_type,
        )

    def month_schedule(self, employee_id: str, year: int, month: int) -> list[tuple[int, ScheduleInfo]]:
        year, month = require_month(year, month)
        employee = self._get_employee(employee_id)
        types = {t.type: t for t in self._settings.load_employment_types()}
        employment_type = types.get(employee.employment_type) if employee.employment_type else None
        return [
            (day, self._resolver.info(employment_type, date(year, month, day)))
            for day in range(1, days_in_month(year, month) + 1)
        ]

