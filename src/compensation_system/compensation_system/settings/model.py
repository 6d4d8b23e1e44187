from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core import constants as c
from ..core.enums import HolidayType


@dataclass(frozen=True)
class DailySchedule:
    """Expected working hours for one date.

    Empty times or is_off=True mean no work is expected.
    """

    time_in: str = ""
    time_out: str = ""
    is_off: bool = False

    @property
    def has_times(self) -> bool:
        return bool(self.time_in) and bool(self.time_out)

    @property
    def is_working_day(self) -> bool:
        return self.has_times and not self.is_off

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DailySchedule":
        return cls(
            time_in=str(data.get("timeIn") or ""),
            time_out=str(data.get("timeOut") or ""),
            is_off=_as_bool(data.get("isOff")),
        )

    def to_mapping(self) -> dict:
        out = {"timeIn": self.time_in, "timeOut": self.time_out}
        if self.is_off:
            out["isOff"] = True
        return out


@dataclass(frozen=True)
class WeeklySchedule:
    """One entry of the recurring weekly pattern (day_of_week: Monday=1 .. Sunday=7)."""

    day_of_week: int
    time_in: str = ""
    time_out: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WeeklySchedule":
        return cls(
            day_of_week=int(data["dayOfWeek"]),
            time_in=str(data.get("timeIn") or ""),
            time_out=str(data.get("timeOut") or ""),
        )

    def to_mapping(self) -> dict:
        return {"dayOfWeek": self.day_of_week, "timeIn": self.time_in, "timeOut": self.time_out}


@dataclass(frozen=True)
class EmploymentType:
    """Named employee category carrying its schedule and time-tracking rule."""

    type: str
    hours_of_work: float = c.DEFAULT_HOURS_OF_WORK
    requires_time_tracking: bool = True
    weekly_schedules: Optional[tuple[WeeklySchedule, ...]] = None
    # "YYYY-MM" -> "YYYY-MM-DD" -> DailySchedule
    month_schedules: Optional[Mapping[str, Mapping[str, DailySchedule]]] = None

    def __post_init__(self):
        if self.weekly_schedules:
            days = [w.day_of_week for w in self.weekly_schedules]
            if len(days) != len(set(days)):
                raise ValueError(f"Employment type {self.type!r} has duplicate weekly entries")
            if any(d < 1 or d > 7 for d in days):
                raise ValueError(f"Employment type {self.type!r} has a dayOfWeek outside 1..7")

    @property
    def standard_hours(self) -> float:
        return float(self.hours_of_work or c.DEFAULT_HOURS_OF_WORK)

    @property
    def standard_minutes(self) -> float:
        return self.standard_hours * 60

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EmploymentType":
        weekly = data.get("weeklySchedules") or data.get("schedules")
        months = data.get("monthSchedules")
        return cls(
            type=str(data["type"]),
            hours_of_work=float(data.get("hoursOfWork") or c.DEFAULT_HOURS_OF_WORK),
            requires_time_tracking=_as_bool(data.get("requiresTimeTracking"), True),
            weekly_schedules=tuple(WeeklySchedule.from_mapping(w) for w in weekly) if weekly else None,
            month_schedules=(
                {
                    ym: {dk: DailySchedule.from_mapping(s) for dk, s in (days or {}).items()}
                    for ym, days in months.items()
                }
                if months
                else None
            ),
        )


def _as_bool(value, default: bool = False) -> bool:
    # "false"/"0" from env or JSON text must not read as True.
    if value is None:
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        if text in {"1", "true", "yes", "on"}:
            return True
        if text in {"0", "false", "no", "off", ""}:
            return False
        raise ValueError(f"Not a boolean: {value!r}")
    return bool(value)


def _or_default(value, default):
    # Zero and missing mean "not configured".
    return value if value else default


@dataclass(frozen=True)
class AttendanceSettings:
    """Pay rules shared by all employment types."""

    late_grace_period: int = c.DEFAULT_GRACE_MINUTES
    late_deduction_per_minute: float = c.DEFAULT_DEDUCTION_PER_MINUTE
    undertime_grace_period: int = c.DEFAULT_GRACE_MINUTES
    undertime_deduction_per_minute: float = c.DEFAULT_DEDUCTION_PER_MINUTE
    overtime_grace_period: int = c.DEFAULT_GRACE_MINUTES
    overtime_hourly_multiplier: float = c.DEFAULT_OVERTIME_HOURLY_MULTIPLIER
    regular_holiday_multiplier: float = c.DEFAULT_REGULAR_HOLIDAY_MULTIPLIER
    special_holiday_multiplier: float = c.DEFAULT_SPECIAL_HOLIDAY_MULTIPLIER
    night_differential_multiplier: float = c.DEFAULT_NIGHT_DIFFERENTIAL_MULTIPLIER
    night_differential_start_hour: int = c.DEFAULT_NIGHT_DIFFERENTIAL_START_HOUR
    night_differential_end_hour: int = c.DEFAULT_NIGHT_DIFFERENTIAL_END_HOUR
    count_early_time_in_as_overtime: bool = False

    _FIELDS = {
        "lateGracePeriod": "late_grace_period",
        "lateDeductionPerMinute": "late_deduction_per_minute",
        "undertimeGracePeriod": "undertime_grace_period",
        "undertimeDeductionPerMinute": "undertime_deduction_per_minute",
        "overtimeGracePeriod": "overtime_grace_period",
        "overtimeHourlyMultiplier": "overtime_hourly_multiplier",
        "regularHolidayMultiplier": "regular_holiday_multiplier",
        "specialHolidayMultiplier": "special_holiday_multiplier",
        "nightDifferentialMultiplier": "night_differential_multiplier",
        "nightDifferentialStartHour": "night_differential_start_hour",
        "nightDifferentialEndHour": "night_differential_end_hour",
        "countEarlyTimeInAsOvertime": "count_early_time_in_as_overtime",
    }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, base: Optional["AttendanceSettings"] = None) -> "AttendanceSettings":
        """Build settings from camelCase or snake_case keys; unknown keys are ignored."""

        base = base or cls()
        values: dict[str, Any] = {}
        for camel, snake in cls._FIELDS.items():
            if camel in data:
                values[snake] = data[camel]
            elif snake in data:
                values[snake] = data[snake]

        def num(name: str, cast):
            raw = values.get(name)
            return cast(raw) if raw is not None else getattr(base, name)

        return cls(
            late_grace_period=num("late_grace_period", int),
            late_deduction_per_minute=num("late_deduction_per_minute", float),
            undertime_grace_period=num("undertime_grace_period", int),
            undertime_deduction_per_minute=num("undertime_deduction_per_minute", float),
            overtime_grace_period=num("overtime_grace_period", int),
            overtime_hourly_multiplier=_or_default(
                num("overtime_hourly_multiplier", float), c.DEFAULT_OVERTIME_HOURLY_MULTIPLIER
            ),
            regular_holiday_multiplier=_or_default(
                num("regular_holiday_multiplier", float), c.DEFAULT_REGULAR_HOLIDAY_MULTIPLIER
            ),
            special_holiday_multiplier=_or_default(
                num("special_holiday_multiplier", float), c.DEFAULT_SPECIAL_HOLIDAY_MULTIPLIER
            ),
            night_differential_multiplier=_or_default(
                num("night_differential_multiplier", float), c.DEFAULT_NIGHT_DIFFERENTIAL_MULTIPLIER
            ),
            night_differential_start_hour=_or_default(
                num("night_differential_start_hour", int), c.DEFAULT_NIGHT_DIFFERENTIAL_START_HOUR
            ),
            night_differential_end_hour=_or_default(
                num("night_differential_end_hour", int), c.DEFAULT_NIGHT_DIFFERENTIAL_END_HOUR
            ),
            count_early_time_in_as_overtime=_as_bool(
                values.get("count_early_time_in_as_overtime"), base.count_early_time_in_as_overtime
            ),
        )

    def holiday_multiplier_for(self, holiday_type: HolidayType) -> float:
        if holiday_type == HolidayType.SPECIAL:
            return self.special_holiday_multiplier
        return self.regular_holiday_multiplier
