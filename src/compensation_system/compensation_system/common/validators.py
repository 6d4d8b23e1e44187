from __future__ import annotations

from datetime import datetime

from ..core.constants import TIME_FORMAT
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_non_negative(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_clock(value: str, field_name: str) -> str:
    """Accept "HH:mm" and return it normalized to two-digit fields."""
    try:
        return datetime.strptime((value or "").strip(), TIME_FORMAT).strftime(TIME_FORMAT)
    except ValueError:
        raise ValidationError(f"{field_name} must be a time (HH:MM)")


def require_month(year: int, month: int) -> tuple[int, int]:
    if int(month) < 1 or int(month) > 12:
        raise ValidationError("Month must be between 1 and 12")
    if int(year) < 1:
        raise ValidationError("Year is not valid")
    return int(year), int(month)
