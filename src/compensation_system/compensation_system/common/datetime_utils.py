from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta

from ..core.constants import TIME_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock(value: str) -> time:
    """Parse an "HH:mm" clock string into time."""
    return datetime.strptime(value.strip(), TIME_FORMAT).time()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_key(value: date) -> str:
    """Key of the month-specific schedule map, e.g. "2025-03"."""
    return f"{value.year:04d}-{value.month:02d}"


def date_key(value: date) -> str:
    """Key of a single date inside a month schedule, e.g. "2025-03-07"."""
    return value.strftime("%Y-%m-%d")


def minutes_between(later: datetime, earlier: datetime) -> int:
    """Signed difference in whole minutes (rounded like the time clock does)."""
    return int(round((later - earlier).total_seconds() / 60))


def combine_with_rollover(work_date: date, start: str, end: str) -> tuple[datetime, datetime]:
    """Anchor an "HH:mm" pair on work_date.

    The end instant moves to the next calendar day when its hour is earlier
    than the start hour. A reversed pair inside one hour (08:30 -> 08:10)
    stays on work_date and yields a negative span.
    """

    start_t = parse_clock(start)
    end_t = parse_clock(end)
    start_at = datetime.combine(work_date, start_t)
    end_at = datetime.combine(work_date, end_t)
    if end_t.hour < start_t.hour:
        end_at += timedelta(days=1)
    return start_at, end_at


def format_12h(value: str) -> str:
    """Format "17:30" as "5:30PM"."""
    t = parse_clock(value)
    hour = t.hour % 12 or 12
    suffix = "AM" if t.hour < 12 else "PM"
    return f"{hour}:{t.minute:02d}{suffix}"
