from __future__ import annotations

from enum import Enum


class HolidayType(str, Enum):
    """Holiday category as stored in the holiday calendar."""

    REGULAR = "Regular"
    SPECIAL = "Special"


class DayType(str, Enum):
    """Day category stamped on a compensation record."""

    REGULAR = "Regular"
    HOLIDAY = "Holiday"
    SPECIAL = "Special"


class CompensationState(str, Enum):
    """Who owns the monetary fields of a compensation record.

    COMPUTED: produced by the calculation pipeline, safe to recompute.
    SYNTHESIZED: built on the presence-only path, flagged for review but still recomputable.
    MANUALLY_OVERRIDDEN: hand-edited; only an explicit forced recompute may replace it.
    """

    COMPUTED = "COMPUTED"
    SYNTHESIZED = "SYNTHESIZED"
    MANUALLY_OVERRIDDEN = "MANUALLY_OVERRIDDEN"


class DayClassification(str, Enum):
    WORKED = "WORKED"
    ABSENT = "ABSENT"
    HOLIDAY = "HOLIDAY"
    OFF = "OFF"


class PayPath(str, Enum):
    SIMPLIFIED = "SIMPLIFIED"
    DETAILED = "DETAILED"


class MissingTimeField(str, Enum):
    TIME_IN = "timeIn"
    TIME_OUT = "timeOut"
