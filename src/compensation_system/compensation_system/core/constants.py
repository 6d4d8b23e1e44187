"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HOURS_OF_WORK = 8
DEFAULT_GRACE_MINUTES = 5
DEFAULT_DEDUCTION_PER_MINUTE = 1.0
DEFAULT_OVERTIME_HOURLY_MULTIPLIER = 1.25
DEFAULT_REGULAR_HOLIDAY_MULTIPLIER = 1.5
DEFAULT_SPECIAL_HOLIDAY_MULTIPLIER = 2.0
DEFAULT_NIGHT_DIFFERENTIAL_MULTIPLIER = 0.1
DEFAULT_NIGHT_DIFFERENTIAL_START_HOUR = 22
DEFAULT_NIGHT_DIFFERENTIAL_END_HOUR = 6

# Night hours below this are not paid at all.
NIGHT_DIFFERENTIAL_MIN_HOURS = 1

# Overtime is only credited in whole hours.
OVERTIME_BLOCK_MINUTES = 60

# Punch value used by employment types that only record presence.
PRESENT_SENTINEL = "present"

TIME_FORMAT = "%H:%M"
