class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""


class InvalidDateError(DomainError):
    """Raised when an attendance day falls outside its month."""

    def __init__(self, year: int, month: int, day: int):
        super().__init__(f"Day {day} is not valid for {year}-{month:02d}")
        self.year = year
        self.month = month
        self.day = day


class ScheduleError(DomainError):
    """Base class for schedule resolution problems."""


class MissingScheduleError(ScheduleError):
    """Raised when a time-tracked employment type has no schedule for a date."""


class IncompleteScheduleTimesError(ScheduleError):
    """Raised when a resolved working schedule lacks timeIn or timeOut."""


class ManualOverrideError(DomainError):
    """Raised when a recompute would replace a hand-edited record without force."""


class PersistenceError(DomainError):
    """Raised when a storage collaborator fails to read or write."""
