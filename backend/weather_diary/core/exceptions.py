"""
Domain errors raised by the service layer.
"""


class DiaryError(Exception):
    """Base class for diary domain errors."""


class InvalidDate(DiaryError):
    """Raised when a requested diary date is outside the supported range."""

    MESSAGE = "Date is too far in the past or future"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class DiaryNotFound(DiaryError):
    """Raised when no diary entry exists for a date."""

    def __init__(self, entry_date=None):
        self.entry_date = entry_date
        if entry_date is None:
            super().__init__("Diary entry not found")
        else:
            super().__init__(f"Diary entry not found for {entry_date.isoformat()}")


class WeatherUnavailable(DiaryError):
    """Raised when the weather API could not provide an observation."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Weather data unavailable: {reason}")
