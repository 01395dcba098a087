"""Query result models."""

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class HolidayRecord:
    """A holiday found in a date range."""

    date: datetime.date
    name: str


@dataclass(frozen=True)
class HolidayCheck:
    """Result of checking a single date."""

    is_holiday: bool
    name: str | None = None
    date: datetime.date | None = None

    @classmethod
    def not_holiday(cls) -> "HolidayCheck":
        """Result for a date that is not a holiday."""
        return cls(is_holiday=False)

    def __bool__(self) -> bool:
        return self.is_holiday
