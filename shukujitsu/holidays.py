"""Japanese national holiday queries."""

from datetime import date, datetime, timedelta

from shukujitsu.cache import HolidayCache, get_default_cache
from shukujitsu.dates import DATE_KEY_FORMAT, DateLike, date_key, normalize, to_calendar_date
from shukujitsu.models import HolidayCheck, HolidayRecord

ONE_DAY = timedelta(days=1)


class HolidayCalendar:
    """Holiday lookups backed by a HolidayCache."""

    def __init__(self, cache: HolidayCache) -> None:
        self.cache = cache

    def holiday_name(self, value: DateLike) -> str | None:
        """Get the name of a Japanese holiday, or None if not a holiday."""
        key = date_key(normalize(value))
        return self.cache.ensure_fresh().get(key)

    def is_holiday(self, value: DateLike) -> HolidayCheck:
        """Check if a date is a Japanese national holiday."""
        normalized = normalize(value)
        name = self.holiday_name(normalized)
        if name is None:
            return HolidayCheck.not_holiday()
        return HolidayCheck(is_holiday=True, name=name, date=normalized)

    def holidays_between(self, start: DateLike, end: DateLike) -> list[HolidayRecord]:
        """
        List holidays from start to end, both inclusive, in date order.

        A reversed range (start after end) is empty rather than an error.
        """
        first = to_calendar_date(normalize(start))
        last = to_calendar_date(normalize(end))
        if first > last:
            return []

        table = self.cache.ensure_fresh()
        records = []
        current = first
        while current <= last:
            name = table.get(date_key(current))
            if name is not None:
                records.append(HolidayRecord(date=current, name=name))
            current += ONE_DAY
        return records

    def is_working_day(self, value: DateLike) -> bool:
        """
        Check if a date is a working day.

        A working day is:
        - Not a weekend (Saturday/Sunday)
        - Not a Japanese national holiday
        """
        normalized = normalize(value)
        # 5 = Saturday, 6 = Sunday
        if to_calendar_date(normalized).weekday() in (5, 6):
            return False
        return self.holiday_name(normalized) is None

    def holidays(self) -> dict[date, str]:
        """All known holidays keyed by date, in date order."""
        known = {}
        for key, name in self.cache.ensure_fresh().items():
            try:
                day = datetime.strptime(key, DATE_KEY_FORMAT).date()
            except ValueError:
                continue
            known[day] = name
        return dict(sorted(known.items()))


def default_calendar() -> HolidayCalendar:
    """Calendar backed by the process-wide cache."""
    return HolidayCalendar(get_default_cache())


def get_holiday(value: DateLike) -> str | None:
    """Get the name of a Japanese holiday, or None if not a holiday."""
    # Invalid dates fail before the default cache is configured
    normalized = normalize(value)
    return default_calendar().holiday_name(normalized)


def is_holiday(value: DateLike) -> HolidayCheck:
    """Check if a date is a Japanese national holiday."""
    normalized = normalize(value)
    return default_calendar().is_holiday(normalized)


def between_holiday(start: DateLike, end: DateLike) -> list[HolidayRecord]:
    """List holidays between two dates, both inclusive."""
    first, last = normalize(start), normalize(end)
    return default_calendar().holidays_between(first, last)


def is_working_day(value: DateLike) -> bool:
    """Check if a date is neither a weekend nor a Japanese holiday."""
    normalized = normalize(value)
    return default_calendar().is_working_day(normalized)


def refresh() -> None:
    """Force the process-wide cache to fetch the holiday CSV again."""
    get_default_cache().refresh()


def last_updated() -> datetime | None:
    """Time the process-wide cache was last populated, or None."""
    return get_default_cache().last_fetched_at
