"""Japanese national holiday lookups backed by the Cabinet Office CSV."""

from shukujitsu.cache import HolidayCache, get_default_cache, reset_default_cache
from shukujitsu.config import SourceConfig
from shukujitsu.errors import ConfigError, InvalidDateError, NetworkError, ShukujitsuError
from shukujitsu.holidays import (
    HolidayCalendar,
    between_holiday,
    get_holiday,
    is_holiday,
    is_working_day,
    last_updated,
    refresh,
)
from shukujitsu.models import HolidayCheck, HolidayRecord
from shukujitsu.source import HttpHolidaySource, StaticHolidaySource

__all__ = [
    "ConfigError",
    "HolidayCache",
    "HolidayCalendar",
    "HolidayCheck",
    "HolidayRecord",
    "HttpHolidaySource",
    "InvalidDateError",
    "NetworkError",
    "ShukujitsuError",
    "SourceConfig",
    "StaticHolidaySource",
    "between_holiday",
    "get_default_cache",
    "get_holiday",
    "is_holiday",
    "is_working_day",
    "last_updated",
    "refresh",
    "reset_default_cache",
]
