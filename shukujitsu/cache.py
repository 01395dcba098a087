"""In-memory holiday table cache."""

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from shukujitsu.config import CACHE_DURATION, SourceConfig
from shukujitsu.parser import EMPTY_TABLE, HolidayTable, parse
from shukujitsu.source import HolidaySource, HttpHolidaySource

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class HolidayCache:
    """
    Owns one holiday table and decides when to fetch it again.

    The table is replaced as a whole on each population, never edited in
    place, so a reference obtained from `table` stays consistent. A failed
    population leaves the previous table and timestamp untouched and
    propagates the error.
    """

    def __init__(
        self,
        source: HolidaySource,
        max_age: timedelta = CACHE_DURATION,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.source = source
        self.max_age = max_age
        self._clock = clock
        self._table: HolidayTable = EMPTY_TABLE
        self._last_fetched_at: datetime | None = None
        self._lock = threading.Lock()

    @property
    def table(self) -> HolidayTable:
        """Current table, without fetching."""
        return self._table

    @property
    def last_fetched_at(self) -> datetime | None:
        """Time of the last successful population, or None."""
        return self._last_fetched_at

    def is_stale(self) -> bool:
        """Check whether the table needs to be (re)populated."""
        if self._last_fetched_at is None:
            return True
        return self._clock() - self._last_fetched_at >= self.max_age

    def ensure_fresh(self) -> HolidayTable:
        """Return the table, populating it first if missing or stale."""
        if not self.is_stale():
            logger.debug("Holiday cache hit")
            return self._table
        with self._lock:
            # Another thread may have populated while we waited
            if self.is_stale():
                self._populate()
            return self._table

    def refresh(self) -> HolidayTable:
        """Fetch and parse the table regardless of its age."""
        with self._lock:
            self._populate()
            return self._table

    def _populate(self) -> None:
        logger.info("Populating holiday table")
        try:
            payload = self.source.fetch()
            table = parse(payload, self.source.encoding)
        except Exception as exc:
            logger.warning("Holiday table population failed: %s", exc)
            raise
        self._table = table
        self._last_fetched_at = self._clock()
        logger.info("Loaded %d holidays", len(table))


_default_cache: HolidayCache | None = None
_default_lock = threading.Lock()


def get_default_cache() -> HolidayCache:
    """Get the process-wide cache, creating it on first use."""
    global _default_cache  # noqa: PLW0603
    with _default_lock:
        if _default_cache is None:
            config = SourceConfig.load_default()
            _default_cache = HolidayCache(
                HttpHolidaySource.from_config(config), max_age=config.cache_duration
            )
        return _default_cache


def reset_default_cache() -> None:
    """Drop the process-wide cache so the next query builds a new one."""
    global _default_cache  # noqa: PLW0603
    with _default_lock:
        _default_cache = None
