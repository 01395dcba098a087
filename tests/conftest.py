"""Shared fixtures for holiday tests."""

from datetime import UTC, datetime, timedelta

import pytest

from shukujitsu.cache import HolidayCache, reset_default_cache
from shukujitsu.errors import NetworkError
from shukujitsu.holidays import HolidayCalendar

SAMPLE_CSV = """国民の祝日・休日月日,国民の祝日・休日名称
2024-01-01,元日
2024-01-08,成人の日
2024-02-11,建国記念の日
2024-02-12,休日
""".encode()


class FakeSource:
    """In-memory source that counts fetches and can be told to fail."""

    def __init__(self, payload: bytes = SAMPLE_CSV, encoding: str = "utf-8") -> None:
        self.payload = payload
        self.encoding = encoding
        self.calls = 0
        self.error: Exception | None = None

    def fetch(self) -> bytes:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload

    def fail_with(self, message: str = "Network error") -> None:
        self.error = NetworkError(message)


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=UTC)) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def source():
    """Fake source serving the sample CSV."""
    return FakeSource()


@pytest.fixture
def clock():
    """Clock starting at 2024-01-01 UTC."""
    return FakeClock()


@pytest.fixture
def cache(source, clock):
    """Cache over the fake source and clock."""
    return HolidayCache(source, clock=clock)


@pytest.fixture
def calendar(cache):
    """Calendar over the fake cache."""
    return HolidayCalendar(cache)


@pytest.fixture(autouse=True)
def _isolate_default_cache():
    """Never leak the process-wide cache between tests."""
    reset_default_cache()
    yield
    reset_default_cache()
