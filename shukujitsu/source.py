"""Holiday CSV data sources."""

import logging
from typing import Protocol, Self

import requests

from shukujitsu.config import DEFAULT_ENCODING, DEFAULT_TIMEOUT, HOLIDAY_CSV_URL, SourceConfig
from shukujitsu.errors import NetworkError

logger = logging.getLogger(__name__)


class HolidaySource(Protocol):
    """Anything that can produce the raw holiday CSV payload."""

    encoding: str

    def fetch(self) -> bytes:
        """Return the raw CSV bytes, raising NetworkError on failure."""
        ...


class HttpHolidaySource:
    """Fetches the holiday CSV over HTTPS."""

    def __init__(
        self,
        url: str = HOLIDAY_CSV_URL,
        encoding: str = DEFAULT_ENCODING,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.url: str = url
        self.encoding: str = encoding
        self.timeout: float = timeout
        self._session: requests.Session | None = session
        self._owns_session: bool = False

    @classmethod
    def from_config(cls, config: SourceConfig) -> "HttpHolidaySource":
        """Build a source from a SourceConfig."""
        return cls(url=config.url, encoding=config.encoding, timeout=config.timeout)

    def __enter__(self) -> Self:
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._owns_session and self._session:
            self._session.close()
            self._session = None
        self._owns_session = False

    def fetch(self) -> bytes:
        """Download the CSV payload."""
        if self._session is not None:
            return self._get(self._session)
        with requests.Session() as session:
            return self._get(session)

    def _get(self, session: requests.Session) -> bytes:
        logger.debug("Fetching holiday CSV from %s", self.url)
        try:
            response = session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            msg = f"Could not fetch holiday CSV from {self.url}: {exc}"
            raise NetworkError(msg) from exc
        return response.content


class StaticHolidaySource:
    """Serves a fixed CSV payload, for offline use."""

    def __init__(self, payload: bytes, encoding: str = DEFAULT_ENCODING) -> None:
        self.payload = payload
        self.encoding = encoding

    def fetch(self) -> bytes:
        """Return the stored payload."""
        return self.payload
