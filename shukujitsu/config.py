"""Configuration management."""

import configparser
import math
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from shukujitsu.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "shukujitsu" / "config.ini"

# Cabinet Office list of national holidays. The file is served as Shift_JIS;
# set SHUKUJITSU_ENCODING=cp932 to decode the names correctly.
HOLIDAY_CSV_URL = "https://www8.cao.go.jp/chosei/shukujitsu/syukujitsu.csv"
DEFAULT_ENCODING = "utf-8"
DEFAULT_TIMEOUT = 10.0  # seconds
CACHE_DURATION = timedelta(hours=24)


@dataclass(frozen=True)
class SourceConfig:
    """Holiday data source configuration."""

    url: str = HOLIDAY_CSV_URL
    encoding: str = DEFAULT_ENCODING
    timeout: float = DEFAULT_TIMEOUT
    cache_duration: timedelta = CACHE_DURATION

    @classmethod
    def from_env(cls) -> "SourceConfig | None":
        """Load configuration from environment variables."""
        values = {
            "url": os.environ.get("SHUKUJITSU_URL"),
            "encoding": os.environ.get("SHUKUJITSU_ENCODING"),
            "timeout": os.environ.get("SHUKUJITSU_TIMEOUT"),
            "cache_hours": os.environ.get("SHUKUJITSU_CACHE_HOURS"),
        }
        if not any(values.values()):
            return None
        return cls._from_values(**values)

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "SourceConfig | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(path, encoding="utf-8")
        except configparser.Error as exc:
            msg = f"Invalid config file {path}: {exc}"
            raise ConfigError(msg) from exc
        if not config.has_section("source"):
            return None
        section = config["source"]
        return cls._from_values(
            url=section.get("url"),
            encoding=section.get("encoding"),
            timeout=section.get("timeout"),
            cache_hours=section.get("cacheHours"),
        )

    @classmethod
    def load_default(cls) -> "SourceConfig":
        """Resolve configuration from the environment, then the config file, then defaults."""
        return cls.from_env() or cls.load(DEFAULT_CONFIG_PATH) or cls()

    @classmethod
    def _from_values(
        cls,
        url: str | None,
        encoding: str | None,
        timeout: str | None,
        cache_hours: str | None,
    ) -> "SourceConfig":
        return cls(
            url=url or HOLIDAY_CSV_URL,
            encoding=encoding or DEFAULT_ENCODING,
            timeout=_parse_positive("timeout", timeout) if timeout else DEFAULT_TIMEOUT,
            cache_duration=(
                timedelta(hours=_parse_positive("cache hours", cache_hours))
                if cache_hours
                else CACHE_DURATION
            ),
        )


def _parse_positive(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        msg = f"Invalid {name}: {raw!r}"
        raise ConfigError(msg) from exc
    if not (value > 0 and math.isfinite(value)):
        msg = f"{name} must be positive, got {raw!r}"
        raise ConfigError(msg)
    return value
