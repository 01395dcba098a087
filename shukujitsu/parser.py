"""Holiday CSV parsing."""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TypeAlias

from shukujitsu.dates import canonical_key

logger = logging.getLogger(__name__)

HolidayTable: TypeAlias = Mapping[str, str]

EMPTY_TABLE: HolidayTable = MappingProxyType({})


def is_holiday_row(date_field: str, name_field: str) -> bool:
    """A row is kept only when both fields are non-empty after trimming."""
    return bool(date_field.strip()) and bool(name_field.strip())


def parse_rows(text: str) -> Iterator[tuple[str, str]]:
    """
    Yield (date, name) pairs from decoded CSV text.

    The first line is always treated as a header and dropped. Blank lines,
    lines without a comma and lines with an empty field are skipped.
    Only the first comma splits a line, the rest belongs to the name.
    Rows end at a line feed with an optional carriage return. No other
    separator splits a row.
    """
    lines = text.split("\n")[1:]
    for raw_line in lines:
        line = raw_line.removesuffix("\r")
        if not line.strip():
            continue
        date_field, sep, name_field = line.partition(",")
        if not sep or not is_holiday_row(date_field, name_field):
            logger.debug("Skipping malformed holiday row: %r", line)
            continue
        yield date_field.strip(), name_field.strip()


def parse(payload: bytes, encoding: str = "utf-8") -> HolidayTable:
    """Decode and parse the holiday CSV into a date-key to name table."""
    text = payload.decode(encoding, errors="replace")

    holidays: dict[str, str] = {}
    # Later rows win on duplicate dates
    for date_field, name in parse_rows(text):
        holidays[canonical_key(date_field)] = name

    logger.debug("Parsed %d holidays", len(holidays))
    return MappingProxyType(holidays)
