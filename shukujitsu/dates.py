"""Date normalization and the canonical lookup key."""

import math
import re
from datetime import UTC, date, datetime, timedelta
from typing import TypeAlias

from dateutil import parser as date_parser

from shukujitsu.errors import InvalidDateError

DateLike: TypeAlias = int | float | str | date

# Shared by the CSV parser and the query layer
DATE_KEY_FORMAT = "%Y-%m-%d"

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_NUMERIC_DATE = re.compile(r"^(\d{4})[/-](\d{1,2})[/-](\d{1,2})$")


def normalize(value: DateLike) -> date:
    """
    Convert a date-like value into a date or datetime.

    Numbers are milliseconds since the Unix epoch (UTC). Strings go through
    the dateutil parser. date and datetime values are returned as-is.
    """
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        msg = f"Invalid date: {value!r}"
        raise InvalidDateError(msg)
    if isinstance(value, date):
        return value
    if isinstance(value, int | float):
        return _from_epoch_millis(value)
    if isinstance(value, str):
        return _from_string(value)
    msg = f"Unsupported date type: {type(value).__name__}"
    raise InvalidDateError(msg)


def to_calendar_date(value: date) -> date:
    """Reduce a normalized value to its calendar day (aware datetimes in UTC)."""
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(UTC)
        return value.date()
    return value


def date_key(value: date) -> str:
    """Render the lookup key for a normalized date value."""
    return to_calendar_date(value).strftime(DATE_KEY_FORMAT)


def canonical_key(raw: str) -> str:
    """
    Rewrite a CSV date field into the lookup key format.

    Numeric 'Y/M/D' and 'Y-M-D' dates are re-rendered with date_key.
    Anything else, impossible dates included, is returned trimmed but
    otherwise verbatim.
    """
    raw = raw.strip()
    match = _NUMERIC_DATE.match(raw)
    if not match:
        return raw
    year, month, day = (int(part) for part in match.groups())
    try:
        return date_key(date(year, month, day))
    except ValueError:
        return raw


def _from_epoch_millis(millis: float) -> datetime:
    if not math.isfinite(millis):
        msg = f"Invalid timestamp: {millis!r}"
        raise InvalidDateError(msg)
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        msg = f"Timestamp out of range: {millis!r}"
        raise InvalidDateError(msg) from exc


def _from_string(text: str) -> datetime:
    if not text.strip():
        msg = "Invalid date: empty string"
        raise InvalidDateError(msg)
    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError) as exc:
        msg = f"Invalid date: {text!r}"
        raise InvalidDateError(msg) from exc
