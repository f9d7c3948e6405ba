"""Calendar-day keys in a single fixed calendar (UTC).

Every date that is compared, range-checked or used as a map key goes through
``to_date_key`` so that local-time interpretation can never shift a trade by a
day.
"""

import re
from datetime import date, datetime, timedelta
from typing import Union

import pytz
from dateutil import parser as date_parser

from fundtrades.core.exceptions import InvalidDateError

UTC = pytz.utc

DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DateInput = Union[str, datetime, date]

# dateutil fills missing fields from `default`; two defaults that differ in
# year, month and day expose strings that lack any of them
_PARSE_DEFAULTS = (datetime(1970, 1, 1), datetime(1971, 2, 2))


def now_utc() -> datetime:
    """Return current time as an aware UTC datetime."""
    return datetime.now(UTC)


def is_date_key(value: object) -> bool:
    """True if value is already a canonical YYYY-MM-DD string."""
    return isinstance(value, str) and DATE_KEY_RE.match(value) is not None


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC. Naive datetimes are taken to be UTC already."""
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def to_date_key(value: DateInput) -> str:
    """
    Convert a date string, datetime or date to a canonical UTC day key.

    Canonical keys are returned unchanged. Other strings are parsed as an
    instant and truncated to the UTC calendar day; they must name a full
    calendar date.
    """
    if isinstance(value, str):
        if DATE_KEY_RE.match(value):
            parse_date_key(value)
            return value
        try:
            parsed, alternate = (date_parser.parse(value, default=d) for d in _PARSE_DEFAULTS)
        except (ValueError, OverflowError) as e:
            raise InvalidDateError(value) from e
        if parsed != alternate:
            raise InvalidDateError(value, reason="incomplete date")
        return to_utc(parsed).date().isoformat()
    if isinstance(value, datetime):
        return to_utc(value).date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    raise InvalidDateError(value, reason=f"unsupported type {type(value).__name__}")


def add_days(date_key: str, days: int) -> str:
    """Add calendar days to a canonical day key."""
    if not is_date_key(date_key):
        raise InvalidDateError(date_key, reason="expected YYYY-MM-DD")
    year, month, day = (int(part) for part in date_key.split("-"))
    try:
        start = UTC.localize(datetime(year, month, day))
        shifted = start + timedelta(days=days)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(date_key, reason=str(e)) from e
    return shifted.date().isoformat()


def parse_date_key(date_key: str) -> date:
    """Convert a canonical day key to a date object."""
    if not is_date_key(date_key):
        raise InvalidDateError(date_key, reason="expected YYYY-MM-DD")
    try:
        return date.fromisoformat(date_key)
    except ValueError as e:
        raise InvalidDateError(date_key, reason=str(e)) from e
