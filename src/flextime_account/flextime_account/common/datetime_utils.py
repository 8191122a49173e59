from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from ..core.constants import TABLE_DATE_FORMAT
from ..core.exceptions import ValidationError

# Relative day tokens accepted for period bounds (English and the legacy German ones)
RELATIVE_DAY_OFFSETS = {
    "yesterday": -1,
    "today": 0,
    "tomorrow": 1,
    "gestern": -1,
    "heute": 0,
    "morgen": 1,
}

_CLOCK_TIME = re.compile(r"(\d{1,2}):(\d{2})")


def parse_table_date(value: str) -> date:
    """Parse DD.MM.YYYY string into date."""
    return datetime.strptime(value.strip(), TABLE_DATE_FORMAT).date()


def parse_clock_minutes(value: str) -> int:
    """Parse HH:MM into minutes since midnight; "24:00" (end of day) is allowed."""
    match = _CLOCK_TIME.fullmatch(value.strip())
    if not match:
        raise ValueError(f"time data {value!r} does not match HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59 or hours > 24 or (hours == 24 and minutes):
        raise ValueError(f"time {value!r} is out of range 00:00-24:00")
    return hours * 60 + minutes


def format_table_date(value: date) -> str:
    return value.strftime(TABLE_DATE_FORMAT)


def minutes_between(start: int, end: int) -> int:
    """Absolute distance between two clock times (minutes since midnight) on the same day."""
    return abs(end - start)


def week_start(value: date) -> date:
    """Monday on or before `value`."""
    return value - timedelta(days=value.weekday())


def week_end(value: date) -> date:
    """Sunday on or after `value`."""
    return value + timedelta(days=6 - value.weekday())


def is_workday(value: date) -> bool:
    return value.weekday() < 5


def resolve_date_token(value: str, *, today: date) -> date:
    """Resolve a period bound: a relative day token or a DD.MM.YYYY date."""
    token = value.strip().lower()
    if token in RELATIVE_DAY_OFFSETS:
        return today + timedelta(days=RELATIVE_DAY_OFFSETS[token])
    try:
        return parse_table_date(token)
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected DD.MM.YYYY or one of {sorted(RELATIVE_DAY_OFFSETS)}")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
